import numpy as np
from sklearn.cluster import KMeans as SklearnKMeans

from kmeans import f32, f64
from kmeans.utils import create_sample_dataset, same_partition


def _evenly_spaced_seeds(X, k):
    return X[np.arange(k) * (len(X) // k)]


def test_matches_sklearn_lloyd_with_same_seeds():
    X, _ = create_sample_dataset(n_samples=600, n_features=16, centers=3, cluster_std=0.5, random_state=42)

    reference = SklearnKMeans(
        n_clusters=3,
        init=_evenly_spaced_seeds(X, 3),
        n_init=1,
        max_iter=300,
        tol=0.0,
        algorithm='lloyd'
    ).fit(X)

    assert same_partition(f64.kmeans(X, 3, max_iter=300), reference.labels_)


def test_float32_matches_sklearn_lloyd():
    centers = np.array([[0.0] * 8, [6.0] * 8, [-6.0] * 8, [6.0, -6.0] * 4])
    X, _ = create_sample_dataset(
        n_samples=400, n_features=8, centers=centers, cluster_std=0.5,
        dtype=np.float32, random_state=1
    )

    reference = SklearnKMeans(
        n_clusters=4,
        init=_evenly_spaced_seeds(X, 4),
        n_init=1,
        tol=0.0,
        algorithm='lloyd'
    ).fit(X)

    assert same_partition(f32.kmeans(X, 4), reference.labels_)
