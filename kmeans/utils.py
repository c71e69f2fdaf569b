"""Helpers for building test data and checking clusterings."""

from typing import Sequence

import numpy as np
from sklearn.datasets import make_blobs
from sklearn.metrics import adjusted_rand_score


def create_sample_dataset(
    n_samples: int = 200,
    n_features: int = 2,
    centers=2,
    cluster_std: float = 0.5,
    dtype=np.float64,
    shuffle: bool = False,
    random_state: int = 42
):
    """Gaussian blobs for clustering experiments.

    With ``shuffle=False`` the points come grouped by blob, in blob order.

    Returns:
        (X, y): data of shape (n_samples, n_features) in ``dtype`` and the
        true blob index of every point
    """
    X, y = make_blobs(
        n_samples=n_samples,
        n_features=n_features,
        centers=centers,
        cluster_std=cluster_std,
        shuffle=shuffle,
        random_state=random_state
    )
    return X.astype(dtype), y


def same_partition(a: Sequence[int], b: Sequence[int]) -> bool:
    """True if two assignments group the points identically, whatever the labels."""
    a = np.asarray(a).tolist()
    b = np.asarray(b).tolist()
    if len(a) != len(b):
        return False
    # Labels correspond one-to-one exactly when every label pairs with a single partner
    pairs = set(zip(a, b))
    return len(pairs) == len(set(a)) == len(set(b))


def evaluate_clustering(labels: Sequence[int], true_labels: Sequence[int]) -> dict:
    """Compare an assignment against reference labels."""
    labels = np.asarray(labels)
    _, cluster_sizes = np.unique(labels, return_counts=True)

    return {
        'adjusted_rand_score': float(adjusted_rand_score(true_labels, labels)),
        'same_partition': same_partition(labels, true_labels),
        'n_clusters': int(len(cluster_sizes)),
        'cluster_sizes': sorted(int(size) for size in cluster_sizes)
    }
