import numpy as np
import pytest

from kmeans.utils import create_sample_dataset, evaluate_clustering, same_partition


def test_same_partition_ignores_label_identity():
    assert same_partition([0, 0, 1, 1], [1, 1, 0, 0])
    assert same_partition([0, 1, 2], [2, 0, 1])
    assert same_partition(np.array([3, 3, 7]), [0, 0, 1])


def test_same_partition_detects_differences():
    assert not same_partition([0, 0, 1, 1], [0, 1, 1, 1])
    # Merging two groups is not the same partition
    assert not same_partition([0, 1, 2], [0, 0, 1])
    assert not same_partition([0, 0, 1], [0, 1, 1])
    assert not same_partition([0, 0], [0, 0, 0])


def test_create_sample_dataset():
    X, y = create_sample_dataset(n_samples=60, n_features=5, centers=3, dtype=np.float32)
    assert X.shape == (60, 5)
    assert X.dtype == np.float32
    assert y.shape == (60,)
    # Unshuffled output comes grouped by blob
    assert y.tolist() == sorted(y.tolist())


def test_create_sample_dataset_is_reproducible():
    X1, _ = create_sample_dataset(random_state=5)
    X2, _ = create_sample_dataset(random_state=5)
    assert np.array_equal(X1, X2)


def test_evaluate_clustering():
    result = evaluate_clustering([1, 1, 0, 0, 0], [0, 0, 1, 1, 1])
    assert result['same_partition']
    assert result['adjusted_rand_score'] == pytest.approx(1.0)
    assert result['n_clusters'] == 2
    assert result['cluster_sizes'] == [2, 3]

    result = evaluate_clustering([0, 0, 0, 0, 0], [0, 0, 1, 1, 1])
    assert not result['same_partition']
    assert result['adjusted_rand_score'] < 1.0
