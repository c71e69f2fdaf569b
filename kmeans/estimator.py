"""
Estimator-style wrapper around the Lloyd driver.
"""

from typing import Optional

import numpy as np

from .lloyd import ArrayLike, check_empty_cluster_policy, get_lloyd


class KMeans:
    """
    K-means clustering with deterministic, data-order-based seeding.

    Only the hard assignment is kept after fitting; centroids and iteration
    counts are internal to the driver.
    """

    def __init__(
        self,
        n_clusters: int,
        max_iter: Optional[int] = None,
        dtype: str = 'float64',
        empty_cluster: str = 'nan',
        verbose: bool = False
    ):
        """
        Initialize K-means clustering.

        Args:
            n_clusters: Number of clusters
            max_iter: Maximum number of update rounds (None = until convergence)
            dtype: Floating-point width, 'float32' or 'float64'
            empty_cluster: 'nan' to let empty clusters produce NaN centroids,
                'raise' to fail with EmptyClusterError
            verbose: Whether to print progress information
        """
        check_empty_cluster_policy(empty_cluster)
        self._lloyd = get_lloyd(dtype)

        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.dtype = self._lloyd.dtype
        self.empty_cluster = empty_cluster
        self.verbose = verbose

        # Results
        self.labels_ = None

    def fit(self, X: ArrayLike) -> 'KMeans':
        """
        Fit K-means clustering to the data.

        Args:
            X: Input data of shape (n_samples, n_features)

        Returns:
            self
        """
        if self.verbose:
            print(f"Fitting K-means with {self.n_clusters} clusters on {len(X)} samples "
                  f"({self.dtype.name})...")

        labels = self._lloyd.kmeans(
            X,
            self.n_clusters,
            max_iter=self.max_iter,
            empty_cluster=self.empty_cluster
        )
        if labels is None:
            raise ValueError(
                f"Cannot form {self.n_clusters} clusters from {len(X)} samples"
            )

        self.labels_ = labels

        if self.verbose:
            print(f"Assigned {len(labels)} samples to "
                  f"{len(np.unique(labels))}/{self.n_clusters} non-empty clusters")

        return self

    def fit_predict(self, X: ArrayLike) -> np.ndarray:
        """
        Fit the model and return cluster labels.

        Args:
            X: Input data of shape (n_samples, n_features)

        Returns:
            Cluster labels
        """
        return self.fit(X).labels_

    def get_cluster_info(self) -> dict:
        """Get information about the clustering results."""
        if self.labels_ is None:
            raise ValueError("Model must be fitted first")

        cluster_sizes = np.bincount(self.labels_, minlength=self.n_clusters)

        return {
            'n_clusters': self.n_clusters,
            'n_samples': int(len(self.labels_)),
            'cluster_sizes': {i: int(size) for i, size in enumerate(cluster_sizes)},
            'n_empty_clusters': int(np.sum(cluster_sizes == 0)),
            'min_cluster_size': int(np.min(cluster_sizes)),
            'max_cluster_size': int(np.max(cluster_sizes))
        }
