"""
Lloyd's k-means for dense float32 / float64 data.

The algorithm alternates two steps until the assignment stops changing:

1. assign every point to its nearest centroid (squared Euclidean distance)
2. move every centroid to the mean of the points assigned to it

Seeding is deterministic: with ``step = N // K`` the j-th initial centroid is
the point at index ``j * step``, so identical inputs always produce identical
clusterings.

Each floating-point width has its own :class:`Lloyd` instance (``f32`` and
``f64``); all arithmetic for a call runs in that width.

Example:
    >>> from kmeans.lloyd import f64
    >>> f64.kmeans([[-1.1], [-1.2], [1.1], [1.2]], 2)
    array([0, 0, 1, 1])
"""

from typing import Optional, Sequence, Union

import numpy as np

from .exceptions import DimensionMismatchError, EmptyClusterError

EMPTY_CLUSTER_POLICIES = ('nan', 'raise')

ArrayLike = Union[np.ndarray, Sequence[Sequence[float]]]


def check_empty_cluster_policy(policy: str) -> None:
    if policy not in EMPTY_CLUSTER_POLICIES:
        raise ValueError(f"Unknown empty cluster policy: {policy}")


def squared_euclidean(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    """Sum of squared coordinate differences over the last axis.

    Broadcasts, so ``x[:, None, :]`` against ``y[None, :, :]`` gives the
    full (N, K) distance grid.
    """
    if x.shape[-1:] != y.shape[-1:]:
        raise DimensionMismatchError(
            f"Cannot compare vectors of length {x.shape[-1:]} and {y.shape[-1:]}"
        )
    diff = x - y
    return np.sum(diff * diff, axis=-1, dtype=diff.dtype)


def nearest_centroids(X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Index of the nearest centroid for every row of ``X``.

    Ties go to the lowest centroid index. A NaN distance never wins, so a row
    with no finite distance falls back to cluster 0.

    Builds an (N, K, D) temporary, so memory grows with N * K * D.
    """
    distances = squared_euclidean(X[:, np.newaxis, :], centroids[np.newaxis, :, :])
    distances = np.where(np.isnan(distances), np.inf, distances)
    return np.argmin(distances, axis=1)


def recompute_centroids(
    X: np.ndarray,
    clustering: np.ndarray,
    k: int,
    empty_cluster: str = 'nan'
) -> np.ndarray:
    """Coordinate-wise mean of the points assigned to each of the ``k`` clusters.

    An empty cluster gets an all-NaN centroid under the ``'nan'`` policy and
    raises :class:`EmptyClusterError` under ``'raise'``.
    """
    check_empty_cluster_policy(empty_cluster)
    centroids = np.empty((k, X.shape[1]), dtype=X.dtype)

    for cluster_ix in range(k):
        members = X[clustering == cluster_ix]
        if len(members) == 0 and empty_cluster == 'raise':
            raise EmptyClusterError(cluster_ix)
        # 0 / 0 is the documented NaN result for an empty cluster
        with np.errstate(invalid='ignore', divide='ignore'):
            centroids[cluster_ix] = members.sum(axis=0, dtype=X.dtype) / X.dtype.type(len(members))

    return centroids


class Lloyd:
    """Lloyd's algorithm bound to one floating-point width.

    Args:
        dtype: ``numpy.float32`` or ``numpy.float64`` (or their names)
    """

    SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))

    def __init__(self, dtype=np.float64) -> None:
        dtype = np.dtype(dtype)
        if dtype not in self.SUPPORTED_DTYPES:
            raise ValueError(f"Unsupported dtype: {dtype}")
        self.dtype = dtype

    def __repr__(self) -> str:
        return f"Lloyd(dtype={self.dtype.name})"

    def as_dataset(self, xs: ArrayLike) -> np.ndarray:
        """Convert ``xs`` to an (N, D) array of this width.

        Raises:
            DimensionMismatchError: if the points do not all have the same
                length, or ``xs`` is not a sequence of points
        """
        if isinstance(xs, np.ndarray) and xs.dtype != object:
            X = xs.astype(self.dtype, copy=False)
        else:
            rows = [np.asarray(x, dtype=self.dtype) for x in xs]
            shapes = {row.shape for row in rows}
            if len(shapes) > 1:
                raise DimensionMismatchError(
                    f"Points have differing shapes: {sorted(shapes)}"
                )
            X = np.stack(rows) if rows else np.empty((0, 0), dtype=self.dtype)

        if X.ndim != 2:
            raise DimensionMismatchError(f"Expected a 2-D dataset, got shape {X.shape}")
        return X

    def distance(self, x, y) -> np.ndarray:
        """Squared Euclidean distance between two points."""
        return squared_euclidean(
            np.asarray(x, dtype=self.dtype),
            np.asarray(y, dtype=self.dtype)
        )

    def nearest_centroids(self, xs: ArrayLike, centroids: ArrayLike) -> np.ndarray:
        X = self.as_dataset(xs)
        C = self.as_dataset(centroids)
        return nearest_centroids(X, C)

    def recompute_centroids(
        self,
        xs: ArrayLike,
        clustering: Sequence[int],
        k: int,
        empty_cluster: str = 'nan'
    ) -> np.ndarray:
        X = self.as_dataset(xs)
        return recompute_centroids(X, np.asarray(clustering), k, empty_cluster)

    def kmeans(
        self,
        xs: ArrayLike,
        k: int,
        max_iter: Optional[int] = None,
        empty_cluster: str = 'nan'
    ) -> Optional[np.ndarray]:
        """Assign the N D-dimensional points ``xs`` to ``k`` clusters.

        Args:
            xs: N points of equal length
            k: Number of clusters
            max_iter: Maximum number of update rounds; ``None`` runs until
                the assignment converges
            empty_cluster: ``'nan'`` or ``'raise'``, see :func:`recompute_centroids`

        Returns:
            Array of N cluster indices in ``[0, k)``, or ``None`` when
            ``k`` is not positive or there are fewer than ``k`` points.
        """
        check_empty_cluster_policy(empty_cluster)
        if k <= 0 or len(xs) < k:
            return None

        X = self.as_dataset(xs)

        # Evenly spaced points in data order stand in for random seeding
        step = len(X) // k
        centroids = X[np.arange(k) * step]

        clustering = nearest_centroids(X, centroids)

        count_iter = 0
        while max_iter is None or count_iter < max_iter:
            centroids = recompute_centroids(X, clustering, k, empty_cluster)
            new_clustering = nearest_centroids(X, centroids)

            if np.array_equal(new_clustering, clustering):
                break
            clustering = new_clustering

            count_iter += 1

        return clustering


f32 = Lloyd(np.float32)
f64 = Lloyd(np.float64)

_INSTANCES = {f32.dtype: f32, f64.dtype: f64}


def get_lloyd(dtype=np.float64) -> Lloyd:
    """Return the shared :class:`Lloyd` instance for ``dtype``."""
    dtype = np.dtype(dtype)
    if dtype not in _INSTANCES:
        raise ValueError(f"Unsupported dtype: {dtype}")
    return _INSTANCES[dtype]


def kmeans(
    xs: ArrayLike,
    k: int,
    max_iter: Optional[int] = None,
    dtype=np.float64,
    empty_cluster: str = 'nan'
) -> Optional[np.ndarray]:
    """Lloyd's k-means in the given width. See :meth:`Lloyd.kmeans`."""
    return get_lloyd(dtype).kmeans(xs, k, max_iter=max_iter, empty_cluster=empty_cluster)
