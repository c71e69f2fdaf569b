"""Errors raised by the k-means routines.

Invalid cluster counts (K = 0, or fewer points than clusters) are not errors:
the driver reports them by returning ``None``.
"""


class KMeansError(Exception):
    """Base class for k-means failures."""


class DimensionMismatchError(KMeansError, ValueError):
    """Points (or a point and a centroid) do not share one dimensionality."""


class EmptyClusterError(KMeansError):
    """A cluster lost all of its points during centroid recomputation."""

    def __init__(self, cluster_index: int) -> None:
        super().__init__(f"Cluster {cluster_index} has no assigned points")
        self.cluster_index = cluster_index
