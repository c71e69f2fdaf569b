"""
Lloyd's k-means clustering for float32 and float64 vector data.

Example:
    >>> from kmeans import kmeans
    >>> kmeans([[-1.1], [-1.2], [1.1], [1.2]], 2)
    array([0, 0, 1, 1])
"""

from .version import __version__
from .exceptions import KMeansError, DimensionMismatchError, EmptyClusterError
from .lloyd import Lloyd, f32, f64, kmeans
from .estimator import KMeans
from .utils import create_sample_dataset, same_partition, evaluate_clustering

__all__ = [
    "Lloyd", "f32", "f64", "kmeans", "KMeans",
    "KMeansError", "DimensionMismatchError", "EmptyClusterError",
    "create_sample_dataset", "same_partition", "evaluate_clustering",
    "__version__",
]
