"""
pointclust - single-pass online clustering of 2D points.
"""

from .config import ClusteringConfig
from .core import Point, Cluster, Classifier
from .runner import ClusteringRunner, ClusteringResult

__all__ = [
    "ClusteringConfig",
    "Point",
    "Cluster",
    "Classifier",
    "ClusteringRunner",
    "ClusteringResult",
]
