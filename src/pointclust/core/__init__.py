"""
Online clustering core: points, clusters and the classifier.
"""

from .point import Point, add, subtract, scale, divide, distance
from .cluster import Cluster
from .classifier import Classifier, find_nearest_cluster
from .point_parser import (
    PointFileError,
    PointParseError,
    parse_record,
    parse_points,
    load_points,
)

__all__ = [
    # Point
    "Point",
    "add",
    "subtract",
    "scale",
    "divide",
    "distance",
    # Cluster
    "Cluster",
    # Classifier
    "Classifier",
    "find_nearest_cluster",
    # Ingestion
    "PointFileError",
    "PointParseError",
    "parse_record",
    "parse_points",
    "load_points",
]
