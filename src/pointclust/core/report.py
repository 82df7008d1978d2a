"""
Render final clusters for output.
"""

import json
from typing import Iterable

import numpy as np

from .cluster import Cluster


def format_coordinate(value) -> str:
    """Shortest decimal that round-trips the float32 value."""
    value = np.float32(value)
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(value, trim="-")


def format_cluster(cluster: Cluster) -> str:
    x = format_coordinate(cluster.centroid.x)
    y = format_coordinate(cluster.centroid.y)
    return f"[{x}, {y}]: {cluster.count}"


def format_clusters(clusters: Iterable[Cluster]) -> str:
    return "\n".join(format_cluster(c) for c in clusters)


def clusters_to_json(clusters: Iterable[Cluster]) -> str:
    return json.dumps([c.to_dict() for c in clusters], indent=2)
