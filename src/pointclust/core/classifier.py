"""
Online nearest-centroid classifier.

Two operations:
1. classify(): assign one point to the nearest cluster within the
   threshold, or spawn a new cluster for it
2. merge_clusters(): one greedy pass collapsing clusters whose centroids
   lie within the threshold of each other

Both scans are linear over the cluster list, so ties resolve to the
earliest cluster and the result depends on input order.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

import numpy as np

from .cluster import Cluster
from .point import Point, distance


def find_nearest_cluster(
    point: Point,
    clusters: Sequence[Cluster],
) -> tuple[Optional[int], float]:
    """Find the index of the cluster whose centroid is nearest to a point."""
    best_index = None
    best_distance = math.inf

    for i, cluster in enumerate(clusters):
        d = distance(point, cluster.centroid)
        if d < best_distance:
            best_distance = d
            best_index = i

    return best_index, best_distance


class Classifier:
    """
    Incremental classifier over a growing list of clusters.

    Args:
        threshold: Centroid distance below which a point joins a cluster
            (and below which two clusters merge). Must be >= 0.
    """

    def __init__(self, threshold: float):
        if not threshold >= 0:
            raise ValueError(f"threshold must be >= 0, got {threshold}")
        self.threshold = float(np.float32(threshold))
        self._clusters: list[Cluster] = []

    @property
    def clusters(self) -> tuple[Cluster, ...]:
        """Clusters in creation order."""
        return tuple(self._clusters)

    def __len__(self) -> int:
        return len(self._clusters)

    def classify(self, point: Point) -> None:
        """Absorb a point into its nearest cluster or start a new one."""
        index, d = find_nearest_cluster(point, self._clusters)

        if index is not None and d < self.threshold:
            self._clusters[index].absorb(point)
        else:
            self._clusters.append(Cluster.new(point))

    def classify_all(self, points: Iterable[Point]) -> None:
        for point in points:
            self.classify(point)

    def merge_clusters(self) -> None:
        """
        Collapse nearby clusters in a single greedy pass.

        Each cluster is merged into the first already-kept cluster within
        the threshold, otherwise kept as a copy. Kept clusters are compared
        with their updated centroids, but clusters that only become close
        after a merge in this pass are not revisited.
        """
        uniq: list[Cluster] = []

        for cluster in self._clusters:
            for target in uniq:
                if distance(cluster.centroid, target.centroid) < self.threshold:
                    target.merge(cluster)
                    break
            else:
                uniq.append(cluster.copy())

        self._clusters = uniq

    def total_points(self) -> int:
        return sum(c.count for c in self._clusters)

    def summary(self) -> dict:
        """Get classifier state summary."""
        return {
            "threshold": self.threshold,
            "num_clusters": len(self._clusters),
            "total_points": self.total_points(),
            "clusters": [c.to_dict() for c in self._clusters],
        }
