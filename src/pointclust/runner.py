"""
Clustering runner.

Core loop: classify each point → optional merge pass → report.
Timing covers classification and merging only; ingestion happens before.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, Sequence

from .config import ClusteringConfig
from .core.classifier import Classifier
from .core.cluster import Cluster
from .core.logger import RunLogger
from .core.point import Point


@dataclass
class ClusteringResult:
    """Outcome of a single run."""

    clusters: list[Cluster]
    num_points: int
    elapsed_seconds: float
    merged: bool
    clusters_before_merge: int

    def to_dict(self) -> dict:
        return {
            "num_points": self.num_points,
            "num_clusters": len(self.clusters),
            "clusters_before_merge": self.clusters_before_merge,
            "merged": self.merged,
            "elapsed_seconds": self.elapsed_seconds,
            "clusters": [c.to_dict() for c in self.clusters],
        }


class ClusteringRunner:
    """Drives a Classifier over a point sequence for one configuration."""

    def __init__(self, config: ClusteringConfig, logger: Optional[RunLogger] = None):
        config.validate()
        self.config = config
        self.logger = logger
        self.classifier = Classifier(config.threshold)

    def run(self, points: Sequence[Point]) -> ClusteringResult:
        """
        Classify all points, then merge if configured.

        Args:
            points: Points in arrival order

        Returns:
            ClusteringResult with final clusters and timing
        """
        config = self.config

        if self.logger:
            self.logger.log_points_loaded(len(points))
        if config.verbose:
            print(f"Classifying {len(points)} points (threshold={config.threshold})...")

        start = time.perf_counter()

        self.classifier.classify_all(points)
        clusters_before = len(self.classifier)

        if config.merge:
            self.classifier.merge_clusters()

        elapsed = time.perf_counter() - start

        if self.logger:
            self.logger.log_classification_done(len(points), clusters_before)
            if config.merge:
                self.logger.log_merge_done(clusters_before, len(self.classifier))

        if config.verbose:
            if config.merge:
                print(f"  Clusters: {clusters_before} → {len(self.classifier)} after merge")
            else:
                print(f"  Clusters: {clusters_before}")

        result = ClusteringResult(
            clusters=list(self.classifier.clusters),
            num_points=len(points),
            elapsed_seconds=elapsed,
            merged=config.merge,
            clusters_before_merge=clusters_before,
        )

        if self.logger:
            self.logger.log_run_end(
                [c.to_dict() for c in result.clusters],
                elapsed,
            )

        return result
