"""
Cluster state: a running centroid plus the number of points behind it.
"""

from __future__ import annotations

from .point import Point


class Cluster:
    """A running mean of absorbed points."""

    def __init__(self, point: Point, count: int = 1):
        self.centroid = point
        self.count = count

    @classmethod
    def new(cls, point: Point) -> Cluster:
        """Start a cluster from a single point."""
        return cls(point)

    def absorb(self, point: Point) -> None:
        """Add one point to the running mean."""
        n = self.count
        self.centroid = (self.centroid * n + point) / (n + 1)
        self.count = n + 1

    def merge(self, other: Cluster) -> None:
        """Fold another cluster in, weighting each centroid by its count."""
        total = self.count + other.count
        self.centroid = (self.centroid * self.count + other.centroid * other.count) / total
        self.count = total

    def copy(self) -> Cluster:
        return Cluster(self.centroid, self.count)

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "x": float(self.centroid.x),
            "y": float(self.centroid.y),
            "count": self.count,
        }

    def __repr__(self) -> str:
        return f"Cluster(centroid={self.centroid!r}, count={self.count})"
