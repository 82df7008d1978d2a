"""
2D point value type.

Coordinates are stored as float32 so centroid arithmetic follows
single-precision semantics throughout.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point:
    """Immutable 2D coordinate."""

    x: np.float32
    y: np.float32

    def __post_init__(self):
        object.__setattr__(self, "x", np.float32(self.x))
        object.__setattr__(self, "y", np.float32(self.y))

    def __add__(self, other: Point) -> Point:
        return add(self, other)

    def __sub__(self, other: Point) -> Point:
        return subtract(self, other)

    def __mul__(self, k: float) -> Point:
        return scale(self, k)

    def __truediv__(self, k: float) -> Point:
        return divide(self, k)

    def distance(self, other: Point) -> float:
        return distance(self, other)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float32)

    def __repr__(self) -> str:
        return f"Point({float(self.x)!r}, {float(self.y)!r})"


def add(a: Point, b: Point) -> Point:
    return Point(a.x + b.x, a.y + b.y)


def subtract(a: Point, b: Point) -> Point:
    return Point(a.x - b.x, a.y - b.y)


def scale(a: Point, k: float) -> Point:
    k = np.float32(k)
    return Point(a.x * k, a.y * k)


def divide(a: Point, k: float) -> Point:
    """Divide componentwise. A zero divisor gives inf/nan, as float32 does."""
    k = np.float32(k)
    with np.errstate(divide="ignore", invalid="ignore"):
        return Point(a.x / k, a.y / k)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance, computed in float32."""
    dx = a.x - b.x
    dy = a.y - b.y
    return float(np.sqrt(dx * dx + dy * dy))
