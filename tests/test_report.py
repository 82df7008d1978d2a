"""
Test cluster rendering
"""

import json

from pointclust.core.cluster import Cluster
from pointclust.core.point import Point
from pointclust.core.report import (
    clusters_to_json,
    format_cluster,
    format_clusters,
    format_coordinate,
)


def test_format_coordinate():
    assert format_coordinate(10.0) == "10"
    assert format_coordinate(0.5) == "0.5"
    assert format_coordinate(-2.25) == "-2.25"
    assert format_coordinate(Point(1.0, 0).x / 3) == "0.33333334"


def test_format_clusters():
    clusters = [Cluster(Point(0.5, 0), count=2), Cluster(Point(10, 10))]

    assert format_cluster(clusters[0]) == "[0.5, 0]: 2"
    assert format_clusters(clusters) == "[0.5, 0]: 2\n[10, 10]: 1"
    assert format_clusters([]) == ""


def test_clusters_to_json():
    clusters = [Cluster(Point(0.5, 0), count=2), Cluster(Point(10, 10))]

    data = json.loads(clusters_to_json(clusters))
    assert data == [
        {"x": 0.5, "y": 0.0, "count": 2},
        {"x": 10.0, "y": 10.0, "count": 1},
    ]


def test_format_non_finite():
    assert format_coordinate(float("nan")) == "NaN"
    assert format_coordinate(float("inf")) == "inf"
    assert format_coordinate(float("-inf")) == "-inf"

    cluster = Cluster(Point(float("nan"), 1.0))
    assert format_cluster(cluster) == "[NaN, 1]: 1"
