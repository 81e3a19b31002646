"""Aggregate statistics of a point set: centroid and bounding-box centre."""

from __future__ import annotations

import numpy as np

from charade.geom.core import ORIGIN, Point, as_points, points_to_array


def centroid(points) -> Point:
    """Arithmetic mean of the points. Requires at least one point."""
    pts = as_points(points)
    if not pts:
        raise ValueError("centroid of an empty point set is undefined")
    mean = points_to_array(pts).mean(axis=0)
    return Point(float(mean[0]), float(mean[1]))


def bbox_center(points) -> Point:
    """Midpoint of the axis-aligned extents; the origin for an empty set."""
    pts = as_points(points)
    if not pts:
        return ORIGIN
    arr = points_to_array(pts)
    lo = arr.min(axis=0)
    hi = arr.max(axis=0)
    return Point(float((lo[0] + hi[0]) / 2), float((lo[1] + hi[1]) / 2))
