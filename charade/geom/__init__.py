"""Planar geometry kernel for touch point sets."""

from charade.geom.core import (
    Circle,
    OrientedRect,
    Point,
    as_points,
    line_intersect,
    points_to_array,
)
from charade.geom.stats import bbox_center, centroid
from charade.geom.circle import enclosing_center, min_enclosing_circle
from charade.geom.hull import convex_hull, turn
from charade.geom.obb import oriented_bounding_box
from charade.geom.polygon import polygon_area
from charade.geom.report import ShapeReport, build_shape_report

__all__ = [
    "Point",
    "Circle",
    "OrientedRect",
    "as_points",
    "points_to_array",
    "line_intersect",
    "centroid",
    "bbox_center",
    "min_enclosing_circle",
    "enclosing_center",
    "convex_hull",
    "turn",
    "oriented_bounding_box",
    "polygon_area",
    "ShapeReport",
    "build_shape_report",
]
