"""
Charade: shape analysis of simultaneous touch contacts.
"""

# Submodules
from charade import geom, layouts, touches

# Geometry kernel
from charade.geom import (
    Circle,
    OrientedRect,
    Point,
    ShapeReport,
    bbox_center,
    build_shape_report,
    centroid,
    convex_hull,
    enclosing_center,
    min_enclosing_circle,
    oriented_bounding_box,
    polygon_area,
)

# Touch bookkeeping
from charade.touches import TouchTable

# Layouts
from charade.layouts import (
    collinear_points,
    load_points,
    make_touch_cluster,
    regular_polygon,
)

__all__ = [
    # Submodules
    "geom",
    "layouts",
    "touches",
    # Geometry
    "Point",
    "Circle",
    "OrientedRect",
    "centroid",
    "bbox_center",
    "min_enclosing_circle",
    "enclosing_center",
    "convex_hull",
    "oriented_bounding_box",
    "polygon_area",
    "ShapeReport",
    "build_shape_report",
    # Touches
    "TouchTable",
    # Layouts
    "make_touch_cluster",
    "regular_polygon",
    "collinear_points",
    "load_points",
]
