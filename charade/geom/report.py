"""Shape report bundling every derived shape of one touch snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from charade.geom.circle import min_enclosing_circle
from charade.geom.core import Circle, OrientedRect, Point, as_points
from charade.geom.hull import convex_hull
from charade.geom.obb import oriented_bounding_box
from charade.geom.polygon import polygon_area
from charade.geom.stats import bbox_center, centroid

log = logging.getLogger(__name__)


@dataclass
class ShapeReport:
    """Derived shapes for one point snapshot. Shapes are None when empty."""

    touch_count: int
    centroid: Optional[Point] = None
    bbox_center: Optional[Point] = None
    circle: Optional[Circle] = None
    hull: Tuple[Point, ...] = ()
    hull_area: float = 0.0
    rect: Optional[OrientedRect] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return self.touch_count == 0

    @property
    def rect_area(self) -> float:
        return self.rect.area if self.rect is not None else 0.0

    @property
    def fill_ratio(self) -> float:
        """Hull area over rectangle area; 1.0 for degenerate rectangles."""
        if self.rect_area <= 1e-12:
            return 1.0
        return float(self.hull_area / self.rect_area)

    def to_dict(self) -> Dict[str, Any]:
        def xy(p):
            return None if p is None else [p.x, p.y]

        return {
            "touch_count": self.touch_count,
            "centroid": xy(self.centroid),
            "bbox_center": xy(self.bbox_center),
            "circle": None if self.circle is None else self.circle.to_dict(),
            "hull": [xy(p) for p in self.hull],
            "hull_area": self.hull_area,
            "rect": None if self.rect is None else self.rect.to_dict(),
            "rect_area": self.rect_area,
            "fill_ratio": self.fill_ratio,
            "metadata": self.metadata,
        }


def build_shape_report(points, metadata: Dict[str, Any] | None = None) -> ShapeReport:
    """Compute centroid, bbox centre, enclosing circle, hull and oriented box."""

    pts = as_points(points)
    metadata = dict(metadata or {})
    if not pts:
        log.debug("Empty snapshot, returning empty shape report")
        return ShapeReport(touch_count=0, metadata=metadata)

    hull = convex_hull(pts)
    rect = oriented_bounding_box(hull)
    report = ShapeReport(
        touch_count=len(pts),
        centroid=centroid(pts),
        bbox_center=bbox_center(pts),
        circle=min_enclosing_circle(pts),
        hull=hull,
        hull_area=polygon_area(hull),
        rect=rect,
        metadata=metadata,
    )
    log.debug(
        f"Shape report: {report.touch_count} points, hull={len(hull)} vertices, "
        f"rect_area={report.rect_area:.3f}"
    )
    return report
