"""Signed polygon area."""

from __future__ import annotations

from charade.geom.core import as_points


def polygon_area(vertices) -> float:
    """Signed area of a simple polygon via the shoelace formula.

    Positive for counter-clockwise vertex order, negative for clockwise.
    Self-intersecting input gives a meaningless result.
    """
    pts = as_points(vertices)
    total = 0.0
    for i, cur in enumerate(pts):
        prev = pts[i - 1]
        total += (cur.x + prev.x) * (cur.y - prev.y)
    return total / 2
