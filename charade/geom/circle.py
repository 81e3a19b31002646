"""Smallest enclosing circle by deterministic incremental construction.

The points are visited in input order; there is no random shuffle. When
several circles are equally minimal (symmetric inputs) the one returned
depends on that order. Selection priorities are fixed: a candidate is kept
per side of the line through the two boundary points, and between the two
sides the smaller circle wins, the left side on ties.
"""

from __future__ import annotations

from typing import Optional, Sequence

from charade.geom.core import Circle, Point, as_points


def circle_from_diameter(p: Point, q: Point) -> Circle:
    """Circle with p-q as a diameter."""
    c = (p + q) * 0.5
    return Circle(c, max(c.distance2(p), c.distance2(q)))


def circumcircle(p: Point, q: Point, r: Point) -> Optional[Circle]:
    """Circle through three points, or None when they are collinear."""
    b = q - p
    c = r - p
    d = 2.0 * b.cross(c)
    if d == 0.0:
        return None
    b2 = b.norm2()
    c2 = c.norm2()
    offset = Point((c.y * b2 - b.y * c2) / d, (b.x * c2 - c.x * b2) / d)
    center = p + offset
    r2 = max(center.distance2(p), center.distance2(q), center.distance2(r))
    return Circle(center, r2)


def _circle_two_points(points: Sequence[Point], p: Point, q: Point) -> Circle:
    # Smallest circle with p and q on the boundary containing points.
    diameter = circle_from_diameter(p, q)
    if diameter.contains_all(points):
        return diameter

    pq = q - p
    left: Optional[Circle] = None
    right: Optional[Circle] = None
    for r in points:
        if diameter.contains(r):
            continue
        side = pq.cross(r - p)
        cc = circumcircle(p, q, r)
        if cc is None:
            continue
        reach = pq.cross(cc.center - p)
        if side > 0.0 and (left is None or reach > pq.cross(left.center - p)):
            left = cc
        elif side < 0.0 and (right is None or reach < pq.cross(right.center - p)):
            right = cc

    if left is None and right is None:
        return diameter
    if right is None:
        return left
    if left is None:
        return right
    return left if left.r2 <= right.r2 else right


def _circle_one_point(points: Sequence[Point], p: Point) -> Circle:
    # Smallest circle with p on the boundary containing points.
    c = Circle(p, 0.0)
    for i, q in enumerate(points):
        if c.contains(q):
            continue
        if c.r2 == 0.0:
            c = circle_from_diameter(p, q)
        else:
            c = _circle_two_points(points[: i + 1], p, q)
    return c


def min_enclosing_circle(points) -> Circle:
    """Smallest circle containing every point. Requires at least one point."""
    pts = as_points(points)
    if not pts:
        raise ValueError("min_enclosing_circle needs at least one point")

    c = Circle(pts[0], 0.0)
    for i, p in enumerate(pts[1:], start=1):
        if not c.contains(p):
            c = _circle_one_point(pts[: i + 1], p)
    return c


def enclosing_center(points) -> Point:
    """Centre of the smallest enclosing circle."""
    return min_enclosing_circle(points).center
