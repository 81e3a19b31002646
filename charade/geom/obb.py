"""Minimum-area oriented bounding box by rotating calipers."""

from __future__ import annotations

from typing import List, Sequence

from charade.geom.core import OrientedRect, Point, as_points, line_intersect
from charade.geom.polygon import polygon_area

# Bottom, right, top and left calipers, each a quarter turn from the previous.
INITIAL_CALIPERS = (Point(1.0, 0.0), Point(0.0, 1.0), Point(-1.0, 0.0), Point(0.0, -1.0))


def _rotate_quarters(v: Point, quarters: int) -> Point:
    for _ in range(quarters % 4):
        v = v.perp()
    return v


def _extreme_index(hull: Sequence[Point], direction: Point) -> int:
    """Hull vertex a caliper along direction rests on.

    Of two tied vertices, picks the one whose next edge runs along the caliper.
    """
    normal = direction.perp()
    n = len(hull)
    best = 0
    for i in range(1, n):
        if hull[i].dot(normal) < hull[best].dot(normal):
            best = i
    prev = (best - 1) % n
    if hull[prev].dot(normal) == hull[best].dot(normal):
        best = prev
    return best


def _corners(hull: Sequence[Point], anchors: List[int], calipers: List[Point]):
    return tuple(
        line_intersect(hull[anchors[k]], calipers[k], hull[anchors[(k + 1) % 4]], calipers[(k + 1) % 4])
        for k in range(4)
    )


def oriented_bounding_box(hull) -> OrientedRect:
    """Smallest-area rectangle enclosing a counter-clockwise convex hull.

    One vertex gives four equal corners and two vertices give the segment
    (a, b, b, a). Callers should treat near-zero areas as degenerate.
    """
    pts = as_points(hull)
    n = len(pts)
    if n == 0:
        raise ValueError("oriented_bounding_box needs at least one hull vertex")
    if n == 1:
        return OrientedRect((pts[0],) * 4)
    if n == 2:
        a, b = pts
        return OrientedRect((a, b, b, a))

    edges = [(pts[(i + 1) % n] - pts[i]).unit() for i in range(n)]
    calipers = list(INITIAL_CALIPERS)
    anchors = [_extreme_index(pts, d) for d in calipers]

    best = None
    best_area = float("inf")
    # Every edge is met by one caliper per quarter turn.
    for _ in range(2 * n + 4):
        # Largest cosine is the smallest turn; angles lie in [0, pi).
        k = 0
        best_cos = calipers[0].dot(edges[anchors[0]])
        for j in range(1, 4):
            cos = calipers[j].dot(edges[anchors[j]])
            if cos > best_cos:
                k, best_cos = j, cos

        calipers[k] = edges[anchors[k]]
        anchors[k] = (anchors[k] + 1) % n
        for j in range(1, 4):
            calipers[(k + j) % 4] = _rotate_quarters(calipers[k], j)

        corners = _corners(pts, anchors, calipers)
        area = 2.0 * abs(polygon_area(corners[:3]))
        if area < best_area:
            best, best_area = corners, area

        if calipers[0].x <= 0.0:
            break

    return OrientedRect(best)
