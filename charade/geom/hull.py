"""Convex hull by monotone chain."""

from __future__ import annotations

from typing import List, Tuple

from charade.geom.core import Point, as_points


def turn(p: Point, q: Point, r: Point) -> float:
    """Twice the signed area of triangle pqr; positive when r lies left of p->q."""
    return p.cross(q) + q.cross(r) + r.cross(p)


def _chain(points) -> List[Point]:
    chain: List[Point] = []
    for p in points:
        # Collinear triples are not left turns, so only extreme vertices survive.
        while len(chain) >= 2 and turn(chain[-2], chain[-1], p) <= 0.0:
            chain.pop()
        chain.append(p)
    return chain


def convex_hull(points) -> Tuple[Point, ...]:
    """Vertices of the convex hull in counter-clockwise order.

    Starts at the lowest (x, y) vertex. Duplicates are collapsed; a single
    distinct point gives a one-vertex hull and collinear input gives its two
    endpoints.
    """
    pts = sorted(set(as_points(points)))
    if len(pts) <= 1:
        return tuple(pts)

    lower = _chain(pts)
    upper = _chain(reversed(pts))
    return tuple(lower[:-1] + upper[:-1])
