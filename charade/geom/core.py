"""Point/vector primitives and the value types returned by the geometry kernel."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import numpy as np


# ============================================================
# Points and vectors
# ============================================================


@dataclass(frozen=True, order=True)
class Point:
    """Immutable 2D coordinate pair, also used as a free vector."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> Point:
        return Point(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y

    def scale(self, s: float) -> Point:
        return self * s

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def perp(self) -> Point:
        """Rotate 90 degrees counter-clockwise."""
        return Point(-self.y, self.x)

    def cross(self, other: Point) -> float:
        """Signed area of the parallelogram spanned by self and other."""
        return self.perp().dot(other)

    def norm2(self) -> float:
        return self.dot(self)

    def norm(self) -> float:
        return math.sqrt(self.norm2())

    def unit(self) -> Point:
        """Unit vector in the same direction; the zero vector maps to (1, 0)."""
        d = self.norm()
        if d == 0.0:
            return Point(1.0, 0.0)
        return Point(self.x / d, self.y / d)

    def distance2(self, other: Point) -> float:
        return (other - self).norm2()

    def distance(self, other: Point) -> float:
        return (other - self).norm()


ORIGIN = Point(0.0, 0.0)


def line_intersect(p: Point, r: Point, q: Point, s: Point) -> Point:
    """Intersection of the line through p along r with the line through q along s.

    The directions must not be parallel.
    """
    t = (q - p).cross(s) / r.cross(s)
    return p + r * t


def as_points(points: Sequence[Point] | Sequence[Sequence[float]] | np.ndarray) -> Tuple[Point, ...]:
    """Coerce Points, (x, y) pairs or an N x 2 array into a tuple of Points."""

    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=float)
        if arr.size == 0:
            return ()
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"points must be an N x 2 array, got shape {arr.shape}")
        return tuple(Point(float(x), float(y)) for x, y in arr)

    out = []
    for p in points:
        if isinstance(p, Point):
            out.append(p)
            continue
        if len(p) != 2:
            raise ValueError(f"points must be (x, y) pairs, got {p!r}")
        out.append(Point(float(p[0]), float(p[1])))
    return tuple(out)


def points_to_array(points: Iterable[Point]) -> np.ndarray:
    """N x 2 float array of the given points."""
    arr = np.array([(p.x, p.y) for p in points], dtype=float)
    return arr.reshape(-1, 2)


# ============================================================
# Derived shapes
# ============================================================


# Relative slack on containment tests, absorbs rounding in circumcircle centres.
CONTAINMENT_EPSILON = 1e-14


@dataclass(frozen=True)
class Circle:
    """Circle stored with its squared radius."""

    center: Point
    r2: float

    @property
    def radius(self) -> float:
        return math.sqrt(self.r2)

    def contains(self, p: Point) -> bool:
        return self.center.distance2(p) <= self.r2 * (1.0 + CONTAINMENT_EPSILON)

    def contains_all(self, points: Iterable[Point]) -> bool:
        return all(self.contains(p) for p in points)

    def to_dict(self) -> dict:
        return {"center": [self.center.x, self.center.y], "radius": self.radius}


@dataclass(frozen=True)
class OrientedRect:
    """Rectangle at an arbitrary rotation, corners in counter-clockwise order."""

    corners: Tuple[Point, Point, Point, Point]

    def __post_init__(self):
        if len(self.corners) != 4:
            raise ValueError(f"OrientedRect needs exactly 4 corners, got {len(self.corners)}")

    @property
    def area(self) -> float:
        a, b, c, _ = self.corners
        return abs((b - a).cross(c - b))

    @property
    def center(self) -> Point:
        a, _, c, _ = self.corners
        return (a + c) * 0.5

    @property
    def width(self) -> float:
        return self.corners[0].distance(self.corners[1])

    @property
    def height(self) -> float:
        return self.corners[1].distance(self.corners[2])

    @property
    def angle(self) -> float:
        """Direction of the first side in radians."""
        d = self.corners[1] - self.corners[0]
        return math.atan2(d.y, d.x)

    def to_dict(self) -> dict:
        return {
            "corners": [[p.x, p.y] for p in self.corners],
            "area": self.area,
            "width": self.width,
            "height": self.height,
            "angle": self.angle,
        }
