"""
TouchTable: bounded bookkeeping of the currently active touch contacts.

One slot per active contact. Removing a touch moves the last slot into the
hole, so slot order is not touch order. The table is not synchronised;
take a snapshot with points() before handing it to the geometry kernel.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from charade.geom.core import Point

log = logging.getLogger(__name__)


class TouchTable:
    """
    Fixed-capacity table of touch ids and their positions.

    Parameters
    ----------
    capacity : int
        Maximum number of simultaneous contacts the device reports.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._ids: List[int] = []
        self._points: List[Point] = []

    # ------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, touch_id: int) -> bool:
        return touch_id in self._ids

    def index_of(self, touch_id: int) -> int:
        """Slot index of a touch id, or -1 if it is not active."""
        try:
            return self._ids.index(touch_id)
        except ValueError:
            return -1

    # ------------------------------------------------------------------
    def add(self, touch_id: int, x: float, y: float) -> int:
        """Record a new contact and return its slot index."""
        if len(self._ids) >= self._capacity:
            raise ValueError(f"touch table full ({self._capacity} slots)")
        if touch_id in self._ids:
            raise ValueError(f"touch {touch_id} is already active")
        self._ids.append(touch_id)
        self._points.append(Point(float(x), float(y)))
        log.debug(f"touch {touch_id} begin at ({x:.1f}, {y:.1f}), {len(self._ids)} active")
        return len(self._ids) - 1

    def remove(self, touch_id: int) -> None:
        """Forget a contact; the last slot moves into its place."""
        idx = self.index_of(touch_id)
        if idx < 0:
            raise KeyError(touch_id)
        last_id = self._ids.pop()
        last_point = self._points.pop()
        if idx < len(self._ids):
            self._ids[idx] = last_id
            self._points[idx] = last_point
        log.debug(f"touch {touch_id} end, {len(self._ids)} active")

    def update(self, touch_id: int, x: float, y: float) -> None:
        idx = self.index_of(touch_id)
        if idx < 0:
            raise KeyError(touch_id)
        self._points[idx] = Point(float(x), float(y))

    def clear(self) -> None:
        self._ids.clear()
        self._points.clear()

    # ------------------------------------------------------------------
    def ids(self) -> Tuple[int, ...]:
        return tuple(self._ids)

    def points(self) -> Tuple[Point, ...]:
        """Immutable snapshot of the active positions in slot order."""
        return tuple(self._points)
