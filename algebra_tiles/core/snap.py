"""Edge snapping of a dropped tile against its neighbours."""

from __future__ import annotations

from collections.abc import Iterable

from algebra_tiles.core.models import Point, Rect

DEFAULT_SNAP_TOLERANCE = 15.0


def resolve_snap(moving: Rect, others: Iterable[Rect], tolerance: float = DEFAULT_SNAP_TOLERANCE) -> Point | None:
    """Return the snapped top-left for ``moving`` or None to keep it in place.

    Neighbours are visited in arrangement order and the first one offering
    any alignment wins, even if a later neighbour would be closer.
    """
    for other in others:
        snapped = _outer_snap(moving, other, tolerance)
        if snapped is None:
            snapped = _inner_snap(moving, other, tolerance)
        if snapped is not None:
            return snapped
    return None


def _near(a: float, b: float, tolerance: float) -> bool:
    return abs(a - b) < tolerance


def _outer_snap(tile: Rect, other: Rect, tol: float) -> Point | None:
    # Right of other.
    if _near(tile.x, other.right, tol):
        if _near(tile.y, other.y, tol):
            return Point(other.right, other.y)
        if _near(tile.bottom, other.bottom, tol):
            return Point(other.right, other.bottom - tile.h)
    # Left of other.
    if _near(tile.right, other.x, tol):
        if _near(tile.y, other.y, tol):
            return Point(other.x - tile.w, other.y)
        if _near(tile.bottom, other.bottom, tol):
            return Point(other.x - tile.w, other.bottom - tile.h)
    # Below other.
    if _near(tile.y, other.bottom, tol):
        if _near(tile.x, other.x, tol):
            return Point(other.x, other.bottom)
        if _near(tile.right, other.right, tol):
            return Point(other.right - tile.w, other.bottom)
    # Above other.
    if _near(tile.bottom, other.y, tol):
        if _near(tile.x, other.x, tol):
            return Point(other.x, other.y - tile.h)
        if _near(tile.right, other.right, tol):
            return Point(other.right - tile.w, other.y - tile.h)
    return None


def _inner_snap(tile: Rect, other: Rect, tol: float) -> Point | None:
    if _near(tile.x, other.x, tol):
        if _near(tile.y, other.y, tol):
            return Point(other.x, other.y)
        if _near(tile.bottom, other.bottom, tol):
            return Point(other.x, other.bottom - tile.h)
        # Column stacking.
        if _near(tile.y, other.bottom, tol):
            return Point(other.x, other.bottom)
        if _near(tile.bottom, other.y, tol):
            return Point(other.x, other.y - tile.h)
    if _near(tile.y, other.y, tol):
        if _near(tile.x, other.x, tol):
            return Point(other.x, other.y)
        if _near(tile.right, other.right, tol):
            return Point(other.right - tile.w, other.y)
        # Row stacking.
        if _near(tile.x, other.right, tol):
            return Point(other.right, other.y)
        if _near(tile.right, other.x, tol):
            return Point(other.x - tile.w, other.y)
    return None
