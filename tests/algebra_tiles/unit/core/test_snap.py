from algebra_tiles.core.models import Point, Rect
from algebra_tiles.core.snap import DEFAULT_SNAP_TOLERANCE, resolve_snap

BASE = Rect(0.0, 0.0, 200.0, 200.0)


def test_outer_snap_places_tile_flush_right_of_neighbour() -> None:
    moving = Rect(203.0, 5.0, 25.0, 25.0)
    snapped = resolve_snap(moving, [BASE])
    assert snapped == Point(200.0, 0.0)
    assert snapped.x - BASE.right == 0.0


def test_outer_snap_aligns_bottom_edges() -> None:
    moving = Rect(203.0, 170.0, 25.0, 25.0)
    assert resolve_snap(moving, [BASE]) == Point(200.0, 175.0)


def test_outer_snap_left_below_and_above() -> None:
    assert resolve_snap(Rect(-30.0, 4.0, 25.0, 25.0), [BASE]) == Point(-25.0, 0.0)
    assert resolve_snap(Rect(6.0, 207.0, 200.0, 25.0), [BASE]) == Point(0.0, 200.0)
    assert resolve_snap(Rect(-4.0, -20.0, 200.0, 25.0), [BASE]) == Point(0.0, -25.0)


def test_inner_snap_supports_overlapping_placement() -> None:
    assert resolve_snap(Rect(3.0, 4.0, 25.0, 25.0), [BASE]) == Point(0.0, 0.0)
    assert resolve_snap(Rect(172.0, 3.0, 25.0, 25.0), [BASE]) == Point(175.0, 0.0)
    assert resolve_snap(Rect(4.0, 180.0, 25.0, 25.0), [BASE]) == Point(0.0, 175.0)


def test_no_snap_outside_tolerance() -> None:
    assert resolve_snap(Rect(500.0, 500.0, 25.0, 25.0), [BASE]) is None
    assert resolve_snap(Rect(215.0, 0.0, 25.0, 25.0), [BASE]) is None
    assert resolve_snap(Rect(203.0, 5.0, 25.0, 25.0), []) is None


def test_tolerance_is_strict_and_configurable() -> None:
    moving = Rect(200.0 + DEFAULT_SNAP_TOLERANCE, 0.0, 25.0, 25.0)
    assert resolve_snap(moving, [BASE]) is None
    assert resolve_snap(moving, [BASE], tolerance=20.0) == Point(200.0, 0.0)


def test_first_neighbour_in_order_wins() -> None:
    left = BASE
    right = Rect(232.0, 0.0, 200.0, 200.0)
    moving = Rect(205.0, 0.0, 25.0, 25.0)
    assert resolve_snap(moving, [left, right]) == Point(200.0, 0.0)
    assert resolve_snap(moving, [right, left]) == Point(207.0, 0.0)
