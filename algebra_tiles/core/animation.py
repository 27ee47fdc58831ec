"""Per-frame easing of tiles toward their planned targets."""

from __future__ import annotations

from collections.abc import Iterable

from algebra_tiles.core.models import Tile

DEFAULT_EASE = 0.1
DEFAULT_SETTLE_THRESHOLD = 0.5


def _ease_axis(current: float, target: float, ease: float, threshold: float) -> tuple[float, bool]:
    if abs(current - target) > threshold:
        return current + (target - current) * ease, True
    return target, False


def step_animation(
    tiles: Iterable[Tile],
    *,
    ease: float = DEFAULT_EASE,
    settle_threshold: float = DEFAULT_SETTLE_THRESHOLD,
) -> bool:
    """Advance every targeted tile one step. Returns whether any tile eased.

    A tile lands exactly on its target once both axes are within the
    threshold, and its target is cleared.
    """
    active = False
    for tile in tiles:
        if tile.target is None:
            continue
        x, moved_x = _ease_axis(tile.x, tile.target.x, ease, settle_threshold)
        y, moved_y = _ease_axis(tile.y, tile.target.y, ease, settle_threshold)
        tile.move_to(x, y)
        if moved_x or moved_y:
            active = True
        else:
            tile.target = None
    return active


def steps_to_settle(distance: float, *, ease: float = DEFAULT_EASE, settle_threshold: float = DEFAULT_SETTLE_THRESHOLD) -> int:
    """Number of active steps needed before a single axis lands."""
    if not 0.0 < ease <= 1.0:
        raise ValueError("ease must be in (0, 1].")
    steps = 0
    remaining = abs(distance)
    while remaining > settle_threshold:
        remaining *= 1.0 - ease
        steps += 1
    return steps
