"""Drag interaction flow helpers extracted from controller."""

from __future__ import annotations

from dataclasses import dataclass

from algebra_tiles.core.models import Point, Rect, ScaleConfig, Tile, TileKind, find_tile, topmost_tile_at
from algebra_tiles.core.snap import resolve_snap


@dataclass(frozen=True, slots=True)
class HeldTileState:
    """The single grabbed tile and where it was picked up."""

    tile_id: int | None
    offset_x: float = 0.0
    offset_y: float = 0.0

    @classmethod
    def empty(cls) -> HeldTileState:
        return cls(tile_id=None)

    @property
    def is_holding(self) -> bool:
        return self.tile_id is not None


@dataclass(frozen=True, slots=True)
class DragActionResult:
    """Outcome of a drag interaction."""

    handled: bool
    held_state: HeldTileState
    status: str | None = None
    snapped_to: Point | None = None
    deleted_tile_id: int | None = None


def _grab(tiles: list[Tile], tile: Tile, px: float, py: float) -> HeldTileState:
    tiles.remove(tile)
    tiles.append(tile)
    return HeldTileState(tile_id=tile.tile_id, offset_x=px - tile.x, offset_y=py - tile.y)


class DragFlowService:
    """Drag, drop, rotate and spawn transitions over an arrangement."""

    @staticmethod
    def on_pointer_down(*, tiles: list[Tile], held_state: HeldTileState, x: float, y: float) -> DragActionResult:
        if held_state.is_holding:
            return DragActionResult(handled=False, held_state=held_state)
        tile = topmost_tile_at(tiles, x, y)
        if tile is None:
            return DragActionResult(handled=False, held_state=held_state)
        return DragActionResult(
            handled=True,
            held_state=_grab(tiles, tile, x, y),
            status=f"Holding {tile.label}.",
        )

    @staticmethod
    def on_pointer_move(*, tiles: list[Tile], held_state: HeldTileState, x: float, y: float) -> DragActionResult:
        if held_state.tile_id is None:
            return DragActionResult(handled=False, held_state=held_state)
        tile = find_tile(tiles, held_state.tile_id)
        if tile is None:
            return DragActionResult(handled=True, held_state=HeldTileState.empty())
        tile.move_to(x - held_state.offset_x, y - held_state.offset_y)
        return DragActionResult(handled=True, held_state=held_state)

    @staticmethod
    def on_pointer_release(
        *,
        tiles: list[Tile],
        held_state: HeldTileState,
        screen_x: float,
        screen_y: float,
        delete_zone: Rect | None,
        snap_tolerance: float,
    ) -> DragActionResult:
        if held_state.tile_id is None:
            return DragActionResult(handled=False, held_state=held_state)
        tile = find_tile(tiles, held_state.tile_id)
        if tile is None:
            return DragActionResult(handled=True, held_state=HeldTileState.empty())
        if delete_zone is not None and delete_zone.contains(screen_x, screen_y):
            tiles.remove(tile)
            return DragActionResult(
                handled=True,
                held_state=HeldTileState.empty(),
                status=f"Deleted {tile.label}.",
                deleted_tile_id=tile.tile_id,
            )
        others = [other.rect for other in tiles if other is not tile]
        snapped = resolve_snap(tile.rect, others, snap_tolerance)
        if snapped is not None:
            tile.move_to(snapped.x, snapped.y)
        return DragActionResult(
            handled=True,
            held_state=HeldTileState.empty(),
            status=f"Placed {tile.label}.",
            snapped_to=snapped,
        )

    @staticmethod
    def on_pointer_cancel(*, held_state: HeldTileState) -> DragActionResult:
        if not held_state.is_holding:
            return DragActionResult(handled=False, held_state=held_state)
        return DragActionResult(handled=True, held_state=HeldTileState.empty(), status="Drag cancelled.")

    @staticmethod
    def on_double_activate(
        *, tiles: list[Tile], held_state: HeldTileState, x: float, y: float
    ) -> DragActionResult:
        tile = topmost_tile_at(tiles, x, y)
        if tile is None or not tile.toggle_orientation():
            return DragActionResult(handled=False, held_state=held_state)
        return DragActionResult(
            handled=True,
            held_state=held_state,
            status=f"Rotated {tile.label} ({tile.orientation.value}).",
        )

    @staticmethod
    def on_spawn(
        *,
        tiles: list[Tile],
        held_state: HeldTileState,
        tile_id: int,
        kind: TileKind,
        is_negative: bool,
        scale: ScaleConfig,
        x: float,
        y: float,
    ) -> DragActionResult:
        if held_state.is_holding:
            return DragActionResult(handled=False, held_state=held_state)
        tile = Tile(tile_id=tile_id, kind=kind, is_negative=is_negative, scale=scale)
        tile.move_to(x - tile.width / 2, y - tile.height / 2)
        tiles.append(tile)
        return DragActionResult(
            handled=True,
            held_state=HeldTileState(tile_id=tile.tile_id, offset_x=x - tile.x, offset_y=y - tile.y),
            status=f"Holding new {'negative ' if is_negative else ''}{tile.label}.",
        )
