"""Tile color tuning for the drawing layer."""

from __future__ import annotations

from dataclasses import dataclass

from algebra_tiles.core.models import TileKind


@dataclass(frozen=True, slots=True)
class TileTheme:
    square_fill: str
    bar_fill: str
    unit_fill: str
    negative_fill: str
    stroke: str
    label: str

    def fill_for(self, kind: TileKind, is_negative: bool) -> str:
        if is_negative:
            return self.negative_fill
        if kind is TileKind.SQUARE:
            return self.square_fill
        if kind is TileKind.BAR:
            return self.bar_fill
        return self.unit_fill


DEFAULT_TILE_THEME = TileTheme(
    square_fill="#facc15",
    bar_fill="#4ade80",
    unit_fill="#60a5fa",
    negative_fill="#ef4444",
    stroke="#ffffff66",
    label="#00000080",
)
