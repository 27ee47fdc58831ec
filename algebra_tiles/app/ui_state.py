"""Typed render state exposed by the controller."""

from __future__ import annotations

from dataclasses import dataclass

from algebra_tiles.core.models import Orientation, TileKind
from algebra_tiles.core.validation import ValidationResult


@dataclass(frozen=True, slots=True)
class TileView:
    """Resolved tile state for one draw call."""

    tile_id: int
    kind: TileKind
    is_negative: bool
    orientation: Orientation
    x: float
    y: float
    width: float
    height: float
    label: str
    fill: str
    stroke: str
    label_color: str
    is_grabbed: bool


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """View-ready state snapshot, back-to-front tile order."""

    tiles: tuple[TileView, ...]
    grabbed_tile_id: int | None
    is_animating: bool
    status: str
    equation: str
    readout: str
    feedback: ValidationResult | None
