"""Mutable controller state container."""

from __future__ import annotations

from dataclasses import dataclass, field

from algebra_tiles.app.services.drag_flow import HeldTileState
from algebra_tiles.core.models import Rect, ScaleConfig, Tile
from algebra_tiles.core.validation import ValidationResult


@dataclass(frozen=True, slots=True)
class Coefficients:
    """Target quadratic ax² + bx + c."""

    a: int = 1
    b: int = 5
    c: int = 6


@dataclass(slots=True)
class ControllerState:
    """Aggregates all mutable state owned by TileBoardController."""

    scale: ScaleConfig
    viewport: tuple[float, float]
    tiles: list[Tile] = field(default_factory=list)
    held: HeldTileState = field(default_factory=HeldTileState.empty)
    coefficients: Coefficients = field(default_factory=Coefficients)
    delete_zone: Rect | None = None
    status: str = "Drag tiles onto the board."
    feedback: ValidationResult | None = None
    self_check: ValidationResult | None = None
    is_animating: bool = False
    next_tile_id: int = 1
