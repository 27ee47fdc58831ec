"""Application event model."""

from __future__ import annotations

from dataclasses import dataclass

from algebra_tiles.core.models import TileKind


@dataclass(frozen=True, slots=True)
class PointerPressed:
    """Pointer pressed in plane coordinates."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class PointerMoved:
    """Pointer moved in plane coordinates."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class PointerReleased:
    """Pointer released, in screen coordinates for delete-zone testing."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class PointerCancelled:
    """Pointer lost mid-drag."""


@dataclass(frozen=True, slots=True)
class DoubleActivated:
    """Double click or double tap in plane coordinates."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class SpawnRequested:
    """New tile dragged in from the palette."""

    kind: TileKind
    is_negative: bool
    x: float
    y: float


InputEvent = PointerPressed | PointerMoved | PointerReleased | PointerCancelled | DoubleActivated | SpawnRequested
