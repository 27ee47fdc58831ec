"""Interaction controller, input events and render snapshots."""

from algebra_tiles.app.controller import TileBoardController
from algebra_tiles.app.events import (
    DoubleActivated,
    InputEvent,
    PointerCancelled,
    PointerMoved,
    PointerPressed,
    PointerReleased,
    SpawnRequested,
)
from algebra_tiles.app.ui_state import BoardSnapshot, TileView

__all__ = [
    "BoardSnapshot",
    "DoubleActivated",
    "InputEvent",
    "PointerCancelled",
    "PointerMoved",
    "PointerPressed",
    "PointerReleased",
    "SpawnRequested",
    "TileBoardController",
    "TileView",
]
