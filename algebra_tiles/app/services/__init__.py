"""Application service-layer helpers."""

from algebra_tiles.app.services.drag_flow import DragActionResult, DragFlowService, HeldTileState

__all__ = [
    "DragActionResult",
    "DragFlowService",
    "HeldTileState",
]
