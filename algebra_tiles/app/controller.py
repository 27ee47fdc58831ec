"""Board controller for tile interaction, checking and auto-solving."""

from __future__ import annotations

import logging
from collections.abc import Callable

from algebra_tiles.app.controller_state import Coefficients, ControllerState
from algebra_tiles.app.events import (
    DoubleActivated,
    InputEvent,
    PointerCancelled,
    PointerMoved,
    PointerPressed,
    PointerReleased,
    SpawnRequested,
)
from algebra_tiles.app.services.drag_flow import DragActionResult, DragFlowService, HeldTileState
from algebra_tiles.app.ui_state import BoardSnapshot, TileView
from algebra_tiles.core.animation import step_animation
from algebra_tiles.core.models import Rect, Tile, apply_configuration, scale_for_viewport
from algebra_tiles.core.notation import format_equation, format_readout, parse_coefficient
from algebra_tiles.core.solver import (
    LayoutPlan,
    SolverUnsatisfiable,
    apply_plan,
    find_factorization,
    generate_tiles,
    plan_layout,
)
from algebra_tiles.core.validation import ValidationResult, validate_arrangement
from algebra_tiles.infra.config import TileSettings
from algebra_tiles.ui.tile_theme import DEFAULT_TILE_THEME, TileTheme

logger = logging.getLogger(__name__)


class TileBoardController:
    """Handles input events and owns the arrangement.

    Grabs and spawns are ignored while an auto-layout is animating.
    """

    def __init__(
        self,
        settings: TileSettings | None = None,
        *,
        delete_zone: Rect | None = None,
        theme: TileTheme = DEFAULT_TILE_THEME,
    ) -> None:
        self._settings = settings or TileSettings()
        self._theme = theme
        viewport = (self._settings.viewport_width, self._settings.viewport_height)
        self._state = ControllerState(
            scale=scale_for_viewport(viewport[0], self._settings.narrow_breakpoint),
            viewport=viewport,
            delete_zone=delete_zone,
        )
        self._event_handlers: dict[type, Callable[..., bool]] = {
            PointerPressed: self.handle_pointer_down,
            PointerMoved: self.handle_pointer_move,
            PointerReleased: self.handle_pointer_release,
            PointerCancelled: self.handle_pointer_cancel,
            DoubleActivated: self.handle_double_activate,
            SpawnRequested: self.handle_spawn,
        }

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return tuple(self._state.tiles)

    @property
    def grabbed_tile_id(self) -> int | None:
        return self._state.held.tile_id

    @property
    def coefficients(self) -> Coefficients:
        return self._state.coefficients

    @property
    def is_animating(self) -> bool:
        return self._state.is_animating

    @property
    def self_check(self) -> ValidationResult | None:
        """Silent verdict recorded when the last auto-layout settled."""
        return self._state.self_check

    def handle_event(self, event: InputEvent) -> bool:
        """Route an input event. Returns whether UI changed."""
        handler = self._event_handlers.get(type(event))
        if handler is None:
            raise TypeError(f"Unsupported event type: {type(event).__name__}.")
        return handler(event)

    def handle_pointer_down(self, event: PointerPressed) -> bool:
        if self._state.is_animating:
            return False
        return self._apply_drag_result(
            DragFlowService.on_pointer_down(
                tiles=self._state.tiles, held_state=self._state.held, x=event.x, y=event.y
            )
        )

    def handle_pointer_move(self, event: PointerMoved) -> bool:
        return self._apply_drag_result(
            DragFlowService.on_pointer_move(
                tiles=self._state.tiles, held_state=self._state.held, x=event.x, y=event.y
            )
        )

    def handle_pointer_release(self, event: PointerReleased) -> bool:
        result = DragFlowService.on_pointer_release(
            tiles=self._state.tiles,
            held_state=self._state.held,
            screen_x=event.x,
            screen_y=event.y,
            delete_zone=self._state.delete_zone,
            snap_tolerance=self._settings.snap_tolerance,
        )
        if result.deleted_tile_id is not None:
            logger.info("tile_deleted id=%d", result.deleted_tile_id)
        elif result.snapped_to is not None:
            logger.debug("tile_snapped x=%.1f y=%.1f", result.snapped_to.x, result.snapped_to.y)
        return self._apply_drag_result(result)

    def handle_pointer_cancel(self, event: PointerCancelled) -> bool:
        return self._apply_drag_result(DragFlowService.on_pointer_cancel(held_state=self._state.held))

    def handle_double_activate(self, event: DoubleActivated) -> bool:
        return self._apply_drag_result(
            DragFlowService.on_double_activate(
                tiles=self._state.tiles, held_state=self._state.held, x=event.x, y=event.y
            )
        )

    def handle_spawn(self, event: SpawnRequested) -> bool:
        if self._state.is_animating:
            return False
        result = DragFlowService.on_spawn(
            tiles=self._state.tiles,
            held_state=self._state.held,
            tile_id=self._state.next_tile_id,
            kind=event.kind,
            is_negative=event.is_negative,
            scale=self._state.scale,
            x=event.x,
            y=event.y,
        )
        if result.handled:
            self._state.next_tile_id += 1
        return self._apply_drag_result(result)

    def set_coefficients(self, a: int, b: int, c: int) -> None:
        self._state.coefficients = Coefficients(a, b, c)

    def set_coefficients_from_text(self, a: str | None, b: str | None, c: str | None) -> Coefficients:
        """Coerce raw form values and store them."""
        coefficients = Coefficients(parse_coefficient(a), parse_coefficient(b), parse_coefficient(c))
        self._state.coefficients = coefficients
        return coefficients

    def set_delete_zone(self, zone: Rect | None) -> None:
        self._state.delete_zone = zone

    def resize(self, width: float, height: float) -> None:
        """Track a viewport change and rescale every tile to its size class."""
        self._state.viewport = (width, height)
        scale = scale_for_viewport(width, self._settings.narrow_breakpoint)
        if scale != self._state.scale:
            logger.info(
                "tile_scale_changed unit=%.0f square=%.0f", scale.unit_length, scale.square_length
            )
            self._state.scale = scale
            apply_configuration(self._state.tiles, scale)

    def reset(self) -> None:
        """Clear the arrangement and any feedback."""
        self._state.tiles = []
        self._state.held = HeldTileState.empty()
        self._state.feedback = None
        self._state.self_check = None
        self._state.is_animating = False
        self._state.status = "Board cleared."

    def check_arrangement(self, *, silent: bool = False) -> ValidationResult:
        """Validate the arrangement against the stored coefficients."""
        coefficients = self._state.coefficients
        result = validate_arrangement(
            self._state.tiles,
            coefficients.a,
            coefficients.b,
            coefficients.c,
            self._state.scale,
            tolerance=self._settings.area_tolerance,
        )
        logger.info(
            "arrangement_checked equation=%s outcome=%s silent=%s",
            format_equation(coefficients.a, coefficients.b, coefficients.c),
            result.outcome.value,
            silent,
        )
        if not silent:
            self._state.feedback = result
        return result

    def solve(self) -> LayoutPlan | SolverUnsatisfiable:
        """Regenerate tiles for the coefficients and animate them into a rectangle."""
        a, b, c = self._state.coefficients.a, self._state.coefficients.b, self._state.coefficients.c
        factorization = find_factorization(a, b, c)
        if factorization is None:
            unsatisfiable = SolverUnsatisfiable(a, b, c)
            logger.info("solve_unsatisfiable equation=%s", format_equation(a, b, c))
            self._state.feedback = ValidationResult.unsatisfiable(unsatisfiable.message)
            return unsatisfiable

        tiles = generate_tiles(a, b, c, self._state.scale, first_id=self._state.next_tile_id)
        self._state.next_tile_id += len(tiles)
        layout = plan_layout(tiles, factorization, self._state.scale, self._state.viewport)
        self._state.tiles = apply_plan(tiles, layout)
        self._state.held = HeldTileState.empty()
        self._state.feedback = None
        self._state.self_check = None
        self._state.is_animating = True
        self._state.status = f"Factoring as {factorization.describe()}."
        logger.info(
            "solve_planned equation=%s m=%d n=%d p=%d q=%d tiles=%d",
            format_equation(a, b, c),
            factorization.m,
            factorization.n,
            factorization.p,
            factorization.q,
            len(tiles),
        )
        return layout

    def advance_frame(self) -> bool:
        """Step the auto-layout animation. Returns whether it is still running."""
        if not self._state.is_animating:
            return False
        if step_animation(
            self._state.tiles,
            ease=self._settings.ease,
            settle_threshold=self._settings.settle_threshold,
        ):
            return True
        self._state.is_animating = False
        self._state.self_check = self.check_arrangement(silent=True)
        logger.info("animation_settled self_check=%s", self._state.self_check.outcome.value)
        return False

    def equation_text(self) -> str:
        coefficients = self._state.coefficients
        return format_equation(coefficients.a, coefficients.b, coefficients.c)

    def snapshot(self) -> BoardSnapshot:
        """Return current view-ready state."""
        grabbed = self._state.held.tile_id
        views = tuple(
            TileView(
                tile_id=tile.tile_id,
                kind=tile.kind,
                is_negative=tile.is_negative,
                orientation=tile.orientation,
                x=tile.x,
                y=tile.y,
                width=tile.width,
                height=tile.height,
                label=tile.label,
                fill=self._theme.fill_for(tile.kind, tile.is_negative),
                stroke=self._theme.stroke,
                label_color=self._theme.label,
                is_grabbed=tile.tile_id == grabbed,
            )
            for tile in self._state.tiles
        )
        return BoardSnapshot(
            tiles=views,
            grabbed_tile_id=grabbed,
            is_animating=self._state.is_animating,
            status=self._state.status,
            equation=self.equation_text(),
            readout=format_readout(self._state.tiles),
            feedback=self._state.feedback,
        )

    def _apply_drag_result(self, result: DragActionResult) -> bool:
        self._state.held = result.held_state
        if result.status is not None:
            self._state.status = result.status
        return result.handled
