"""Numpy-backed geometry helpers over tile rectangles."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from algebra_tiles.core.models import Rect, ScaleConfig, Tile

SQUARE_COUNT_RANGE = (1, 5)
UNIT_COUNT_RANGE = (0, 10)
GRID_FIT_TOLERANCE = 30.0


@dataclass(frozen=True, slots=True)
class GridDimensions:
    """A side length expressed as square sides plus unit sides."""

    squares: int
    units: int


@dataclass(frozen=True, slots=True)
class AreaSummary:
    """Bounding box and signed area totals of an arrangement."""

    bounds: Rect
    positive_area: float
    negative_area: float
    positive_count: int
    negative_count: int

    @property
    def has_negative(self) -> bool:
        return self.negative_count > 0


def rect_array(tiles: Sequence[Tile]) -> np.ndarray:
    """Stack tile rectangles as an (N, 4) array of x, y, w, h."""
    if not tiles:
        return np.zeros((0, 4), dtype=np.float64)
    return np.array([[t.x, t.y, t.width, t.height] for t in tiles], dtype=np.float64)


def bounding_box(tiles: Sequence[Tile]) -> Rect | None:
    """Minimal axis-aligned rectangle enclosing every tile."""
    rects = rect_array(tiles)
    if rects.shape[0] == 0:
        return None
    min_x = float(rects[:, 0].min())
    min_y = float(rects[:, 1].min())
    max_x = float((rects[:, 0] + rects[:, 2]).max())
    max_y = float((rects[:, 1] + rects[:, 3]).max())
    return Rect(min_x, min_y, max_x - min_x, max_y - min_y)


def summarize_areas(tiles: Sequence[Tile]) -> AreaSummary | None:
    """Compute bounds plus positive and negative physical area sums."""
    bounds = bounding_box(tiles)
    if bounds is None:
        return None
    rects = rect_array(tiles)
    areas = rects[:, 2] * rects[:, 3]
    negative = np.array([t.is_negative for t in tiles], dtype=bool)
    return AreaSummary(
        bounds=bounds,
        positive_area=float(areas[~negative].sum()),
        negative_area=float(areas[negative].sum()),
        positive_count=int((~negative).sum()),
        negative_count=int(negative.sum()),
    )


def infer_grid_dimensions(
    pixels: float,
    scale: ScaleConfig,
    *,
    tolerance: float = GRID_FIT_TOLERANCE,
) -> GridDimensions | None:
    """Express a pixel length as squares * square_length + units * unit_length.

    Searches the small bounded ranges exhaustively and keeps the first best
    fit in (squares, units) order. Returns None when the best error is not
    below the tolerance.
    """
    squares = np.arange(SQUARE_COUNT_RANGE[0], SQUARE_COUNT_RANGE[1] + 1)
    units = np.arange(UNIT_COUNT_RANGE[0], UNIT_COUNT_RANGE[1] + 1)
    grid_squares, grid_units = np.meshgrid(squares, units, indexing="ij")
    estimates = grid_squares * scale.square_length + grid_units * scale.unit_length
    errors = np.abs(estimates - pixels)
    best = int(np.argmin(errors))
    if not errors.flat[best] < tolerance:
        return None
    return GridDimensions(squares=int(grid_squares.flat[best]), units=int(grid_units.flat[best]))
