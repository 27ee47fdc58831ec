"""Integer factoring search and auto-layout planning."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from algebra_tiles.core.models import Orientation, Point, ScaleConfig, Tile, TileKind, find_tile

UNSATISFIABLE_MESSAGE = "This equation doesn't favor nice integer rectangles!"

STAGING_ORIGIN = Point(50.0, 50.0)
STAGING_GAP = 10.0
STAGING_STEP = 50.0
STAGING_ROW_DROP = 120.0
STAGING_WRAP_DROP = 110.0
STAGING_WRAP_EVERY = 10


@dataclass(frozen=True, slots=True)
class Factorization:
    """(m·x + p)(n·x + q) with m·n = |a|, m·q + n·p = b and p·q = c."""

    m: int
    n: int
    p: int
    q: int

    def describe(self) -> str:
        return f"({_linear(self.m, self.p)})({_linear(self.n, self.q)})"


@dataclass(frozen=True, slots=True)
class SolverUnsatisfiable:
    """No integer rectangle exists within the bounded search."""

    a: int
    b: int
    c: int
    message: str = UNSATISFIABLE_MESSAGE


@dataclass(frozen=True, slots=True)
class TileAssignment:
    """Target slot for one tile."""

    tile_id: int
    target: Point
    orientation: Orientation | None = None


@dataclass(frozen=True, slots=True)
class LayoutPlan:
    """Target positions reproducing the rectangle for a factorization."""

    factorization: Factorization
    origin: Point
    width: float
    height: float
    assignments: tuple[TileAssignment, ...]


def _linear(coefficient: int, constant: int) -> str:
    x_term = "x" if coefficient == 1 else f"{coefficient}x"
    if constant == 0:
        return x_term
    sign = "+" if constant > 0 else "-"
    return f"{x_term} {sign} {abs(constant)}"


def closest_factors(value: int) -> tuple[int, int]:
    """Split |value| into the most square pair (m, n) with m <= n."""
    value = abs(value)
    if value == 0:
        return 0, 0
    m = math.isqrt(value)
    while m > 1 and value % m != 0:
        m -= 1
    return m, value // m


def find_factorization(a: int, b: int, c: int) -> Factorization | None:
    """Search p in [-limit, limit] for (mx + p)(nx + q) matching the target.

    The first pair in ascending p order wins.
    """
    m, n = closest_factors(a)
    limit = abs(c) if c != 0 else abs(b)
    for candidate in range(-limit, limit + 1):
        if c != 0:
            if candidate == 0 or c % candidate != 0:
                continue
            p, q = candidate, c // candidate
        else:
            if candidate != 0:
                continue
            p = 0
            q = b // m if m != 0 and b % m == 0 else 0
        if m * q + n * p == b:
            return Factorization(m=m, n=n, p=p, q=q)
    return None


def generate_tiles(a: int, b: int, c: int, scale: ScaleConfig, *, first_id: int = 1) -> list[Tile]:
    """Create |a| squares, |b| bars and |c| units in staging rows."""
    tiles: list[Tile] = []
    next_id = first_id

    def spawn(kind: TileKind, x: float, y: float, negative: bool) -> None:
        nonlocal next_id
        tiles.append(Tile(tile_id=next_id, kind=kind, x=x, y=y, is_negative=negative, scale=scale))
        next_id += 1

    x, y = STAGING_ORIGIN.x, STAGING_ORIGIN.y
    for _ in range(abs(a)):
        spawn(TileKind.SQUARE, x, y, a < 0)
        x += scale.square_length + STAGING_GAP

    x = STAGING_ORIGIN.x
    y += STAGING_ROW_DROP
    for index in range(abs(b)):
        spawn(TileKind.BAR, x, y, b < 0)
        x += STAGING_STEP
        if index % STAGING_WRAP_EVERY == STAGING_WRAP_EVERY - 1:
            x = STAGING_ORIGIN.x
            y += STAGING_WRAP_DROP

    x = STAGING_ORIGIN.x
    y += STAGING_ROW_DROP
    for _ in range(abs(c)):
        spawn(TileKind.UNIT, x, y, c < 0)
        x += STAGING_STEP
    return tiles


def plan_layout(
    tiles: Sequence[Tile],
    factorization: Factorization,
    scale: ScaleConfig,
    viewport: tuple[float, float],
) -> LayoutPlan:
    """Assign target slots so the tiles build the factorization's rectangle.

    Negative p or q place their bars inside the base's right or bottom edge
    so they overlap it. Slots without an available tile stay empty.
    """
    m, n, p, q = factorization.m, factorization.n, factorization.p, factorization.q
    big, unit = scale.square_length, scale.unit_length
    squares = [t for t in tiles if t.kind is TileKind.SQUARE]
    bars = [t for t in tiles if t.kind is TileKind.BAR]
    units = [t for t in tiles if t.kind is TileKind.UNIT]

    grid_w = m * big
    grid_h = n * big
    total_w = grid_w + p * unit if p > 0 else grid_w
    total_h = grid_h + q * unit if q > 0 else grid_h
    start_x = (viewport[0] - total_w) / 2
    start_y = (viewport[1] - total_h) / 2

    assignments: list[TileAssignment] = []
    square_slots = [
        Point(start_x + col * big, start_y + row * big) for row in range(n) for col in range(m)
    ]
    for tile, slot in zip(squares, square_slots):
        assignments.append(TileAssignment(tile.tile_id, slot))

    p_abs, q_abs = abs(p), abs(q)
    column_x = start_x + grid_w - p_abs * unit if p < 0 else start_x + grid_w
    row_y = start_y + grid_h - q_abs * unit if q < 0 else start_y + grid_h

    bar_slots = [
        (Point(column_x + col * unit, start_y + row * big), Orientation.VERTICAL)
        for col in range(p_abs)
        for row in range(n)
    ]
    bar_slots += [
        (Point(start_x + col * big, row_y + row * unit), Orientation.HORIZONTAL)
        for row in range(q_abs)
        for col in range(m)
    ]
    for tile, (slot, orientation) in zip(bars, bar_slots):
        assignments.append(TileAssignment(tile.tile_id, slot, orientation))

    unit_slots = [
        Point(column_x + col * unit, row_y + row * unit) for row in range(q_abs) for col in range(p_abs)
    ]
    for tile, slot in zip(units, unit_slots):
        assignments.append(TileAssignment(tile.tile_id, slot))

    return LayoutPlan(
        factorization=factorization,
        origin=Point(start_x, start_y),
        width=total_w,
        height=total_h,
        assignments=tuple(assignments),
    )


def plan(
    a: int,
    b: int,
    c: int,
    tiles: Sequence[Tile],
    scale: ScaleConfig,
    viewport: tuple[float, float],
) -> LayoutPlan | SolverUnsatisfiable:
    """Factor the target and plan a layout for the given tiles."""
    factorization = find_factorization(a, b, c)
    if factorization is None:
        return SolverUnsatisfiable(a, b, c)
    return plan_layout(tiles, factorization, scale, viewport)


def apply_plan(tiles: Sequence[Tile], layout: LayoutPlan) -> list[Tile]:
    """Set orientations and targets, then return tiles in back-to-front order."""
    for assignment in layout.assignments:
        tile = find_tile(tiles, assignment.tile_id)
        if tile is None:
            raise KeyError(f"Unknown tile id {assignment.tile_id}.")
        if assignment.orientation is not None:
            tile.orientation = assignment.orientation
        tile.target = assignment.target
    return sorted(tiles, key=lambda tile: tile.kind.stack_rank)
