"""Core domain models used by tile logic."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum

NARROW_VIEWPORT_BREAKPOINT = 768


class TileKind(StrEnum):
    """Algebra tile kinds."""

    SQUARE = "SQUARE"
    BAR = "BAR"
    UNIT = "UNIT"

    @property
    def label(self) -> str:
        return TILE_LABELS[self]

    @property
    def stack_rank(self) -> int:
        """Back-to-front rendering rank."""
        return TILE_STACK_RANKS[self]


TILE_LABELS: dict[TileKind, str] = {
    TileKind.SQUARE: "x²",
    TileKind.BAR: "x",
    TileKind.UNIT: "1",
}

TILE_STACK_RANKS: dict[TileKind, int] = {
    TileKind.SQUARE: 1,
    TileKind.BAR: 2,
    TileKind.UNIT: 3,
}


class Orientation(StrEnum):
    """Bar orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    def flipped(self) -> Orientation:
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


@dataclass(frozen=True, slots=True)
class Point:
    """Continuous plane coordinate."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Rect:
    """Simple axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def area(self) -> float:
        return self.w * self.h

    def contains(self, px: float, py: float) -> bool:
        """Return whether a point is inside the closed rectangle."""
        return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h


@dataclass(frozen=True, slots=True)
class ScaleConfig:
    """Pixel lengths of the unit side and the square side."""

    unit_length: float = 25.0
    square_length: float = 200.0

    def __post_init__(self) -> None:
        if self.unit_length <= 0:
            raise ValueError("unit_length must be positive.")
        if self.square_length <= self.unit_length:
            raise ValueError("square_length must be larger than unit_length.")


WIDE_SCALE = ScaleConfig(unit_length=25.0, square_length=200.0)
NARROW_SCALE = ScaleConfig(unit_length=20.0, square_length=100.0)


def scale_for_viewport(width: float, breakpoint: float = NARROW_VIEWPORT_BREAKPOINT) -> ScaleConfig:
    """Pick tile scale for the viewport size class."""
    if width <= breakpoint:
        return NARROW_SCALE
    return WIDE_SCALE


def tile_size(kind: TileKind, orientation: Orientation, scale: ScaleConfig) -> tuple[float, float]:
    """Compute (width, height) for a tile kind and orientation."""
    if kind is TileKind.SQUARE:
        return scale.square_length, scale.square_length
    if kind is TileKind.BAR:
        if orientation is Orientation.HORIZONTAL:
            return scale.square_length, scale.unit_length
        return scale.unit_length, scale.square_length
    return scale.unit_length, scale.unit_length


@dataclass(slots=True)
class Tile:
    """A single algebra tile on the plane.

    Size is derived from kind, orientation and scale on every read, so it
    always reflects the latest rotation or configuration change.
    """

    tile_id: int
    kind: TileKind
    x: float = 0.0
    y: float = 0.0
    is_negative: bool = False
    orientation: Orientation = Orientation.HORIZONTAL
    scale: ScaleConfig = field(default_factory=ScaleConfig)
    target: Point | None = None

    @property
    def size(self) -> tuple[float, float]:
        return tile_size(self.kind, self.orientation, self.scale)

    @property
    def width(self) -> float:
        return self.size[0]

    @property
    def height(self) -> float:
        return self.size[1]

    @property
    def rect(self) -> Rect:
        width, height = self.size
        return Rect(self.x, self.y, width, height)

    @property
    def label(self) -> str:
        return self.kind.label

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def contains_point(self, px: float, py: float) -> bool:
        """Return whether the point lies within the tile's closed rectangle."""
        return self.rect.contains(px, py)

    def toggle_orientation(self) -> bool:
        """Rotate a bar by 90 degrees. Returns whether anything changed."""
        if self.kind is not TileKind.BAR:
            return False
        self.orientation = self.orientation.flipped()
        return True


def apply_configuration(tiles: Iterable[Tile], config: ScaleConfig) -> None:
    """Rebind every tile to a new scale configuration."""
    for tile in tiles:
        tile.scale = config


def find_tile(tiles: Iterable[Tile], tile_id: int) -> Tile | None:
    """Find a tile by id."""
    for tile in tiles:
        if tile.tile_id == tile_id:
            return tile
    return None


def topmost_tile_at(tiles: list[Tile], px: float, py: float) -> Tile | None:
    """Return the frontmost tile containing the point."""
    for tile in reversed(tiles):
        if tile.contains_point(px, py):
            return tile
    return None
