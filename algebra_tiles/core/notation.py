"""Coefficient parsing and equation text helpers."""

from __future__ import annotations

import re
from collections.abc import Iterable

from algebra_tiles.core.models import Tile, TileKind

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_coefficient(raw: str | int | None) -> int:
    """Coerce form input to an integer, defaulting to 0.

    Only the leading integer is read, so "12abc" gives 12 and "3.7" gives 3.
    """
    if raw is None:
        return 0
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(raw)
    if match is None:
        return 0
    return int(match.group(1))


def _term(coefficient: int, symbol: str) -> str:
    magnitude = abs(coefficient)
    if symbol and magnitude == 1:
        return symbol
    return f"{magnitude}{symbol}"


def format_equation(a: int, b: int, c: int) -> str:
    """Render ax^2 + bx + c with signs folded and zero terms dropped."""
    parts: list[str] = []
    for coefficient, symbol in ((a, "x^2"), (b, "x"), (c, "")):
        if coefficient == 0:
            continue
        term = _term(coefficient, symbol)
        if not parts:
            parts.append(term if coefficient > 0 else f"-{term}")
        else:
            parts.append(f"+ {term}" if coefficient > 0 else f"- {term}")
    if not parts:
        return "0"
    return " ".join(parts)


def signed_counts(tiles: Iterable[Tile]) -> tuple[int, int, int]:
    """Net (x², x, 1) tile counts, negatives subtracting."""
    counts = {TileKind.SQUARE: 0, TileKind.BAR: 0, TileKind.UNIT: 0}
    for tile in tiles:
        counts[tile.kind] += -1 if tile.is_negative else 1
    return counts[TileKind.SQUARE], counts[TileKind.BAR], counts[TileKind.UNIT]


def format_readout(tiles: Iterable[Tile]) -> str:
    """Live readout of the tiles on the board."""
    squares, bars, units = signed_counts(tiles)
    return f"Current: {squares}x^2 + {bars}x + {units}"
