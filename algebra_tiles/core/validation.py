"""Arrangement validation against a target quadratic."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from algebra_tiles.core.geometry import GridDimensions, infer_grid_dimensions, summarize_areas
from algebra_tiles.core.models import ScaleConfig, Tile

AREA_TOLERANCE = 200.0
MAX_CUT = 5

logger = logging.getLogger(__name__)


class ValidationOutcome(StrEnum):
    """Verdict category for an arrangement check."""

    EMPTY = "EMPTY"
    RECTANGLE = "RECTANGLE"
    OVERLAP = "OVERLAP"
    INVALID = "INVALID"
    UNSATISFIABLE = "UNSATISFIABLE"


VERDICT_MESSAGES: dict[ValidationOutcome, str] = {
    ValidationOutcome.EMPTY: "No tiles to check!",
    ValidationOutcome.RECTANGLE: "Great job! You formed a perfect rectangle.",
    ValidationOutcome.OVERLAP: "Valid Overlap Arrangement! Result area matches the equation.",
    ValidationOutcome.INVALID: "Not a valid rectangle or correct solution.",
}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """User-facing verdict of an arrangement check."""

    valid: bool
    message: str
    outcome: ValidationOutcome

    @classmethod
    def of(cls, outcome: ValidationOutcome) -> ValidationResult:
        valid = outcome in (ValidationOutcome.RECTANGLE, ValidationOutcome.OVERLAP)
        return cls(valid=valid, message=VERDICT_MESSAGES[outcome], outcome=outcome)

    @classmethod
    def unsatisfiable(cls, message: str) -> ValidationResult:
        return cls(valid=False, message=message, outcome=ValidationOutcome.UNSATISFIABLE)


@dataclass(frozen=True, slots=True)
class Cut:
    """Unit columns (p) and rows (q) removed from the base rectangle."""

    p: int
    q: int


def expand_product(
    width: GridDimensions, height: GridDimensions, cut: Cut
) -> tuple[int, int, int]:
    """Expand (wx + wu - p)(hx + hu - q) into (a, b, c)."""
    f1_x, f1_c = width.squares, width.units - cut.p
    f2_x, f2_c = height.squares, height.units - cut.q
    return f1_x * f2_x, f1_x * f2_c + f1_c * f2_x, f1_c * f2_c


def expected_removed_area(cut: Cut, bbox_width: float, bbox_height: float, unit_length: float) -> float:
    """Area covered by p unit columns and q unit rows, counted once."""
    return (
        cut.p * unit_length * bbox_height
        + cut.q * unit_length * bbox_width
        - cut.p * cut.q * unit_length * unit_length
    )


def matching_cuts(width: GridDimensions, height: GridDimensions, a: int, b: int, c: int) -> list[Cut]:
    """All bounded cuts whose expanded product equals the target."""
    matches: list[Cut] = []
    for p in range(MAX_CUT + 1):
        for q in range(MAX_CUT + 1):
            if p == 0 and q == 0:
                continue
            cut = Cut(p, q)
            if expand_product(width, height, cut) == (a, b, c):
                matches.append(cut)
    return matches


def validate_arrangement(
    tiles: Sequence[Tile],
    a: int,
    b: int,
    c: int,
    scale: ScaleConfig,
    *,
    tolerance: float = AREA_TOLERANCE,
) -> ValidationResult:
    """Decide whether the arrangement is a rectangular factorization of ax² + bx + c."""
    summary = summarize_areas(tiles)
    if summary is None:
        return ValidationResult.of(ValidationOutcome.EMPTY)

    bounds = summary.bounds
    bbox_area = bounds.area

    if not summary.has_negative:
        if abs(bbox_area - summary.positive_area) < tolerance:
            return ValidationResult.of(ValidationOutcome.RECTANGLE)
        return ValidationResult.of(ValidationOutcome.INVALID)

    if summary.positive_count == 0:
        return ValidationResult.of(ValidationOutcome.INVALID)
    if not abs(bbox_area - summary.positive_area) < tolerance:
        logger.debug(
            "validation_base_incomplete bbox_area=%.1f positive_area=%.1f",
            bbox_area,
            summary.positive_area,
        )
        return ValidationResult.of(ValidationOutcome.INVALID)

    unresolved = GridDimensions(0, 0)
    width = infer_grid_dimensions(bounds.w, scale) or unresolved
    height = infer_grid_dimensions(bounds.h, scale) or unresolved
    for cut in matching_cuts(width, height, a, b, c):
        expected = expected_removed_area(cut, bounds.w, bounds.h, scale.unit_length)
        if abs(expected - summary.negative_area) < tolerance:
            return ValidationResult.of(ValidationOutcome.OVERLAP)
        logger.debug(
            "validation_cut_area_mismatch p=%d q=%d expected=%.1f actual=%.1f",
            cut.p,
            cut.q,
            expected,
            summary.negative_area,
        )
    return ValidationResult.of(ValidationOutcome.INVALID)
