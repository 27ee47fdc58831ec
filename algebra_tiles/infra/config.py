"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from algebra_tiles.core.animation import DEFAULT_EASE, DEFAULT_SETTLE_THRESHOLD
from algebra_tiles.core.models import NARROW_VIEWPORT_BREAKPOINT
from algebra_tiles.core.snap import DEFAULT_SNAP_TOLERANCE
from algebra_tiles.core.validation import AREA_TOLERANCE
from algebra_tiles.infra.app_data import resolve_project_root

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env.app",
    "appdata/config/.env.app.local",
    ".env.app",
    ".env.app.local",
)


@dataclass(frozen=True, slots=True)
class TileSettings:
    """Immutable engine tuning sourced from environment."""

    snap_tolerance: float = DEFAULT_SNAP_TOLERANCE
    area_tolerance: float = AREA_TOLERANCE
    ease: float = DEFAULT_EASE
    settle_threshold: float = DEFAULT_SETTLE_THRESHOLD
    viewport_width: float = 1280.0
    viewport_height: float = 800.0
    narrow_breakpoint: float = float(NARROW_VIEWPORT_BREAKPOINT)


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def load_settings() -> TileSettings:
    """Load tile settings from ALGEBRA_TILES_* env vars."""
    ease = _float("ALGEBRA_TILES_EASE", DEFAULT_EASE)
    if not 0.0 < ease <= 1.0:
        ease = DEFAULT_EASE
    return TileSettings(
        snap_tolerance=_float("ALGEBRA_TILES_SNAP_TOLERANCE", DEFAULT_SNAP_TOLERANCE),
        area_tolerance=_float("ALGEBRA_TILES_AREA_TOLERANCE", AREA_TOLERANCE),
        ease=ease,
        settle_threshold=_float("ALGEBRA_TILES_SETTLE_THRESHOLD", DEFAULT_SETTLE_THRESHOLD),
        viewport_width=_float("ALGEBRA_TILES_VIEWPORT_WIDTH", 1280.0),
        viewport_height=_float("ALGEBRA_TILES_VIEWPORT_HEIGHT", 800.0),
        narrow_breakpoint=_float("ALGEBRA_TILES_NARROW_BREAKPOINT", float(NARROW_VIEWPORT_BREAKPOINT)),
    )


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> dict[str, str]:
    """Apply KEY=VALUE lines from an env file to the process environment.

    Returns the entries that were written. A missing file applies nothing.
    """
    env_path = _resolve_env_path(path)
    if env_path is None:
        return {}

    applied: dict[str, str] = {}
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        entry = _parse_env_line(raw_line)
        if entry is None:
            continue
        key, value = entry
        if override_existing or key not in os.environ:
            os.environ[key] = value
            applied[key] = value
    return applied


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> list[str]:
    """Load the app env files in order, later files winning.

    Returns the paths that existed.
    """
    loaded: list[str] = []
    for path in paths if paths is not None else DEFAULT_ENV_FILES:
        if _resolve_env_path(path) is None:
            continue
        load_env_file(path, override_existing=override_existing)
        loaded.append(path)
    return loaded


def _parse_env_line(raw_line: str) -> tuple[str, str] | None:
    line = raw_line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = (part.strip() for part in line.split("=", 1))
    if not key:
        return None
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        value = value[1:-1]
    return key, value


def _resolve_env_path(path: str) -> Path | None:
    """Find an env file relative to the cwd, then the project root."""
    for candidate in (Path(path), resolve_project_root() / path):
        if candidate.is_file():
            return candidate
    return None
