"""Algebra tiles app-data paths."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def resolve_app_data_root() -> Path:
    """Resolve app-data root directory for runtime state."""
    configured = os.getenv("ALGEBRA_TILES_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return resolve_project_root() / candidate
    return resolve_project_root() / "appdata"


def resolve_project_root() -> Path:
    """Resolve the runtime root directory."""
    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            return Path(executable).resolve().parent
    return Path(__file__).resolve().parents[2]


def resolve_logs_dir() -> Path:
    """Resolve logs directory, honouring ALGEBRA_TILES_LOG_DIR."""
    configured = os.getenv("ALGEBRA_TILES_LOG_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return resolve_app_data_root() / candidate
    return resolve_app_data_root() / "logs"
