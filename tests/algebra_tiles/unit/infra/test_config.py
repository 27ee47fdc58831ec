from __future__ import annotations

import os

from algebra_tiles.infra.config import TileSettings, load_default_env_files, load_env_file, load_settings

_SETTING_VARS = (
    "ALGEBRA_TILES_SNAP_TOLERANCE",
    "ALGEBRA_TILES_AREA_TOLERANCE",
    "ALGEBRA_TILES_EASE",
    "ALGEBRA_TILES_SETTLE_THRESHOLD",
    "ALGEBRA_TILES_VIEWPORT_WIDTH",
    "ALGEBRA_TILES_VIEWPORT_HEIGHT",
    "ALGEBRA_TILES_NARROW_BREAKPOINT",
)


def _clear_settings_env(monkeypatch) -> None:
    for name in _SETTING_VARS:
        monkeypatch.delenv(name, raising=False)


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "A=1\nB='two'\n#comment\nINVALID\nC=three\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("C", "already")
    monkeypatch.delenv("A", raising=False)
    monkeypatch.delenv("B", raising=False)
    applied = load_env_file(str(env_file))
    assert applied == {"A": "1", "B": "two", "C": "three"}
    assert os.environ.get("A") == "1"
    assert os.environ.get("B") == "two"
    assert os.environ.get("C") == "three"


def test_load_env_file_can_preserve_existing_values(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("C=three\n", encoding="utf-8")
    monkeypatch.setenv("C", "already")
    assert load_env_file(str(env_file), override_existing=False) == {}
    assert os.environ.get("C") == "already"


def test_load_default_env_files_later_files_win(tmp_path, monkeypatch) -> None:
    app_env = tmp_path / ".env.app"
    app_local_env = tmp_path / ".env.app.local"
    app_env.write_text("ALGEBRA_TILES_EASE=0.2\nALGEBRA_TILES_SNAP_TOLERANCE=10\n", encoding="utf-8")
    app_local_env.write_text("ALGEBRA_TILES_EASE=0.25\n", encoding="utf-8")
    _clear_settings_env(monkeypatch)

    loaded = load_default_env_files(paths=(str(app_env), str(tmp_path / ".env.missing"), str(app_local_env)))
    assert loaded == [str(app_env), str(app_local_env)]
    assert os.environ.get("ALGEBRA_TILES_EASE") == "0.25"
    assert os.environ.get("ALGEBRA_TILES_SNAP_TOLERANCE") == "10"


def test_load_settings_defaults(monkeypatch) -> None:
    _clear_settings_env(monkeypatch)
    settings = load_settings()
    assert settings == TileSettings()
    assert settings.snap_tolerance == 15.0
    assert settings.area_tolerance == 200.0
    assert settings.ease == 0.1
    assert settings.narrow_breakpoint == 768.0


def test_load_settings_reads_overrides(monkeypatch) -> None:
    _clear_settings_env(monkeypatch)
    monkeypatch.setenv("ALGEBRA_TILES_SNAP_TOLERANCE", "20")
    monkeypatch.setenv("ALGEBRA_TILES_VIEWPORT_WIDTH", "640")
    monkeypatch.setenv("ALGEBRA_TILES_EASE", "0.5")
    settings = load_settings()
    assert settings.snap_tolerance == 20.0
    assert settings.viewport_width == 640.0
    assert settings.ease == 0.5


def test_load_settings_ignores_malformed_values(monkeypatch) -> None:
    _clear_settings_env(monkeypatch)
    monkeypatch.setenv("ALGEBRA_TILES_AREA_TOLERANCE", "lots")
    monkeypatch.setenv("ALGEBRA_TILES_EASE", "0")
    settings = load_settings()
    assert settings.area_tolerance == 200.0
    assert settings.ease == 0.1


def test_load_env_file_missing_applies_nothing(tmp_path) -> None:
    assert load_env_file(str(tmp_path / ".env.missing")) == {}
