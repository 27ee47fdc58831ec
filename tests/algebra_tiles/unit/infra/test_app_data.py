from __future__ import annotations

from algebra_tiles.infra.app_data import resolve_app_data_root, resolve_logs_dir


def test_resolve_app_data_root_prefers_configured_dir(monkeypatch, tmp_path) -> None:
    custom = tmp_path / "custom_root"
    monkeypatch.setenv("ALGEBRA_TILES_APP_DATA_DIR", str(custom))
    assert resolve_app_data_root() == custom


def test_resolve_app_data_root_defaults_to_project_appdata(monkeypatch) -> None:
    monkeypatch.delenv("ALGEBRA_TILES_APP_DATA_DIR", raising=False)
    root = resolve_app_data_root()
    assert root.name == "appdata"
    assert (root.parent / "algebra_tiles").is_dir()


def test_resolve_logs_dir_normalizes_relative_paths(monkeypatch, tmp_path) -> None:
    root = tmp_path / "appdata_root"
    monkeypatch.setenv("ALGEBRA_TILES_APP_DATA_DIR", str(root))
    monkeypatch.delenv("ALGEBRA_TILES_LOG_DIR", raising=False)
    assert resolve_logs_dir() == root / "logs"

    monkeypatch.setenv("ALGEBRA_TILES_LOG_DIR", "run_logs")
    assert resolve_logs_dir() == root / "run_logs"

    monkeypatch.setenv("ALGEBRA_TILES_LOG_DIR", str(tmp_path / "elsewhere"))
    assert resolve_logs_dir() == tmp_path / "elsewhere"
