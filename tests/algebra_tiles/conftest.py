from __future__ import annotations

from collections.abc import Callable

import pytest

from algebra_tiles.app.controller import TileBoardController
from algebra_tiles.core.models import WIDE_SCALE, Orientation, ScaleConfig, Tile, TileKind
from algebra_tiles.infra.config import TileSettings

TileFactory = Callable[..., Tile]


@pytest.fixture
def scale() -> ScaleConfig:
    return WIDE_SCALE


@pytest.fixture
def make_tile(scale: ScaleConfig) -> TileFactory:
    counter = iter(range(1, 10_000))

    def _make(
        kind: TileKind,
        x: float = 0.0,
        y: float = 0.0,
        *,
        negative: bool = False,
        orientation: Orientation = Orientation.HORIZONTAL,
    ) -> Tile:
        return Tile(
            tile_id=next(counter),
            kind=kind,
            x=x,
            y=y,
            is_negative=negative,
            orientation=orientation,
            scale=scale,
        )

    return _make


@pytest.fixture
def settings() -> TileSettings:
    return TileSettings()


@pytest.fixture
def controller(settings: TileSettings) -> TileBoardController:
    return TileBoardController(settings)
