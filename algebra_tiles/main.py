"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import math
from collections.abc import Iterable, Sequence

from algebra_tiles.app.controller import TileBoardController
from algebra_tiles.core.animation import steps_to_settle
from algebra_tiles.core.models import Tile
from algebra_tiles.core.notation import format_equation
from algebra_tiles.core.solver import SolverUnsatisfiable, find_factorization
from algebra_tiles.infra.config import TileSettings, load_default_env_files, load_settings
from algebra_tiles.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algebra-tiles", description="Factor quadratics with algebra tiles.")
    parser.add_argument("--no-log-file", action="store_true", help="Log to the console only.")
    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("factor", "Print the integer factorization of ax^2 + bx + c."),
        ("solve", "Lay out tiles for ax^2 + bx + c and print the settled arrangement."),
    ):
        command = sub.add_parser(name, help=help_text)
        command.add_argument("a", type=int)
        command.add_argument("b", type=int)
        command.add_argument("c", type=int)
    return parser


def _max_frames(tiles: Iterable[Tile], settings: TileSettings) -> int:
    """Frames needed for the farthest planned tile to land, plus slack."""
    travel = max(
        (math.hypot(tile.target.x - tile.x, tile.target.y - tile.y) for tile in tiles if tile.target is not None),
        default=0.0,
    )
    return steps_to_settle(travel, ease=settings.ease, settle_threshold=settings.settle_threshold) + 2


def run_factor(a: int, b: int, c: int) -> int:
    factorization = find_factorization(a, b, c)
    equation = format_equation(a, b, c)
    if factorization is None:
        logger.info("factor_unsatisfiable equation=%s", equation)
        print(f"{equation}: {SolverUnsatisfiable(a, b, c).message}")
        return 1
    print(f"{equation} = {factorization.describe()}")
    return 0


def run_solve(a: int, b: int, c: int, settings: TileSettings) -> int:
    controller = TileBoardController(settings)
    controller.set_coefficients(a, b, c)
    outcome = controller.solve()
    if isinstance(outcome, SolverUnsatisfiable):
        print(outcome.message)
        return 1

    frames = 0
    limit = _max_frames(controller.tiles, settings)
    while controller.advance_frame():
        frames += 1
        if frames > limit:
            logger.error("animation_did_not_settle frames=%d", frames)
            return 1

    snapshot = controller.snapshot()
    print(f"{snapshot.equation} = {outcome.factorization.describe()} ({frames} frames)")
    for view in snapshot.tiles:
        sign = "-" if view.is_negative else "+"
        print(
            f"  {sign}{view.label:<2} #{view.tile_id:<3} x={view.x:8.1f} y={view.y:8.1f} "
            f"w={view.width:6.1f} h={view.height:6.1f}"
        )
    check = controller.self_check
    if check is not None:
        print(f"self-check: {check.message}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the algebra tiles command line."""
    args = _build_parser().parse_args(argv)
    env_files = load_default_env_files()
    setup_logging(with_file=not args.no_log_file)
    logger.debug("env_files_loaded paths=%s", env_files)
    settings = load_settings()
    logger.info("command=%s a=%d b=%d c=%d", args.command, args.a, args.b, args.c)
    try:
        if args.command == "factor":
            return run_factor(args.a, args.b, args.c)
        return run_solve(args.a, args.b, args.c, settings)
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
