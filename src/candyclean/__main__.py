"""Command-line entry point for Candy Clean."""

from __future__ import annotations

import argparse
import logging
import random
import sys

from candyclean.config import (
    DEMO_COLORS,
    DEMO_LAYOUT,
    PRESETS,
    DisplayConfig,
    GameConfig,
    preset_by_name,
    preset_slug,
)
from candyclean.errors import BoardConfigError
from candyclean.factories.board import validate_board_config
from candyclean.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Candy Clean.")
    parser.add_argument(
        "--difficulty",
        choices=[preset_slug(preset) for preset in PRESETS],
        help="Start directly on a difficulty preset instead of showing the menu.",
    )
    parser.add_argument("--size", type=int, help="Override the board side length.")
    parser.add_argument("--colors", type=int, help="Override the number of colors.")
    parser.add_argument("--objective", type=int, help="Override the score objective.")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Play the built-in 15x15 board instead of a random one.",
    )
    parser.add_argument("--seed", type=int, help="Seed the random board generation.")
    parser.add_argument(
        "--text",
        action="store_true",
        help="Play in the terminal instead of opening a window.",
    )
    parser.add_argument("--width", type=int, help="Override the window width.")
    parser.add_argument("--height", type=int, help="Override the window height.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    )
    return parser


def parse_config(namespace: argparse.Namespace) -> GameConfig:
    display = DisplayConfig()
    return GameConfig(
        preset=preset_by_name(namespace.difficulty) if namespace.difficulty else None,
        size=namespace.size,
        colors=namespace.colors,
        objective=namespace.objective,
        seed=namespace.seed,
        demo=namespace.demo,
        display=DisplayConfig(
            width=namespace.width or display.width,
            height=namespace.height or display.height,
            caption=display.caption,
        ),
    )


def run_text(config: GameConfig, stdin=None, stdout=None) -> int:
    from candyclean.console import ConsoleShell, choose_preset
    from candyclean.game import Game

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    rng = random.Random(config.seed) if config.seed is not None else None
    if config.demo:
        game = Game(rng=rng)
        game.start_layout(DEMO_LAYOUT, DEMO_COLORS, config.demo_objective())
        ConsoleShell(game, stdin, stdout).run()
        return 0
    preset = config.resolved()
    while True:
        if preset is None:
            preset = choose_preset(stdin, stdout, config.menu_presets())
            if preset is None:
                return 0
        game = Game(rng=rng)
        game.start_random(preset.dimensions, preset.dimensions, preset.colors, preset.objective)
        if not ConsoleShell(game, stdin, stdout).run():
            return 0
        if config.resolved() is not None:
            return 0
        preset = None


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    config = parse_config(args)
    preset = config.resolved()
    logger.debug("Resolved preset: %s", preset)
    if config.demo and preset is not None:
        parser.error("--demo cannot be combined with --difficulty, --size or --colors")
    if preset is not None:
        try:
            validate_board_config(preset.dimensions, preset.dimensions, preset.colors)
        except BoardConfigError as exc:
            parser.error(str(exc))
    if args.text:
        return run_text(config)
    from candyclean.app import main as run_window

    run_window(config)
    return 0


if __name__ == "__main__":  # pragma: no cover - module use only
    raise SystemExit(main())
