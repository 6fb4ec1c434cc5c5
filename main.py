"""This module starts the game from the command line."""

import argparse
import logging
from collections.abc import Sequence

import roguegrid as rg
from roguegrid import engine
from roguegrid.support.config import LAYOUTS


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(description="Walk a glyph through rooms and tunnels.")
    parser.add_argument("--layout", choices=LAYOUTS, default="fixed", help="map recipe to use")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random layout")
    parser.add_argument("--font", default=None, help="font sheet, e.g. arial10x10.png")
    parser.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    return parser


def config_from_args(args: argparse.Namespace) -> rg.GameConfig:
    """Turn parsed arguments into a game configuration."""
    return rg.GameConfig(
        screen=rg.ScreenConfig(font=args.font),
        map=rg.MapConfig(seed=args.seed),
        layout=args.layout,
    )


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    engine.run(config_from_args(args))


if __name__ == "__main__":
    main()
