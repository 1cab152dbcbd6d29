"""Command-line options and logging setup for the grid games window."""
import argparse
import logging
from pathlib import Path

from gridgames.components.game_state import GameMode
from gridgames.constants import LIFE_DEFAULT_SIZE, OTHELLO_DEFAULT_SIZE


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Game of Life and Othello on an arcade window")
    parser.add_argument("game", choices=[mode.value for mode in GameMode], help="Which board to open")
    parser.add_argument("--size", type=int, default=None, help="Cells per board side")
    parser.add_argument("--load", type=Path, default=None, help="Snapshot file to load at startup")
    parser.add_argument("--save-dir", type=Path, default=Path.cwd() / "snapshots", help="Where SAVE writes file_<n>.json")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)


def board_size(args: argparse.Namespace) -> int:
    if args.size is not None:
        return args.size
    return LIFE_DEFAULT_SIZE if GameMode(args.game) == GameMode.LIFE else OTHELLO_DEFAULT_SIZE


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
