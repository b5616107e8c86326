"""Command line entry point."""

import argparse
import logging

from perfect_circle.game_state import Game
from perfect_circle.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw a circle and get scored on it.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser


def main(argv=None):
    """Entry point for the game."""
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    game = Game()
    game.run()
