"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from transformviz import config
from transformviz.controller.interaction import InteractionMode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transformviz",
        description="Paint points on a plane and watch a 2x2 matrix transform them.",
    )
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    parser.add_argument(
        "--click-only",
        action="store_const",
        const=InteractionMode.CLICK.value,
        default=config.DEFAULT_INTERACTION_MODE,
        dest="mode",
        help="add one point per click instead of painting while dragging",
    )
    return parser


def cli(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Qt is imported lazily so that --help works without a display
    from transformviz.app.main import main

    level = logging.DEBUG if args.debug else logging.INFO
    return main(level=level, log_file=args.log_file, mode=args.mode)


if __name__ == "__main__":
    sys.exit(cli())
