"""Fifteen — 4×4 sliding-tile puzzle.

Usage::

    fifteen                     # play in the terminal
    fifteen --seed 7            # reproducible shuffles
    fifteen --no-intro          # skip the logo intro
    fifteen --log-file game.log --log-level debug
"""

from __future__ import annotations

import logging
import random
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

from fifteen.backend.engine.gameplay import PuzzleEngine
from fifteen.frontend.cli.rich import app as rich_frontend

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def _configure_logging(log_file: Optional[Path], level: LogLevel) -> None:
    """Log to *log_file* if given; otherwise keep the terminal UI clean."""
    if log_file is None:
        logging.getLogger("fifteen").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level.value.upper()),
        format=_LOG_FORMAT,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="FIFTEEN_SEED",
        help="Seed for the shuffle so games can be replayed.",
    ),
    intro: bool = typer.Option(
        True, "--intro/--no-intro",
        envvar="FIFTEEN_INTRO",
        help="Play the logo intro before the game.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        envvar="FIFTEEN_LOG_FILE",
        dir_okay=False,
        help="Write logs to this file.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.info, "--log-level",
        envvar="FIFTEEN_LOG_LEVEL",
        case_sensitive=False,
        help="Minimum level written to the log file.",
    ),
) -> None:
    """Fifteen sliding-tile puzzle."""
    _configure_logging(log_file, log_level)
    engine = PuzzleEngine(rng=random.Random(seed))
    logging.getLogger(__name__).info("Starting with seed=%s", seed)
    rich_frontend.run(engine, intro=intro)


if __name__ == "__main__":
    app()
