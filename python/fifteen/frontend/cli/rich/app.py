"""Rich terminal frontend — styled board, stats, and win panel.

This module is the presentation layer: it maps keypresses to engine
moves and drives the one-second ``Ticker`` from its input loop.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fifteen.backend.engine.gameplay import GamePlay, PuzzleEngine
from fifteen.backend.engine.gamestate import GameSession, Phase
from fifteen.backend.models.board import EMPTY, SIZE, Direction, valid_moves
from fifteen.frontend.clock import Ticker, format_time
from fifteen.frontend.cli.input_handler import get_key_timeout
from fifteen.frontend.intro import LogoPhase, phase_at

logger = logging.getLogger(__name__)

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

# (tile colour, tile width) per phase
_LOGO_STYLES = {
    LogoPhase.INITIAL: ("grey37", 2),
    LogoPhase.EXPAND: ("bright_blue", 4),
    LogoPhase.TRANSFORM: ("cyan", 4),
}


# -- rendering ----------------------------------------------------------------


def render_board(session: GameSession) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    board = session.board
    movable = valid_moves(board.empty_index) if session.is_ticking else frozenset()
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=3, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            index = r * SIZE + c
            if val == EMPTY:
                cells.append("[dim]·[/dim]")
            elif index in movable:
                cells.append(f"[bold yellow]{val:>2}[/bold yellow]")
            elif board.is_tile_correct(index):
                cells.append(f"[bold green]{val:>2}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>2}[/bold white]")
        table.add_row(*cells)

    return table


def render_stats(session: GameSession) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(session.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(format_time(session.elapsed), style="bold yellow")
    return stats


def render_logo(phase: LogoPhase) -> Table:
    """The 4×4 logo grid; the bottom-right cell stays empty."""
    colour, width = _LOGO_STYLES.get(phase, _LOGO_STYLES[LogoPhase.TRANSFORM])
    grid = Table.grid(padding=(0, 1))
    for _ in range(SIZE):
        grid.add_column()
    for r in range(SIZE):
        row = []
        for c in range(SIZE):
            empty = r == SIZE - 1 and c == SIZE - 1
            row.append(Text(" " * width, style="" if empty else f"on {colour}"))
        grid.add_row(*row)
    return grid


def _controls(session: GameSession) -> Text:
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("N", style="bold cyan")
    if session.phase is Phase.PLAYING:
        controls.append("  new game   ", style="dim")
    else:
        controls.append("  start game   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


def _draw_game(session: GameSession) -> None:
    console.clear()

    parts = [Align.center(render_board(session))]
    if session.complete:
        congrats = Text()
        congrats.append("\n  ★ ", style="bold yellow")
        congrats.append("Congratulations!", style="bold green")
        congrats.append("  ★\n", style="bold yellow")
        parts.append(Align.center(congrats))
        parts.append(
            Align.center(
                Text(
                    f"Completed in {session.moves} moves and "
                    f"{format_time(session.elapsed)}",
                    style="green",
                )
            )
        )
    elif session.phase is Phase.IDLE:
        parts.append(
            Align.center(
                Text("\nPress N to start. Slide tiles next to the gap.", style="dim")
            )
        )

    border = "bold green" if session.complete else "bright_blue"
    panel = Panel(
        Group(*parts),
        title="[bold cyan]F I F T E E N[/bold cyan]",
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(render_stats(session)))
    console.print(Align.center(_controls(session)))


def _play_intro() -> None:
    start = time.monotonic()
    while (phase := phase_at(time.monotonic() - start)) is not LogoPhase.DONE:
        console.clear()
        console.print()
        console.print(Align.center(render_logo(phase)))
        time.sleep(0.1)


# -- game loop ----------------------------------------------------------------


def _game_loop(
    game: GamePlay,
    read_key: Callable[[float], str | None] = get_key_timeout,
    clock: Callable[[], float] = time.monotonic,
) -> None:
    ticker = Ticker(game.tick, clock=clock)

    try:
        while True:
            _draw_game(game.session)

            # Poll for input with a short timeout so the clock keeps ticking.
            while True:
                key = read_key(0.25)
                if key is not None:
                    break
                if ticker.sync(game.is_playing):
                    _draw_game(game.session)

            # Seconds that passed while keys kept arriving are due before
            # the key can end the game.
            ticker.sync(game.is_playing)

            if key in _DIRECTIONS:
                result = game.move(_DIRECTIONS[key])
                if result.completed:
                    ticker.stop()
            elif key == "shuffle":
                game.start()
                ticker.restart()
            elif key == "reset":
                game.reset()
                ticker.stop()
            elif key == "quit":
                return
    finally:
        ticker.stop()


# -- public entry point -------------------------------------------------------


def run(engine: PuzzleEngine, intro: bool = True) -> None:
    """Launch the Rich frontend."""
    if intro:
        _play_intro()
    logger.info("Rich frontend started")
    _game_loop(GamePlay(engine))
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
