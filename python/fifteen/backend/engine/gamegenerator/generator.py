"""Generates solvable 15-puzzle boards."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, TypeVar

from fifteen.backend.models.board import CELLS, SOLVED, Board, valid_moves

logger = logging.getLogger(__name__)

SHUFFLE_STEPS = 1000

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can pick an element uniformly, e.g. ``random.Random``."""

    def choice(self, seq: Sequence[T]) -> T: ...


# Neighbours of every cell in ascending order, so a seeded source always
# sees the same candidate sequence.
_NEIGHBOURS: tuple[tuple[int, ...], ...] = tuple(
    tuple(sorted(valid_moves(i))) for i in range(CELLS)
)


class GameGenerator:
    """Creates solvable puzzles by replaying random legal moves."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (1..15 in order, gap bottom-right)."""
        return Board(cells=SOLVED, empty_index=CELLS - 1)

    @staticmethod
    def scramble(
        board: Board, rng: RandomSource, steps: int = SHUFFLE_STEPS
    ) -> tuple[Board, list[int]]:
        """Walk the gap *steps* times to a uniformly chosen neighbour.

        Returns the scrambled board together with the gap position after
        every step, which is enough to replay the walk backwards.  Every
        step is a legal move, so the result is always solvable.
        """
        cells = list(board.cells)
        empty = board.empty_index
        path: list[int] = []

        for _ in range(steps):
            target = rng.choice(_NEIGHBOURS[empty])
            cells[empty], cells[target] = cells[target], cells[empty]
            empty = target
            path.append(target)

        logger.debug("Scrambled board with %d steps, gap at %d", steps, empty)
        return Board(cells=tuple(cells), empty_index=empty), path
