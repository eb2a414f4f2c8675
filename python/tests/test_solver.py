"""Solvability of generated boards.

Shuffles are checked two independent ways: the inversion-parity rule in
``Solver.is_solvable`` across many seeds, and a plain breadth-first
search back to the goal for short scrambles.
"""

from __future__ import annotations

import random
from collections import deque

import pytest

from fifteen.backend.engine.gamegenerator import GameGenerator
from fifteen.backend.engine.gamesolver import Solver
from fifteen.backend.models.board import CELLS, SOLVED, Board, valid_moves


# -- helpers ------------------------------------------------------------------


def _bfs_distance(board: Board, limit: int) -> int | None:
    """Number of moves from *board* to the goal, or ``None`` past *limit*."""
    seen = {board.cells}
    queue: deque[tuple[Board, int]] = deque([(board, 0)])
    while queue:
        current, depth = queue.popleft()
        if current.is_solved():
            return depth
        if depth == limit:
            continue
        for target in valid_moves(current.empty_index):
            nxt = current.slide(target)
            if nxt.cells not in seen:
                seen.add(nxt.cells)
                queue.append((nxt, depth + 1))
    return None


# -- parity rule ----------------------------------------------------------------


def test_goal_is_solvable() -> None:
    board = GameGenerator.solved()
    assert Solver.inversions(board) == 0
    assert Solver.is_solvable(board)


def test_swapped_pair_is_unsolvable() -> None:
    board = Board.from_flat(
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 15, 14, 0]
    )
    assert Solver.inversions(board) == 1
    assert not Solver.is_solvable(board)


@pytest.mark.parametrize("target", [11, 14])
def test_single_move_keeps_solvable(target: int) -> None:
    assert Solver.is_solvable(GameGenerator.solved().slide(target))


def test_shuffles_are_always_solvable() -> None:
    start = GameGenerator.solved()
    for seed in range(1000):
        board, path = GameGenerator.scramble(start, random.Random(seed))
        assert sorted(board.cells) == list(range(CELLS)), seed
        assert board.empty_index == path[-1], seed
        assert Solver.is_solvable(board), seed


# -- breadth-first search -------------------------------------------------------


@pytest.mark.parametrize("seed", range(20))
def test_short_scramble_reaches_goal_by_search(seed: int) -> None:
    board, _ = GameGenerator.scramble(
        GameGenerator.solved(), random.Random(seed), steps=8
    )
    distance = _bfs_distance(board, limit=8)
    assert distance is not None
    assert distance <= 8


def test_scramble_leaves_input_untouched() -> None:
    start = GameGenerator.solved()
    GameGenerator.scramble(start, random.Random(0))
    assert start.cells == SOLVED
