"""Solvability check for 15-puzzle boards."""

from __future__ import annotations

from fifteen.backend.models.board import EMPTY, SIZE, Board


class Solver:
    """Stateless helpers — all methods are static."""

    @staticmethod
    def inversions(board: Board) -> int:
        """Count tile pairs that appear in the wrong relative order."""
        tiles = [v for v in board.cells if v != EMPTY]
        count = 0
        for i, a in enumerate(tiles):
            for b in tiles[i + 1 :]:
                if a > b:
                    count += 1
        return count

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        On an even-width grid a vertical move flips both the inversion
        parity and the gap's row parity, while a horizontal move changes
        neither.  The goal has no inversions and the gap on row 3, so a
        board is reachable iff ``inversions + gap_row`` is odd.
        """
        gap_row = board.empty_index // SIZE
        return (Solver.inversions(board) + gap_row) % 2 == 1
