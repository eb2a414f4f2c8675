"""Board model for the 15-puzzle."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

SIZE = 4
CELLS = SIZE * SIZE
EMPTY = 0
SOLVED: tuple[int, ...] = tuple(range(1, CELLS)) + (EMPTY,)


class Direction(StrEnum):
    """Direction a *tile* slides in (the gap moves the opposite way)."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the gap to the tile that slides into it.
# UP    → tile below the gap moves up
# DOWN  → tile above the gap moves down
# LEFT  → tile right of the gap moves left
# RIGHT → tile left of the gap moves right
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


def valid_moves(empty_index: int) -> frozenset[int]:
    """Return the cell indices orthogonally adjacent to *empty_index*.

    A corner yields 2 cells, an edge 3 and an interior cell 4.
    """
    if not 0 <= empty_index < CELLS:
        raise ValueError(
            f"Cell index must be in 0..{CELLS - 1}, got {empty_index}."
        )
    row, col = divmod(empty_index, SIZE)
    moves: set[int] = set()
    if row > 0:
        moves.add(empty_index - SIZE)  # up
    if row < SIZE - 1:
        moves.add(empty_index + SIZE)  # down
    if col > 0:
        moves.add(empty_index - 1)  # left
    if col < SIZE - 1:
        moves.add(empty_index + 1)  # right
    return frozenset(moves)


@dataclass(frozen=True)
class Board:
    """Immutable 4×4 puzzle board.

    Cells are stored row-major as a flat tuple (``index = row * 4 + col``).
    ``EMPTY`` marks the gap and ``empty_index`` always points at it.
    """

    cells: tuple[int, ...]
    empty_index: int

    def __post_init__(self) -> None:
        if not 0 <= self.empty_index < len(self.cells) or (
            self.cells[self.empty_index] != EMPTY
        ):
            raise ValueError(
                f"empty_index {self.empty_index} does not point at the "
                f"empty cell."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major cell list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15])
        """
        cells = tuple(flat)
        if len(cells) != CELLS:
            raise ValueError(
                f"Expected {CELLS} cells for a {SIZE}×{SIZE} board, "
                f"got {len(cells)}."
            )
        if sorted(cells) != list(range(CELLS)):
            raise ValueError(
                f"Cells must hold 1..{CELLS - 1} exactly once plus one "
                f"empty cell ({EMPTY}), got {list(cells)}."
            )
        return cls(cells=cells, empty_index=cells.index(EMPTY))

    # -- queries --------------------------------------------------------------

    def is_solved(self) -> bool:
        """Check that cells 0..14 hold 1..15 in order and cell 15 is empty."""
        return self.cells == SOLVED

    def is_tile_correct(self, index: int) -> bool:
        return self.cells[index] == SOLVED[index]

    def target_for(self, direction: Direction) -> int | None:
        """Index of the tile that would slide in *direction*, if any."""
        row, col = divmod(self.empty_index, SIZE)
        dr, dc = _OFFSETS[direction]
        tr, tc = row + dr, col + dc
        if not (0 <= tr < SIZE and 0 <= tc < SIZE):
            return None
        return tr * SIZE + tc

    def rows(self) -> list[tuple[int, ...]]:
        return [self.cells[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    # -- transitions ----------------------------------------------------------

    def slide(self, target: int) -> Board:
        """Swap the gap with *target*.  Adjacency is the caller's concern."""
        cells = list(self.cells)
        cells[self.empty_index], cells[target] = cells[target], cells[self.empty_index]
        return Board(cells=tuple(cells), empty_index=target)
