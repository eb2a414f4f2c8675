from fifteen.backend.models.board import (
    CELLS,
    EMPTY,
    SIZE,
    SOLVED,
    Board,
    Direction,
    valid_moves,
)

__all__ = ["CELLS", "EMPTY", "SIZE", "SOLVED", "Board", "Direction", "valid_moves"]
