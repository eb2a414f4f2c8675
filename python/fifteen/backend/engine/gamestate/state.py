"""Snapshot of a game in progress."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from fifteen.backend.models.board import Board


class Phase(StrEnum):
    IDLE = "idle"
    PLAYING = "playing"
    COMPLETE = "complete"


@dataclass(frozen=True)
class GameSession:
    """Holds the board, move counter, elapsed seconds, and play flags.

    Sessions are values: engine operations return a new session rather
    than mutating the one they were given.
    """

    board: Board
    moves: int = 0
    elapsed: int = 0
    playing: bool = False
    complete: bool = False

    @property
    def empty_index(self) -> int:
        return self.board.empty_index

    @property
    def phase(self) -> Phase:
        if self.complete:
            return Phase.COMPLETE
        if self.playing:
            return Phase.PLAYING
        return Phase.IDLE

    @property
    def is_ticking(self) -> bool:
        """True while the external clock should keep advancing time."""
        return self.playing and not self.complete
