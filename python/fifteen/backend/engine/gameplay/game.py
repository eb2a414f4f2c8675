"""Core gameplay logic — shuffles, processes moves, and checks the win condition."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace

from fifteen.backend.engine.gamegenerator import (
    SHUFFLE_STEPS,
    GameGenerator,
    RandomSource,
)
from fifteen.backend.engine.gamestate import GameSession
from fifteen.backend.models.board import Direction, valid_moves

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    session: GameSession
    accepted: bool
    completed: bool


class PuzzleEngine:
    """Pure transition rules for a 15-puzzle session.

    Every operation takes a ``GameSession`` and returns a new one.  The
    only source of nondeterminism is *rng*, used when shuffling.
    """

    def __init__(
        self, rng: RandomSource | None = None, steps: int = SHUFFLE_STEPS
    ) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self.steps = steps

    def initialize(self) -> GameSession:
        """Return an idle session on the solved board with cleared counters."""
        return GameSession(board=GameGenerator.solved())

    @staticmethod
    def valid_moves(empty_index: int) -> frozenset[int]:
        return valid_moves(empty_index)

    def shuffle(self, session: GameSession) -> GameSession:
        """Scramble the current board and start a fresh game on it."""
        board, _ = GameGenerator.scramble(session.board, self.rng, self.steps)
        logger.info("New game started, gap at %d", board.empty_index)
        return GameSession(board=board, playing=True)

    def apply_move(self, session: GameSession, target_index: int) -> MoveResult:
        """Slide the tile at *target_index* into the gap.

        The move is rejected, leaving *session* untouched, unless the game
        is in progress and the tile is orthogonally adjacent to the gap.
        """
        if not session.is_ticking:
            logger.debug("Move to %s ignored: game is %s", target_index, session.phase)
            return MoveResult(session, accepted=False, completed=False)

        if target_index not in valid_moves(session.empty_index):
            logger.debug(
                "Move to %s rejected: not adjacent to gap at %d",
                target_index,
                session.empty_index,
            )
            return MoveResult(session, accepted=False, completed=False)

        board = session.board.slide(target_index)
        completed = board.is_solved()
        session = replace(
            session,
            board=board,
            moves=session.moves + 1,
            playing=not completed,
            complete=completed,
        )
        if completed:
            logger.info(
                "Puzzle solved in %d moves and %d seconds",
                session.moves,
                session.elapsed,
            )
        return MoveResult(session, accepted=True, completed=completed)

    @staticmethod
    def tick(session: GameSession) -> GameSession:
        """Advance elapsed time by one second; a no-op unless playing."""
        if not session.is_ticking:
            return session
        return replace(session, elapsed=session.elapsed + 1)


class GamePlay:
    """Holds the current session for an interactive frontend."""

    def __init__(self, engine: PuzzleEngine | None = None) -> None:
        self.engine = engine if engine is not None else PuzzleEngine()
        self.session = self.engine.initialize()

    # -- lifecycle ------------------------------------------------------------

    def start(self) -> None:
        """Shuffle and start (or restart) a game."""
        self.session = self.engine.shuffle(self.session)

    def reset(self) -> None:
        self.session = self.engine.initialize()

    def tick(self) -> None:
        self.session = self.engine.tick(self.session)

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> MoveResult:
        """Slide the tile next to the gap in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the gap upward.
        """
        target = self.session.board.target_for(direction)
        if target is None:
            return MoveResult(self.session, accepted=False, completed=False)
        return self.move_tile(target)

    def move_tile(self, index: int) -> MoveResult:
        result = self.engine.apply_move(self.session, index)
        self.session = result.session
        return result

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.session.complete

    @property
    def is_playing(self) -> bool:
        return self.session.is_ticking
