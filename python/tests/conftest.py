"""Shared fixtures for the engine and frontend tests."""

from __future__ import annotations

import random

import pytest

from fifteen.backend.engine.gamegenerator import GameGenerator
from fifteen.backend.engine.gameplay import PuzzleEngine
from fifteen.backend.engine.gamestate import GameSession


@pytest.fixture
def engine() -> PuzzleEngine:
    return PuzzleEngine(rng=random.Random(1234))


@pytest.fixture
def solved_playing() -> GameSession:
    """Solved board with the game flagged as in progress."""
    return GameSession(board=GameGenerator.solved(), playing=True)
