"""Elapsed-time formatting and the one-second ticker."""

from __future__ import annotations

import pytest

from fifteen.backend.engine.gameplay import GamePlay, PuzzleEngine
from fifteen.frontend.clock import Ticker, format_time


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# -- format_time ----------------------------------------------------------------


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "00:00"),
        (9, "00:09"),
        (59, "00:59"),
        (60, "01:00"),
        (754, "12:34"),
        (3600, "60:00"),
        (6005, "100:05"),
    ],
)
def test_format_time(seconds: int, expected: str) -> None:
    assert format_time(seconds) == expected


# -- Ticker ---------------------------------------------------------------------


def test_ticker_fires_once_per_second() -> None:
    clock = FakeClock()
    ticks: list[float] = []
    ticker = Ticker(lambda: ticks.append(clock.now), clock=clock)

    assert ticker.sync(True) == 0
    assert ticker.running

    clock.advance(0.5)
    assert ticker.sync(True) == 0
    clock.advance(0.5)
    assert ticker.sync(True) == 1
    clock.advance(2.25)
    assert ticker.sync(True) == 2
    assert len(ticks) == 3


def test_ticker_stops_when_play_ends() -> None:
    clock = FakeClock()
    ticks: list[float] = []
    ticker = Ticker(lambda: ticks.append(clock.now), clock=clock)
    ticker.sync(True)

    clock.advance(5)
    assert ticker.sync(False) == 0
    assert not ticker.running
    assert ticks == []

    # Resuming re-bases the schedule instead of firing the missed ticks.
    assert ticker.sync(True) == 0
    clock.advance(1)
    assert ticker.sync(True) == 1


def test_ticker_restart_rebases() -> None:
    clock = FakeClock()
    ticks: list[float] = []
    ticker = Ticker(lambda: ticks.append(clock.now), clock=clock)
    ticker.sync(True)

    clock.advance(0.9)
    ticker.restart()
    clock.advance(0.5)
    assert ticker.sync(True) == 0
    clock.advance(0.75)
    assert ticker.sync(True) == 1


def test_ticker_drives_game_clock() -> None:
    clock = FakeClock()
    game = GamePlay(PuzzleEngine())
    ticker = Ticker(game.tick, clock=clock)

    ticker.sync(game.is_playing)
    clock.advance(3)
    ticker.sync(game.is_playing)
    assert game.session.elapsed == 0

    game.start()
    ticker.restart()
    clock.advance(3)
    ticker.sync(game.is_playing)
    assert game.session.elapsed == 3

    game.reset()
    clock.advance(3)
    ticker.sync(game.is_playing)
    assert game.session.elapsed == 0
    assert not ticker.running


@pytest.mark.parametrize("interval", [0, 0.0, -1.0])
def test_ticker_rejects_non_positive_interval(interval: float) -> None:
    with pytest.raises(ValueError, match="interval must be positive"):
        Ticker(lambda: None, interval=interval)
