"""Logo intro shown once when a frontend starts.

Purely cosmetic: the phases only drive how the logo grid is drawn.
"""

from __future__ import annotations

from enum import StrEnum


class LogoPhase(StrEnum):
    INITIAL = "initial"
    EXPAND = "expand"
    TRANSFORM = "transform"
    DONE = "done"


# (seconds since start, phase entered at that moment)
SCHEDULE: tuple[tuple[float, LogoPhase], ...] = (
    (1.0, LogoPhase.EXPAND),
    (2.0, LogoPhase.TRANSFORM),
    (3.0, LogoPhase.DONE),
)


def phase_at(elapsed: float) -> LogoPhase:
    phase = LogoPhase.INITIAL
    for at, nxt in SCHEDULE:
        if elapsed >= at:
            phase = nxt
    return phase
