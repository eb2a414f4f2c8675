"""Single-keypress reader for the terminal frontend.

Handles arrow keys, WASD, and the game's command keys without requiring
Enter.  Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable


# -- low-level character readers -----------------------------------------------


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return decode_key(msvcrt.getch())


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "n": "shuffle",
    " ": "shuffle",
    "\r": "shuffle",
    "\n": "shuffle",
    "r": "reset",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

# Windows sends arrows as a prefix byte followed by a scan code.
_WIN_PREFIXES = ("\x00", "\xe0")

_WIN_SCAN_MAP: dict[str, str] = {
    "H": "up",
    "P": "down",
    "K": "left",
    "M": "right",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string (``""`` if unmapped)."""
    return _KEY_MAP.get(ch.lower() if ch.isalpha() else ch, "")


def resolve_escape(seq: str) -> str:
    """Map the bytes following ESC to an action (bare ESC quits)."""
    if not seq:
        return "quit"
    if seq[0] == "[":
        return _ARROW_MAP.get(seq[1:2], "")
    return "quit"


def decode_key(raw: bytes) -> str:
    """Decode a console byte; latin-1 keeps every byte, including 0xE0."""
    return raw.decode("latin-1")


def resolve_windows(ch: str, read_next: Callable[[], str]) -> str:
    """Map a Windows console key, reading the scan code after a prefix."""
    if ch in _WIN_PREFIXES:
        return _WIN_SCAN_MAP.get(read_next(), "")
    if ch == "\x1b":
        return resolve_escape("")
    return resolve(ch)


# -- public API ----------------------------------------------------------------


def get_key_timeout(timeout: float) -> str | None:
    """Read a single keypress with a timeout.

    Returns the action string or ``None`` if no key was pressed within
    *timeout* seconds.

    Possible return values:
        "up", "down", "left", "right"  — slide a tile
        "shuffle"                      — n / Space / Enter (start or new game)
        "reset"                        — r
        "quit"                         — q / Ctrl-C / Escape
        ""                             — unrecognised key
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time as _time

        end = _time.monotonic() + timeout
        while _time.monotonic() < end:
            if msvcrt.kbhit():
                return resolve_windows(_getch_windows(), _getch_windows)
            _time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None

        # os.read is unbuffered, so select() still sees the rest of a
        # multi-byte escape sequence.
        ch = os.read(fd, 1).decode("utf-8", errors="ignore")
        if ch != "\x1b":
            return resolve(ch)

        seq = ""
        for _ in range(2):
            more, _, _ = select.select([fd], [], [], 0.1)
            if not more:
                break
            seq += os.read(fd, 1).decode("utf-8", errors="ignore")
        return resolve_escape(seq)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
