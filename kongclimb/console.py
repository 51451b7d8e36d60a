"""Terminal control: cursor placement, screen clearing and key polling."""

from __future__ import annotations

import os
import sys

_WINDOWS = os.name == "nt"

if _WINDOWS:
    import msvcrt
else:
    import select
    import termios
    import tty

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"


def _is_tty(stream) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def gotoxy(x: int, y: int) -> None:
    """Move the cursor to column ``x`` and row ``y`` (both zero based)."""
    sys.stdout.write(f"\x1b[{y + 1};{x + 1}H")
    sys.stdout.flush()


def clrscr() -> None:
    """Clear the screen and put the cursor in the top-left corner."""
    sys.stdout.write("\x1b[2J\x1b[H")
    sys.stdout.flush()


def kbhit() -> bool:
    """Return True when a key can be read without blocking."""
    stream = sys.stdin
    if _WINDOWS and _is_tty(stream):
        return bool(msvcrt.kbhit())
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        # An in-memory stream never blocks: it has data or is at its end.
        return True
    if _WINDOWS:
        return True
    ready, _, _ = select.select([fd], [], [], 0)
    return bool(ready)


def getch() -> int:
    """Read one key and return its character code; raise EOFError at end of input."""
    stream = sys.stdin
    if _is_tty(stream):
        if _WINDOWS:
            return ord(msvcrt.getch())
        data = os.read(stream.fileno(), 1)
    else:
        data = stream.read(1)
    if not data:
        raise EOFError("no more input")
    return ord(data[:1])


class RawTerminal:
    """Context manager that puts an interactive terminal in unbuffered key mode."""

    def __init__(self) -> None:
        self.active = False
        self._fd: int | None = None
        self._saved = None

    def __enter__(self) -> "RawTerminal":
        stream = sys.stdin
        if not _WINDOWS and _is_tty(stream):
            self._fd = stream.fileno()
            self._saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
            self.active = True
            sys.stdout.write(_HIDE_CURSOR)
            sys.stdout.flush()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.active:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
            sys.stdout.write(_SHOW_CURSOR)
            sys.stdout.flush()
            self.active = False
        return None