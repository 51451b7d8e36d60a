"""The game board: screen file loading, the original and current grids."""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path

from kongclimb.console import clrscr, gotoxy

GAME_WIDTH = 80
GAME_HEIGHT = 25
OFF_BOARD = "\0"
SCREEN_PREFIX = "dkong_"
SCREEN_SUFFIX = ".screen"


class FloorKey(str, Enum):
    LEFT = "<"
    RIGHT = ">"
    SAME = "="
    EMPTY = " "


class ObjectKey(str, Enum):
    BARREL = "O"
    MARIO = "@"
    PAULINE = "$"
    DONKEY_KONG = "&"
    BORDER = "Q"
    LADDER = "H"
    BIG_HAMMER = "P"
    HAMMER = "p"
    REGULAR_GHOST = "x"
    CLIMB_GHOST = "X"
    MENU = "L"


_FLOOR_CHARS = frozenset({FloorKey.LEFT.value, FloorKey.RIGHT.value, FloorKey.SAME.value})
_REQUIRED = frozenset(
    {
        ObjectKey.MARIO.value,
        ObjectKey.MENU.value,
        ObjectKey.DONKEY_KONG.value,
        ObjectKey.PAULINE.value,
    }
)
_SINGLE_KEPT = frozenset(
    {ObjectKey.DONKEY_KONG.value, ObjectKey.PAULINE.value, ObjectKey.HAMMER.value}
)


def is_floor(ch: str) -> bool:
    """Return True for the floor characters '<', '>' and '='."""
    return ch in _FLOOR_CHARS


def _blank_grid() -> list[list[str]]:
    return [[" "] * GAME_WIDTH for _ in range(GAME_HEIGHT)]


def _inside(x: int, y: int) -> bool:
    return 0 <= x < GAME_WIDTH and 0 <= y < GAME_HEIGHT


class Board:
    """Holds the level as loaded (original) and as it is now (current)."""

    def __init__(self, directory=None) -> None:
        self.directory = Path(directory) if directory is not None else Path.cwd()
        self._original = _blank_grid()
        self._current = _blank_grid()
        self._regular_ghosts: list[tuple[int, int]] = []
        self._climb_ghosts: list[tuple[int, int]] = []
        self._mario = (0, 0)
        self._donkey = (0, 0)
        self._legend = (0, 0)
        self._hammer: tuple[int, int] | None = None
        self._silent = False
        self._files: list[str] = []
        self.find_screen_files()

    def find_screen_files(self) -> list[str]:
        """Collect the sorted names of the level files in the board's directory."""
        self._files = sorted(
            entry.name
            for entry in self.directory.iterdir()
            if entry.name.startswith(SCREEN_PREFIX) and entry.suffix == SCREEN_SUFFIX
        )
        return list(self._files)

    def load(self, filename: str) -> bool:
        """Load a level file; return True when it holds a playable level."""
        try:
            text = (self.directory / filename).read_text(encoding="latin-1")
        except OSError:
            return False
        self._regular_ghosts = []
        self._climb_ghosts = []
        self._hammer = None
        seen: set[str] = set()
        grid = _blank_grid()
        for row, line in enumerate(text.split("\n")[:GAME_HEIGHT]):
            for col, ch in enumerate(line[:GAME_WIDTH]):
                grid[row][col] = self._place(ch, col, row, seen)
        self._original = grid
        return _REQUIRED <= seen and self._ghosts_on_floor()

    def _place(self, ch: str, col: int, row: int, seen: set[str]) -> str:
        if ch == ObjectKey.MARIO:
            if ch not in seen:
                self._mario = (col, row)
                seen.add(ch)
            return " "
        if ch == ObjectKey.MENU:
            if ch not in seen:
                self._legend = (col, row)
                seen.add(ch)
            return " "
        if ch == ObjectKey.REGULAR_GHOST:
            self._regular_ghosts.append((col, row))
            return " "
        if ch == ObjectKey.CLIMB_GHOST:
            self._climb_ghosts.append((col, row))
            return " "
        if ch in _SINGLE_KEPT:
            if ch in seen:
                return " "
            seen.add(ch)
            if ch == ObjectKey.DONKEY_KONG:
                self._donkey = (col, row)
            elif ch == ObjectKey.HAMMER:
                self._hammer = (col, row)
        return ch

    def _ghosts_on_floor(self) -> bool:
        return all(
            y + 1 < GAME_HEIGHT and is_floor(self._original[y + 1][x])
            for x, y in self._regular_ghosts + self._climb_ghosts
        )

    def reset(self, life: int, score: int) -> None:
        """Restore the current grid from the original and redraw unless silent."""
        clrscr()
        self._current = [row[:] for row in self._original]
        if not self._silent:
            self.render(life, score)

    def render(self, life: int, score: int) -> None:
        """Draw the current grid with the life and score legend."""
        out = sys.stdout
        gotoxy(0, 0)
        out.write("\n".join("".join(row) for row in self._current))
        lx, ly = self._legend
        gotoxy(lx, ly)
        out.write("Mario's Life : " + "*" * life)
        gotoxy(lx, ly + 1)
        out.write(f"Mario's Score: : {score}")
        out.flush()

    def get_current(self, x: int, y: int) -> str:
        return self._current[y][x] if _inside(x, y) else OFF_BOARD

    def get_original(self, x: int, y: int) -> str:
        return self._original[y][x] if _inside(x, y) else OFF_BOARD

    def set_current(self, x: int, y: int, sign: str) -> None:
        """Write a cell of the current grid; writes off the board are ignored."""
        if _inside(x, y):
            self._current[y][x] = sign

    def set_original(self, x: int, y: int, sign: str) -> None:
        """Write a cell of the original grid; writes off the board are ignored."""
        if _inside(x, y):
            self._original[y][x] = sign

    def file_name(self, index: int) -> str:
        return self._files[index]

    @property
    def file_count(self) -> int:
        return len(self._files)

    @property
    def mario_start(self) -> tuple[int, int]:
        return self._mario

    @property
    def donkey_start(self) -> tuple[int, int]:
        return self._donkey

    @property
    def legend_position(self) -> tuple[int, int]:
        return self._legend

    @property
    def hammer_start(self) -> tuple[int, int] | None:
        return self._hammer

    @property
    def regular_ghost_starts(self) -> list[tuple[int, int]]:
        return list(self._regular_ghosts)

    @property
    def climb_ghost_starts(self) -> list[tuple[int, int]]:
        return list(self._climb_ghosts)

    def set_silent(self) -> None:
        self._silent = True

    @property
    def silent(self) -> bool:
        return self._silent