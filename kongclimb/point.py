"""A positioned sign on the board, with the tile queries the actors use."""

from __future__ import annotations

import sys

from kongclimb.board import GAME_HEIGHT, GAME_WIDTH, Board, FloorKey, ObjectKey, is_floor
from kongclimb.console import gotoxy


class Point:
    """A sign at (x, y) on a board."""

    __slots__ = ("sign", "x", "y", "board")

    def __init__(self, sign: str, x: int, y: int, board: Board) -> None:
        self.sign = sign
        self.x = x
        self.y = y
        self.board = board

    def __repr__(self) -> str:
        return f"Point({self.sign!r}, {self.x}, {self.y})"

    def draw(self, ch: str) -> None:
        """Show ``ch`` at this position unless the board is silent."""
        if not self.board.silent:
            gotoxy(self.x, self.y)
            sys.stdout.write(ch)
            sys.stdout.flush()

    def erase(self) -> None:
        self.draw(" ")

    def move(self, dx: int, dy: int, ch: str) -> None:
        """Restore ``ch`` on screen, step by (dx, dy) and draw the sign there."""
        if ch == ObjectKey.HAMMER and self.sign == ObjectKey.MARIO:
            self.board.set_original(self.x, self.y, FloorKey.EMPTY.value)
            self.draw(FloorKey.EMPTY.value)
        else:
            self.draw(ch)
        self.x += dx
        self.y += dy
        self.draw(self.sign)

    def move_on_current(self, dx: int, dy: int, ch: str) -> None:
        """After a step of (dx, dy), put ``ch`` at the old cell and the sign at the new one."""
        self.board.set_current(self.x - dx, self.y - dy, ch)
        self.board.set_current(self.x, self.y, self.sign)

    def original_at(self, dx: int, dy: int) -> str:
        return self.board.get_original(self.x + dx, self.y + dy)

    def current_at(self, dx: int, dy: int) -> str:
        return self.board.get_current(self.x + dx, self.y + dy)

    def is_floor(self, dx: int, dy: int) -> bool:
        return is_floor(self.original_at(dx, dy))

    def check_border(self, dx: int, dy: int) -> bool:
        """Return True when the step (dx, dy) hits a border tile or leaves the board."""
        if self.original_at(dx, dy) == ObjectKey.BORDER:
            return True
        nx, ny = self.x + dx, self.y + dy
        return not (0 <= nx <= GAME_WIDTH - 1 and ny >= 0)

    def is_ladder(self, dx: int, dy: int) -> bool:
        return self.original_at(dx, dy) == ObjectKey.LADDER

    def is_empty(self, dx: int, dy: int) -> bool:
        return self.original_at(dx, dy) == FloorKey.EMPTY

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def mark_on_current(self, sign: str) -> None:
        self.board.set_current(self.x, self.y, sign)

    def is_barrel(self) -> bool:
        return self.board.get_current(self.x, self.y) == ObjectKey.BARREL

    def within_radius2(self, other: "Point") -> bool:
        """Return True when ``other`` lies within two cells, diagonals included."""
        return abs(other.x - self.x) <= 2 and abs(other.y - self.y) <= 2

    def is_pauline(self, dx: int, dy: int) -> bool:
        return self.original_at(dx, dy) == ObjectKey.PAULINE

    def is_hammer(self) -> bool:
        return self.board.get_original(self.x, self.y) == ObjectKey.HAMMER

    def is_ghost(self) -> bool:
        return self.board.get_current(self.x, self.y) in (
            ObjectKey.REGULAR_GHOST.value,
            ObjectKey.CLIMB_GHOST.value,
        )

    def below_map(self) -> bool:
        """Return True on the last row or when a border tile lies just below."""
        return self.y >= GAME_HEIGHT - 1 or self.original_at(0, 1) == ObjectKey.BORDER