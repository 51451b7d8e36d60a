"""Enemies: rolling barrels, wandering ghosts and ladder-climbing ghosts."""

from __future__ import annotations

import random
from enum import Enum

from kongclimb.board import Board, FloorKey, ObjectKey
from kongclimb.point import Point

BARREL_SIGN = ObjectKey.BARREL.value
BARREL_MAX_FALLING = 8
_GHOST_SIGNS = (ObjectKey.REGULAR_GHOST.value, ObjectKey.CLIMB_GHOST.value)


class Enemy:
    """Something on the board that moves by itself."""

    def __init__(self, board: Board, sign: str, x: int, y: int) -> None:
        self.board = board
        self.point = Point(sign, x, y, board)


class BarrelMove(Enum):
    MOVED = "moved"
    GONE = "gone"
    KILLED_MARIO = "killed_mario"


class Barrel(Enemy):
    """A barrel thrown from Donkey Kong's position that rolls along the floors."""

    def __init__(self, board: Board, mario_point: Point) -> None:
        x, y = board.donkey_start
        super().__init__(board, BARREL_SIGN, x, y)
        self.mario_point = mario_point
        self.dx = 0
        self.dy = 0
        self.fall_count = 0
        self._last_dx = 1
        self.point.draw(BARREL_SIGN)
        self.point.mark_on_current(BARREL_SIGN)

    def move(self) -> BarrelMove:
        """Take one step; say whether the barrel moved, vanished or blew up near Mario."""
        p = self.point
        below = p.original_at(0, 1)
        if below == FloorKey.LEFT:
            self.dx, self.dy = -1, 0
            self._last_dx = self.dx
        elif below == FloorKey.RIGHT:
            self.dx, self.dy = 1, 0
            self._last_dx = self.dx
        elif below == FloorKey.SAME:
            self.dx, self.dy = self._last_dx, 0
        elif below == FloorKey.EMPTY:
            self.dx, self.dy = 0, 1
            self.fall_count += 1

        if p.is_floor(0, 1) and self.fall_count < BARREL_MAX_FALLING:
            self.fall_count = 0

        if p.check_border(self.dx, self.dy):
            return BarrelMove.GONE

        if self.fall_count >= BARREL_MAX_FALLING and p.is_floor(0, 1):
            if p.within_radius2(self.mario_point):
                return BarrelMove.KILLED_MARIO
            return BarrelMove.GONE

        if p.below_map():
            return BarrelMove.GONE

        p.move(self.dx, self.dy, p.original_at(0, 0))
        p.move_on_current(self.dx, self.dy, p.original_at(0, 0))
        return BarrelMove.MOVED


class Ghost(Enemy):
    """A ghost that walks along its floor and sometimes turns around."""

    def __init__(self, board: Board, x: int, y: int, sign: str, rng=None) -> None:
        super().__init__(board, sign, x, y)
        self.dx = 1
        self.dy = 0
        self._rng = rng if rng is not None else random

    def _blocked(self, dx: int) -> bool:
        p = self.point
        return (
            p.original_at(dx, 1) == FloorKey.EMPTY
            or p.check_border(dx, self.dy)
            or p.current_at(dx, self.dy) in _GHOST_SIGNS
        )

    def climb(self) -> None:
        """Regular ghosts do not climb."""

    def calculate_next_move(self) -> None:
        """Choose the direction of the next step."""
        if self.dx == 0:
            self.dx = 1
        if self._rng.randrange(100) > 95:
            self.dx = -self.dx
        self.climb()
        if self._blocked(self.dx):
            self.dx = 0 if self._blocked(-self.dx) else -self.dx

    def move(self) -> None:
        p = self.point
        p.move(self.dx, self.dy, p.original_at(0, 0))
        p.move_on_current(self.dx, self.dy, p.original_at(0, 0))


class ClimbGhost(Ghost):
    """A ghost that climbs any ladder it walks onto."""

    def __init__(self, board: Board, x: int, y: int, sign: str, rng=None) -> None:
        super().__init__(board, x, y, sign, rng)
        self.climbing = False

    def climb(self) -> None:
        p = self.point
        if p.is_ladder(0, 0):
            self.dx, self.dy = 0, -1
            self.climbing = True
        elif self.climbing:
            if p.is_floor(0, 1) or p.is_empty(0, 0):
                self.dx, self.dy = 1, 0
                self.climbing = False
            else:
                self.dx, self.dy = 0, -1