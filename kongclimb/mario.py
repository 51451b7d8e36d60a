"""Mario: the player character, his movement rules, jumps, falls and hammer."""

from __future__ import annotations

import sys
from enum import Enum

from kongclimb.board import Board
from kongclimb.console import gotoxy
from kongclimb.point import Point

MARIO_SIGN = "@"
MARIO_MAX_FALLING = 5
START_LIFE = 3


class MarioKey(str, Enum):
    LEFT = "A"
    left = "a"
    RIGHT = "D"
    right = "d"
    UP = "W"
    up = "w"
    DOWN = "X"
    down = "x"
    KILL = "P"
    kill = "p"
    STAY = "S"
    stay = "s"
    ESC = "\x1b"


def _key_char(key) -> str:
    """Turn a key given as MarioKey, character or character code into one character."""
    if isinstance(key, MarioKey):
        return key.value
    if isinstance(key, int):
        return chr(key) if 0 < key < 0x110000 else ""
    if key is None:
        return ""
    return str(key)[:1]


class Mario:
    """The player: moves by key, climbs ladders, jumps, falls and can swing a hammer."""

    def __init__(self, board: Board) -> None:
        self.board = board
        x, y = board.mario_start
        self.point = Point(MARIO_SIGN, x, y, board)
        self._life = START_LIFE
        self._clear_motion()
        self.point.draw(MARIO_SIGN)

    def _clear_motion(self) -> None:
        self._dx = 0
        self._dy = 0
        self._jumping = False
        self._falling_from_jump = False
        self._jump_count = 0
        self._falling = False
        self._climbing = False
        self._fall_count = 0
        self._has_hammer = False
        self._try_kill = False

    @property
    def life(self) -> int:
        return self._life

    @property
    def wants_kill(self) -> bool:
        """True when Mario swung the hammer during this move."""
        return self._try_kill

    @property
    def diff_x(self) -> int:
        """Mario's horizontal direction: -1, 0 or 1."""
        return self._dx

    @property
    def has_hammer(self) -> bool:
        return self._has_hammer

    def set_try_to_kill(self) -> None:
        """Swing the hammer while walking, if Mario holds it."""
        if self._has_hammer and self._dx != 0:
            self._try_kill = True

    def reset(self) -> None:
        """Put Mario back at his start with no motion and no hammer; life is kept."""
        self._clear_motion()
        self.point.set_position(*self.board.mario_start)
        self.point.draw(MARIO_SIGN)

    def die(self) -> None:
        """Take one life and put Mario back at his start."""
        self._life -= 1
        self.reset()

    def meet_barrel(self) -> bool:
        """Return True (and lose a life) when Mario stands on a barrel without swinging."""
        if self.point.is_barrel() and not self._try_kill:
            self.die()
            return True
        return False

    def meet_ghost(self) -> bool:
        """Return True (and lose a life) when Mario stands on a ghost without swinging."""
        if self.point.is_ghost() and not self._try_kill:
            self.die()
            return True
        return False

    def meets_pauline(self) -> bool:
        return self.point.is_pauline(0, 0)

    def _apply_key(self, key) -> None:
        p = self.point
        ch = _key_char(key).lower()
        if ch == MarioKey.left:
            if not p.is_floor(-1, 0) and not self._jumping:
                self._dx = -1
        elif ch == MarioKey.right:
            if not p.is_floor(1, 0) and not self._jumping:
                self._dx = 1
        elif ch == MarioKey.up:
            self._dy = -1
        elif ch == MarioKey.down:
            if p.is_ladder(0, 2) or p.is_ladder(0, 1):
                self._dx = 0
                self._dy = 1
        elif ch == MarioKey.stay:
            if not p.is_floor(0, 0):
                self._dx = 0
                self._dy = 0
        elif ch == MarioKey.kill:
            if self._has_hammer:
                self._try_kill = True

    def _pick_hammer(self) -> None:
        if not self.point.is_hammer():
            return
        if not self.board.silent:
            lx, ly = self.board.legend_position
            gotoxy(lx, ly + 2)
            sys.stdout.write("Mario Has Hammmer!!!")
            sys.stdout.flush()
        self._has_hammer = True

    def _go_up(self) -> None:
        p = self.point
        if (self._jumping or not p.is_ladder(0, 0)) and not self._climbing:
            blocked = p.is_floor(self._dx, self._dy)
            if self._jump_count == 0 and blocked:
                self._dy = 0
            elif self._jump_count == 1 and blocked:
                self._jumping = True
                self._falling_from_jump = True
                self._dy = 0
            else:
                self._jumping = True
                self._jump_count += 1
                if self._jump_count == 2:
                    self._falling_from_jump = True
        elif (p.is_ladder(0, 0) or p.is_floor(0, 0)) and not self._jumping:
            self._climbing = True
            self._dx = 0
        elif p.is_floor(0, 1) and p.is_ladder(0, 2) and self._climbing:
            self._climbing = False
            self._dx = 0
            self._dy = 0

    def move(self, key) -> None:
        """Advance Mario one step given the key pressed (or 0/None for no key)."""
        p = self.point
        self._try_kill = False
        self._apply_key(key)
        self._pick_hammer()

        if p.check_border(self._dx, self._dy):
            self._dx = 0
            self._dy = 0
            if self._jump_count == 1:
                self._falling_from_jump = True

        if self._falling_from_jump and self._jump_count == 0:
            if p.is_empty(0, 1):
                self._fall_count = 2
            self._falling_from_jump = False
            self._jumping = False
            self._dy = 0
        if self._falling_from_jump:
            self._dy = 1
            self._jump_count -= 1

        if self._dy == -1 and not self._falling:
            self._go_up()

        if self._dy == 1 and p.is_ladder(0, 0) and p.is_floor(0, 1):
            self._climbing = False
            self._dx = 0
            self._dy = 0

        if self._falling and p.is_floor(0, 1) and self._fall_count < MARIO_MAX_FALLING:
            self._dx = 0
            self._dy = 0
            self._fall_count = 0
            self._falling = False
        if p.is_empty(0, 1) and not self._jumping:
            self._dx = 0
            self._dy = 1
            self._fall_count += 1
            self._falling = True
            self._climbing = False

        if self._fall_count >= MARIO_MAX_FALLING and p.is_floor(0, 1):
            self.die()
        if p.below_map():
            self.die()

        p.move(self._dx, self._dy, p.original_at(0, 0))