"""Shared game state and the per-iteration rules common to every game mode."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from enum import Enum

from kongclimb.board import Board, ObjectKey
from kongclimb.console import clrscr, getch, gotoxy
from kongclimb.crowds import Barrels, Ghosts
from kongclimb.enemies import BarrelMove
from kongclimb.mario import START_LIFE, Mario

BARREL_INTERVAL = 20
DEATH_PENALTY = 50
STAGE_BONUS = 100
MESSAGE_X = 40
MESSAGE_Y = 12
_HAMMER_KEYS = (ObjectKey.HAMMER.value, ObjectKey.BIG_HAMMER.value)

__all__ = [
    "BARREL_INTERVAL",
    "DEATH_PENALTY",
    "STAGE_BONUS",
    "START_LIFE",
    "BaseGame",
    "MenuKey",
]


class MenuKey(str, Enum):
    PLAY = "1"
    CHOOSE_FILE = "2"
    INSTRUCTION = "8"
    BACK_FROM_INSTRUCTIONS = "3"
    EXIT = "9"


def _as_char(key) -> str:
    """Turn a key given as a character, a character code or nothing into a string."""
    if key is None:
        return ""
    if isinstance(key, int):
        return chr(key) if 0 < key < 0x110000 else ""
    return str(key)[:1]


def _in_reach(point, mario: Mario) -> bool:
    """True when ``point`` is on Mario's cell or the cell he is heading to."""
    mx, my = mario.point.x, mario.point.y
    return point.y == my and (point.x - mario.diff_x == mx or point.x == mx)


class BaseGame(ABC):
    """State and rules shared by the interactive game and the replay."""

    delay_scale = 1.0

    def __init__(self, board: Board | None = None) -> None:
        self.board = board if board is not None else Board()
        self.curr_file = 0
        self.steps_in_game = 0
        self.iteration = 0
        self.score = 0
        self.mario_dead = False

    def _pause(self, milliseconds: int) -> None:
        if self.delay_scale > 0:
            time.sleep(milliseconds / 1000 * self.delay_scale)

    def _announce(self, text: str, x: int = MESSAGE_X, y: int = MESSAGE_Y) -> None:
        gotoxy(x, y)
        print(text, flush=True)

    def _wait_for(self, accepted: str) -> str:
        """Block until one of the ``accepted`` characters is typed and return it."""
        while True:
            ch = chr(getch())
            if ch in accepted:
                return ch

    def reset_game(self, barrels: Barrels, ghosts: Ghosts, mario_life: int) -> None:
        """Put the hammer, ghosts and board back and drop every barrel."""
        hammer = self.board.hammer_start
        if hammer is not None:
            self.board.set_original(*hammer, ObjectKey.HAMMER.value)
        ghosts.reset()
        barrels.reset()
        self.board.reset(mario_life, self.score)
        self.mario_dead = False
        self.steps_in_game = 0

    def load_board(self) -> bool:
        """Load the current level, skipping invalid ones; False when none is left."""
        board = self.board
        while not board.load(board.file_name(self.curr_file)):
            loud = not board.silent
            if loud:
                clrscr()
                self._announce("ERROR - INVALID MAP")
            if self.curr_file == board.file_count - 1:
                if loud:
                    self._announce("NO MORE FILES", y=MESSAGE_Y + 1)
                    self._pause(3000)
                    clrscr()
                return False
            if loud:
                self._announce("PRESS N OR n TO NEXT MAP", y=MESSAGE_Y + 1)
                self._wait_for("nN")
                clrscr()
                gotoxy(0, 0)
            self.curr_file += 1
        return True

    def tick(self, mario: Mario, barrels: Barrels, ghosts: Ghosts, key1, key2) -> None:
        """Play one iteration: throw barrels, move Mario, the barrels and the ghosts."""
        if self.steps_in_game % BARREL_INTERVAL == 0:
            barrels.spawn()
        self.steps_in_game += 1

        if mario.meet_barrel() or mario.meet_ghost():
            return
        mario.move(key1)
        if _as_char(key2) in _HAMMER_KEYS:
            mario.set_try_to_kill()
        if mario.meet_barrel() or mario.meet_ghost():
            return
        self._move_barrels(mario, barrels)
        ghosts.move()

    def _move_barrels(self, mario: Mario, barrels: Barrels) -> None:
        index = 0
        while index < len(barrels):
            barrel = barrels[index]
            if _in_reach(barrel.point, mario) and mario.wants_kill:
                barrels.remove(index)
            else:
                outcome = barrel.move()
                if outcome is BarrelMove.MOVED:
                    index += 1
                else:
                    if outcome is BarrelMove.KILLED_MARIO:
                        self.mario_dead = True
                    barrels.remove(index)
            if self.mario_dead:
                mario.die()
                break

    @abstractmethod
    def run(self):
        """Play the game loop."""

    def start(self):
        """Start this game mode."""
        return self.run()