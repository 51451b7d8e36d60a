"""The interactive game: menu, keyboard play and optional recording of games."""

from __future__ import annotations

import random
import sys
import time

from kongclimb.board import Board
from kongclimb.console import clrscr, getch, gotoxy, kbhit
from kongclimb.crowds import Barrels, Ghosts
from kongclimb.game_base import DEATH_PENALTY, STAGE_BONUS, BaseGame, MenuKey
from kongclimb.mario import START_LIFE, Mario, MarioKey
from kongclimb.records import Results, ResultValue, Steps

STEPS_EXTENSION = ".steps"
RESULT_EXTENSION = ".result"

_MENU = (
    "(1) Start a full game\n"
    "(2) Choose map\n"
    "(8) Present instructions and keys\n"
    "(9) EXIT\n"
)

_INSTRUCTIONS = """Donkey Kong - Game Instructions

Welcome to Donkey Kong!

In this game, you play as Mario (represented by '@'), and your goal is to rescue Pauline (represented by '$'). To succeed, you must reach Pauline's location while avoiding barrels thrown by Donkey Kong (represented by '&').

Main Menu:
1. Start New Game:
   Start the game at the first stage.
   You can choose Mario's movement direction during the game using the defined movement keys.

2. Select Map:
   Allows you to choose a specific stage from the available custom maps. Maps are loaded from .screen files.

8. Show Instructions and Keys:
   Displays the current game instructions.

9. Exit:
   Exit the game.

Movement Keys:
Left: 'a' or 'A' - Move Mario left.
Right: 'd' or 'D' - Move Mario right.
Up / Jump: 'w' or 'W' - Mario will jump upwards. If he is in motion, he will continue jumping in the direction he was moving.
   If Mario is on a ladder (represented by 'H'), pressing this key will make Mario climb the ladder.

Down: 'x' or 'X' - Move Mario down.
Stay: 's' or 'S' - Mario will stop moving.

Game Rules:
Donkey Kong & Barrels:
   Donkey Kong (represented by '&') stands at the top of the screen and throws barrels ('O') downward. The barrels will fall and hit various floors on the screen.
   When a barrel hits a floor (represented by '=', '<', '>'), it will move on the floor in the direction indicated by the floor's symbol (right, left, or straight).
   If a barrel doesn't hit a floor for 8 consecutive lines, it will explode and disappear. If Mario is within a radius of 2 units from the explosion (including diagonals), Mario will lose a life and the game will restart.

Floors and Ladders:
   Floors (represented by '=', '<', '>') allow barrels to move on them.
   If Mario is on a ladder (represented by 'H'), he can climb it by pressing the Up key ('w' or 'W').

Ghosts:
   Ghosts (represented by 'x') wander on the floors with random movement directions. They cannot climb ladders or fall off the floors.
   If Mario meets a ghost, he loses a life and the stage restarts.

The Hammer:
   The hammer (represented by 'p') is a power-up that Mario can collect. If Mario collects the hammer, he can use it to destroy barrels or kill ghosts by pressing 'p' or 'P'.
   The hammer only works in Mario's movement direction and must be activated before reaching the barrel or ghost.

Loading Custom Screens:
   The game supports custom stages loaded from .screen files. Files are named dkong_*.screen and loaded in lexicographical order.
   You can also choose to play a specific screen using option 2 from the menu.

Score:
   Mario earns 100 points for completing a stage successfully.
   If Mario loses a life, 50 points are deducted from his total score.
   Manage your score wisely to achieve the highest possible result!

Mario's Lives:
   Mario starts with three lives. If all lives are lost, the game will return to the main menu.

Game Boundaries:
   The game is played within a fixed screen size of 80x25 characters.
   Neither Mario nor barrels can move outside these boundaries.

   If a barrel reaches the boundary, it is destroyed and disappears from the game.

Winning the Game:
   If Mario reaches Pauline's location, he wins the stage. If there are more stages, Mario will continue with his remaining lives.

Good luck with the game!
Use the provided keys to avoid barrels, outsmart ghosts, and help Mario rescue Pauline!

Press 3 to return to the main menu.
"""


def menu_text() -> str:
    """Return the main menu."""
    return _MENU


def instructions_text() -> str:
    """Return the game instructions shown from the menu."""
    return _INSTRUCTIONS


def recording_name(filename: str, extension: str) -> str:
    """Replace the part of ``filename`` after its last dot with ``extension``."""
    dot = filename.rfind(".")
    stem = filename[:dot] if dot >= 0 else filename
    return stem + extension


def _new_seed() -> int:
    return time.time_ns()


class DonkeyGame(BaseGame):
    """Keyboard-driven play with a menu; with ``save`` it records steps and results."""

    def __init__(self, save: bool = False, board: Board | None = None) -> None:
        super().__init__(board)
        self.save = save

    # ----- menu -------------------------------------------------------------

    def _print_menu(self) -> None:
        sys.stdout.write(menu_text())
        sys.stdout.flush()

    def start(self) -> None:
        """Show the menu and act on the keys typed until EXIT is chosen."""
        self._print_menu()
        while True:
            if not kbhit():
                self._pause(10)
                continue
            key = chr(getch())
            if key == MenuKey.PLAY:
                self.curr_file = 0
                clrscr()
                self.run()
                clrscr()
                self._print_menu()
            elif key == MenuKey.CHOOSE_FILE:
                self._choose_and_play()
            elif key == MenuKey.INSTRUCTION:
                clrscr()
                print("instruction")
                sys.stdout.write(instructions_text())
                sys.stdout.flush()
                self._wait_for(MenuKey.BACK_FROM_INSTRUCTIONS.value)
                clrscr()
                self._print_menu()
            elif key == MenuKey.EXIT:
                clrscr()
                break

    def _choose_and_play(self) -> None:
        clrscr()
        count = self.board.file_count
        print("CHOOSE SCREEN")
        for number in range(1, count + 1):
            print(f"{number}.{self.board.file_name(number - 1)}")
        sys.stdout.flush()
        while True:
            choice = self._read_number()
            if 0 < choice <= count:
                self.curr_file = choice - 1
                clrscr()
                self.run()
                clrscr()
                self._print_menu()
                return

    def _read_number(self) -> int:
        """Read a typed whole number ended by Enter, echoing the digits."""
        digits: list[str] = []
        while True:
            ch = chr(getch())
            if ch in "\r\n":
                if digits:
                    sys.stdout.write("\n")
                    sys.stdout.flush()
                    return int("".join(digits))
            elif ch.isdigit():
                digits.append(ch)
                sys.stdout.write(ch)
                sys.stdout.flush()

    def _freeze(self) -> None:
        """Hold the game until ESC is pressed again."""
        self._wait_for(MarioKey.ESC.value)

    # ----- input and recording ----------------------------------------------

    def read_keys(self, iteration: int, steps: Steps) -> tuple[str, str]:
        """Read up to two pressed keys and record them as the step of ``iteration``."""
        if not kbhit():
            return "", ""
        key1 = chr(getch())
        if key1 == MarioKey.ESC:
            self._freeze()
            return key1, ""
        self._pause(40)
        key2 = ""
        if kbhit():
            key2 = chr(getch())
            if key2 == MarioKey.ESC:
                self._freeze()
                steps.add(iteration, key1)
                return key1, key2
        steps.add(iteration, key1 + key2)
        return key1, key2

    def save_steps(self, steps: Steps, filename: str) -> None:
        """In save mode, write the steps next to the level file and forget them."""
        if self.save:
            steps.save(self.board.directory / recording_name(filename, STEPS_EXTENSION))
            steps.clear()

    def save_results(self, results: Results, filename: str) -> None:
        """In save mode, write the results and score next to the level file."""
        if self.save:
            results.save(
                self.board.directory / recording_name(filename, RESULT_EXTENSION), self.score
            )
            results.clear()
            self.iteration = 0

    # ----- game loop --------------------------------------------------------

    def _reseed(self, steps: Steps) -> None:
        seed = _new_seed()
        random.seed(seed)
        steps.random_seed = seed

    def run(self) -> None:
        """Play from the current level until Mario wins the last one or loses all lives."""
        board = self.board
        steps = Steps()
        results = Results()
        self._reseed(steps)
        self.score = 0
        file_count = board.file_count

        if file_count == 0:
            clrscr()
            self._announce("THERE IS NO FILES")
            self._pause(3000)
            clrscr()
            return
        if not self.load_board():
            return

        board.reset(START_LIFE, self.score)
        mario = Mario(board)
        ghosts = Ghosts(board, mario)
        barrels = Barrels(board, mario)
        self.steps_in_game = 0

        while True:
            self.iteration += 1
            previous_life = mario.life
            key1, key2 = self.read_keys(self.iteration, steps)
            self._pause(100)
            self.tick(mario, barrels, ghosts, key1, key2)

            if mario.life != previous_life:
                name = board.file_name(self.curr_file)
                self.score -= DEATH_PENALTY
                results.add(self.iteration, ResultValue.MARIO_DEAD)
                if mario.life == 0:
                    self.save_steps(steps, name)
                    self.save_results(results, name)
                    clrscr()
                    self._announce("YOU DEAD GAME OVER")
                    self._pause(3000)
                    clrscr()
                    gotoxy(0, 0)
                    self.curr_file = 0
                    break
                self.reset_game(barrels, ghosts, mario.life)

            if mario.meets_pauline():
                name = board.file_name(self.curr_file)
                self.save_steps(steps, name)
                self.score += STAGE_BONUS
                results.add(self.iteration, ResultValue.FINISHED)
                self.save_results(results, name)
                if self.curr_file == file_count - 1:
                    self.curr_file = 0
                    clrscr()
                    self._announce("YOU ARE THE WINNER")
                    self._announce(f"YOUR SCORE : {self.score}", x=41, y=13)
                    self._pause(3000)
                    break
                self._reseed(steps)
                clrscr()
                self._announce("YOU PASS TO NEXT MAP")
                self._pause(1000)
                clrscr()
                gotoxy(0, 0)
                self.curr_file += 1
                if not self.load_board():
                    return
                self.reset_game(barrels, ghosts, mario.life)
                mario.reset()