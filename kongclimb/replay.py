"""Replay of recorded games, checked against their recorded results."""

from __future__ import annotations

import random

from kongclimb.board import Board
from kongclimb.console import clrscr, gotoxy
from kongclimb.crowds import Barrels, Ghosts
from kongclimb.game_base import DEATH_PENALTY, STAGE_BONUS, BaseGame
from kongclimb.mario import START_LIFE, Mario
from kongclimb.records import Results, ResultValue, Steps

PASSED = "TEST PASSED"


def _with_extension(filename: str, extension: str) -> str:
    dot = filename.rfind(".")
    stem = filename[:dot] if dot >= 0 else filename
    return stem + extension


class ReplayGame(BaseGame):
    """Plays each level from its .steps file and compares with its .result file."""

    def __init__(self, silent: bool = False, board: Board | None = None) -> None:
        super().__init__(board)
        self.silent = silent

    def start(self) -> bool:
        return self.run()

    def keys_for(self, iteration: int, steps: Steps) -> tuple[str, str]:
        """Return the two keys recorded for ``iteration``, or empty strings."""
        if not steps.is_next_on(iteration):
            return "", ""
        step = steps.pop()
        key1 = step[0] if step else ""
        key2 = step[1] if len(step) > 1 else ""
        return key1, key2

    def steps_file_name(self) -> str:
        return _with_extension(self.board.file_name(self.curr_file), ".steps")

    def result_file_name(self) -> str:
        return _with_extension(self.board.file_name(self.curr_file), ".result")

    def _load_steps(self) -> Steps | None:
        try:
            return Steps.load(self.board.directory / self.steps_file_name())
        except (OSError, ValueError):
            clrscr()
            print(f"There is not steps file for: {self.board.file_name(self.curr_file)}")
            return None

    def results_match(self, results: Results) -> bool:
        """Compare the results so far with the level's result file and score."""
        name = self.board.file_name(self.curr_file)
        try:
            truth, truth_score = Results.load(self.board.directory / self.result_file_name())
        except OSError:
            clrscr()
            print(f"There is not result file for: {name}")
            return False
        except ValueError:
            clrscr()
            print(f"The result file is invalid for: {name}")
            return False
        problems = results.mismatches(truth)
        if problems:
            clrscr()
            for problem in problems:
                print(problem)
            return False
        if self.score != truth_score:
            clrscr()
            print("The score is different")
            return False
        return True

    def _failed(self) -> bool:
        if not self.silent:
            self._pause(500)
        return False

    def _passed(self) -> bool:
        print(PASSED, flush=True)
        self.curr_file = 0
        return True

    def run(self) -> bool:
        """Replay the levels; return True when every check passed."""
        board = self.board
        if self.silent:
            board.set_silent()
        self.score = 0
        self.iteration = 0
        results = Results()
        file_count = board.file_count

        if file_count == 0:
            if not self.silent:
                clrscr()
                self._announce("THERE IS NO FILES")
                self._pause(3000)
                clrscr()
            return False
        if not self.load_board():
            return False

        mario = Mario(board)
        ghosts = Ghosts(board, mario)
        barrels = Barrels(board, mario)
        self.steps_in_game = 0

        steps = self._load_steps()
        if steps is None:
            return False
        random.seed(steps.random_seed)
        board.reset(START_LIFE, self.score)

        while True:
            self.iteration += 1
            key1, key2 = self.keys_for(self.iteration, steps)
            if not self.silent:
                self._pause(50)
            previous_life = mario.life
            self.tick(mario, barrels, ghosts, key1, key2)

            if mario.life != previous_life:
                self.score -= DEATH_PENALTY
                results.add(self.iteration, ResultValue.MARIO_DEAD)
                if mario.life == 0:
                    if not self.results_match(results):
                        return self._failed()
                    if not self.silent:
                        clrscr()
                        self._announce("YOU DEAD GAME OVER")
                        self._pause(3000)
                        clrscr()
                        gotoxy(0, 0)
                    return self._passed()
                self.reset_game(barrels, ghosts, mario.life)

            if mario.meets_pauline():
                self.score += STAGE_BONUS
                results.add(self.iteration, ResultValue.FINISHED)
                if not self.results_match(results):
                    return self._failed()
                if self.curr_file == file_count - 1:
                    if not self.silent:
                        clrscr()
                        self._announce("YOU ARE THE WINNER")
                        self._announce(f"YOUR SCORE : {self.score}", x=41, y=13)
                        self._pause(3000)
                        clrscr()
                    return self._passed()
                if not self.silent:
                    clrscr()
                    self._announce("YOU PASS TO NEXT MAP")
                    self._pause(1000)
                    clrscr()
                    gotoxy(0, 0)
                self.curr_file += 1
                if not self.load_board():
                    return False
                steps = self._load_steps()
                if steps is None:
                    return False
                random.seed(steps.random_seed)
                self.reset_game(barrels, ghosts, mario.life)
                mario.reset()
                self.iteration = 0