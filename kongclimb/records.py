"""Recorded key steps and game results, with their text file formats."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from itertools import islice
from pathlib import Path


class ResultValue(IntEnum):
    MARIO_DEAD = 0
    FINISHED = 1
    NO_RESULT = 2


def _tokens(filename) -> list[str]:
    return Path(filename).read_text(encoding="latin-1").split()


def _as_result(value: int):
    try:
        return ResultValue(value)
    except ValueError:
        return value


@dataclass
class Steps:
    """Keys pressed during a game, keyed by iteration, with the game's random seed."""

    random_seed: int = 0
    entries: deque = field(default_factory=deque)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def add(self, iteration: int, step: str) -> None:
        self.entries.append((iteration, step))

    def is_next_on(self, iteration: int) -> bool:
        """Return True when the next recorded step belongs to ``iteration``."""
        return bool(self.entries) and self.entries[0][0] == iteration

    def pop(self) -> str:
        """Remove and return the next step; raise IndexError when none are left."""
        if not self.entries:
            raise IndexError("no steps left")
        return self.entries.popleft()[1]

    def clear(self) -> None:
        self.entries.clear()

    def save(self, filename) -> None:
        lines = [str(self.random_seed), str(len(self.entries))]
        lines.extend(f"{iteration} {step}" for iteration, step in self.entries)
        Path(filename).write_text("\n".join(lines), encoding="latin-1")

    @classmethod
    def load(cls, filename) -> "Steps":
        """Read a steps file; raise OSError if it cannot be read, ValueError if malformed."""
        tokens = _tokens(filename)
        if len(tokens) < 2:
            raise ValueError(f"{filename}: missing seed or step count")
        steps = cls(random_seed=int(tokens[0]))
        body = iter(tokens[2:])
        for iteration, step in islice(zip(body, body), int(tokens[1])):
            steps.add(int(iteration), step)
        return steps


@dataclass
class Results:
    """Deaths and finishes of a game, keyed by iteration."""

    entries: deque = field(default_factory=deque)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def add(self, iteration: int, result) -> None:
        self.entries.append((iteration, result))

    def pop(self):
        """Remove and return the first (iteration, result), or (0, NO_RESULT) when empty."""
        if not self.entries:
            return 0, ResultValue.NO_RESULT
        return self.entries.popleft()

    def clear(self) -> None:
        self.entries.clear()

    def save(self, filename, score: int) -> None:
        lines = [str(len(self.entries))]
        lines.extend(f"{iteration} {int(result)}" for iteration, result in self.entries)
        lines.append(str(score))
        Path(filename).write_text("\n".join(lines), encoding="latin-1")

    @classmethod
    def load(cls, filename) -> tuple["Results", int]:
        """Read a results file and return the results with the recorded score."""
        tokens = _tokens(filename)
        if not tokens:
            raise ValueError(f"{filename}: missing result count")
        results = cls()
        body = iter(tokens[1:])
        for iteration, value in islice(zip(body, body), int(tokens[0])):
            results.add(int(iteration), _as_result(int(value)))
        score = next(body, None)
        if score is None:
            raise ValueError(f"{filename}: missing score")
        return results, int(score)

    def mismatches(self, truth: "Results") -> list[str]:
        """Compare with expected results and describe every difference.

        The recorded results are consumed: this list is empty afterwards.
        ``truth`` is left unchanged.
        """
        expected = deque(truth.entries)
        problems: list[str] = []
        while self.entries and expected:
            my_iteration, my_value = self.entries.popleft()
            truth_iteration, truth_value = expected.popleft()
            if my_iteration != truth_iteration:
                problems.append(
                    f"TEST FAILED - the result in actual game was in {my_iteration} "
                    f"iteration and in the expected result was {truth_iteration} iteration"
                )
            elif my_value != truth_value:
                problems.append(_value_mismatch(my_iteration, my_value, truth_value))
        if self.entries:
            problems.append(
                "TEST FAILED - the actual game result has more results than the expected game result"
            )
        elif expected:
            problems.append(
                "TEST FAILED - The actual game result has less results than the expected game result"
            )
        self.entries.clear()
        return problems


def _value_mismatch(iteration: int, mine, truth) -> str:
    if truth == ResultValue.MARIO_DEAD:
        truth_text, my_text = "Mario Dead", "Finished"
    elif truth == ResultValue.FINISHED:
        truth_text, my_text = "finished", "Mario Dead"
    else:
        truth_text = "invalid value"
        my_text = "Mario Dead" if mine == ResultValue.MARIO_DEAD else "finished"
    return (
        f"TEST FAILED - the actual game says {my_text} and the expected result says {truth_text}\n"
        f"That was at {iteration} iteration in the actual game"
    )