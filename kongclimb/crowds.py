"""Collections of the barrels and ghosts that share one board with Mario."""

from __future__ import annotations

from kongclimb.board import Board, ObjectKey
from kongclimb.enemies import Barrel, ClimbGhost, Ghost
from kongclimb.mario import Mario


def _next_to_mario(point, mario: Mario) -> bool:
    mx, my = mario.point.x, mario.point.y
    return point.y == my and (point.x - mario.diff_x == mx or point.x == mx)


def _erase(board: Board, point) -> None:
    x, y = point.x, point.y
    original = board.get_original(x, y)
    point.draw(original)
    board.set_current(x, y, original)


class Barrels:
    """The barrels in play, in the order they were thrown."""

    def __init__(self, board: Board, mario: Mario) -> None:
        self.board = board
        self.mario = mario
        self._barrels: list[Barrel] = []

    def __getitem__(self, index: int) -> Barrel:
        return self._barrels[index]

    def __len__(self) -> int:
        return len(self._barrels)

    def __iter__(self):
        return iter(self._barrels)

    def reset(self) -> None:
        self._barrels.clear()

    def spawn(self) -> Barrel:
        """Throw a new barrel from Donkey Kong's position."""
        barrel = Barrel(self.board, self.mario.point)
        self._barrels.append(barrel)
        return barrel

    def remove(self, index: int) -> None:
        """Take a barrel out of play and restore the tile under it."""
        barrel = self._barrels.pop(index)
        _erase(self.board, barrel.point)


class Ghosts:
    """The ghosts in play, created from the board's ghost start points."""

    def __init__(self, board: Board, mario: Mario) -> None:
        self.board = board
        self.mario = mario
        self._ghosts: list[Ghost] = []
        self._spawn_all()

    def _spawn_all(self) -> None:
        self._ghosts = [
            Ghost(self.board, x, y, ObjectKey.REGULAR_GHOST.value)
            for x, y in self.board.regular_ghost_starts
        ]
        self._ghosts.extend(
            ClimbGhost(self.board, x, y, ObjectKey.CLIMB_GHOST.value)
            for x, y in self.board.climb_ghost_starts
        )

    def __len__(self) -> int:
        return len(self._ghosts)

    def __iter__(self):
        return iter(self._ghosts)

    def move(self) -> None:
        """Let Mario's hammer hit nearby ghosts, then move every ghost left."""
        survivors: list[Ghost] = []
        for ghost in self._ghosts:
            if _next_to_mario(ghost.point, self.mario):
                if self.mario.wants_kill:
                    _erase(self.board, ghost.point)
                    continue
            else:
                ghost.calculate_next_move()
            survivors.append(ghost)
        self._ghosts = survivors
        for ghost in self._ghosts:
            ghost.move()

    def reset(self) -> None:
        """Bring every ghost back to its start point."""
        self._spawn_all()