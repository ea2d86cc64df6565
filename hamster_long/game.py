"""Game state: player moves, collectibles, the exit and roaming enemies."""

from __future__ import annotations

import random
from enum import Enum
from typing import Protocol

from .mapfile import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, GameMap

WIN_MESSAGE = "👍🎉👍🎉👍🎉 Bravo 👍🎉👍🎉👍🎉"
LOSE_MESSAGE = "💥😵💥💥💥💥 Game Over 💥💥💥💥😵💥"
QUIT_MESSAGE = "Exit🚪❌"

ENEMY_INTERVAL = 500
ANIMATION_FRAMES = 3


class Outcome(Enum):
    """How a game came to an end."""

    WON = "won"
    LOST = "lost"
    QUIT = "quit"


class Direction(Enum):
    """A step on the grid, as (row delta, column delta)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    RIGHT = (0, 1)
    LEFT = (0, -1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


KEYMAP: dict[int, Direction] = {
    126: Direction.UP,
    13: Direction.UP,
    125: Direction.DOWN,
    1: Direction.DOWN,
    124: Direction.RIGHT,
    2: Direction.RIGHT,
    123: Direction.LEFT,
    0: Direction.LEFT,
}
QUIT_KEY = 53

# Enemy steps, indexed by the random draw.
_ENEMY_STEPS = (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN)


class GameOver(Exception):
    """Raised when the game ends by winning, losing or quitting."""

    def __init__(self, outcome: Outcome, message: str, moves: int) -> None:
        super().__init__(message)
        self.outcome = outcome
        self.message = message
        self.moves = moves


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Game:
    """A running game on a validated map."""

    def __init__(self, game_map: GameMap) -> None:
        self.grid: list[list[str]] = [list(row) for row in game_map.rows]
        self.player: tuple[int, int] = game_map.player
        self.collectibles: int = game_map.collectibles
        self.moves: int = 0
        self.face: Direction | None = None
        self.frame: int = 0
        self.ticks: int = 0

    @property
    def rows(self) -> tuple[str, ...]:
        return tuple("".join(row) for row in self.grid)

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0])

    def _end(self, outcome: Outcome, message: str) -> GameOver:
        return GameOver(outcome, message, self.moves)

    def move(self, direction: Direction) -> bool:
        """Try to step the player; return True if the player moved.

        Raises GameOver when the player reaches the open exit or walks
        into an enemy.
        """
        self.face = direction
        r, c = self.player
        dr, dc = direction.delta
        nr, nc = r + dr, c + dc
        target = self.grid[nr][nc]
        if target in (FLOOR, COLLECTIBLE):
            if target == COLLECTIBLE:
                self.collectibles -= 1
            self.grid[r][c] = FLOOR
            self.grid[nr][nc] = PLAYER
            self.player = (nr, nc)
            self.moves += 1
            return True
        if target == EXIT and self.collectibles == 0:
            self.moves += 1
            raise self._end(Outcome.WON, WIN_MESSAGE)
        if target == ENEMY:
            raise self._end(Outcome.LOST, LOSE_MESSAGE)
        return False

    def handle_key(self, keycode: int) -> bool:
        """Act on a key press; return True if the player moved."""
        if keycode == QUIT_KEY:
            raise self._end(Outcome.QUIT, QUIT_MESSAGE)
        direction = KEYMAP.get(keycode)
        if direction is None:
            return False
        return self.move(direction)

    def _first_enemy(self) -> tuple[int, int] | None:
        for r, row in enumerate(self.grid):
            for c, cell in enumerate(row):
                if cell == ENEMY:
                    return r, c
        return None

    def move_enemy(self, rng: _RandomSource | None = None) -> bool:
        """Step the first enemy in a random direction.

        Returns False when there is no enemy on the map. Raises GameOver
        when the enemy steps onto the player.
        """
        position = self._first_enemy()
        if position is None:
            return False
        source = rng if rng is not None else random
        step = _ENEMY_STEPS[source.randrange(len(_ENEMY_STEPS))]
        r, c = position
        dr, dc = step.delta
        nr, nc = r + dr, c + dc
        target = self.grid[nr][nc]
        if target in (FLOOR, PLAYER):
            self.grid[r][c] = FLOOR
            self.grid[nr][nc] = ENEMY
            if target == PLAYER:
                raise self._end(Outcome.LOST, LOSE_MESSAGE)
        return True

    def tick(self, rng: _RandomSource | None = None) -> bool:
        """Advance one loop step; return True when the board changed."""
        if self.ticks != ENEMY_INTERVAL:
            self.ticks += 1
            return False
        self.move_enemy(rng)
        self.frame = (self.frame + 1) % ANIMATION_FRAMES
        self.ticks = 0
        return True