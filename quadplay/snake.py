"""Snake on a square board: the snake grows by eating fruit and dies on walls or itself."""

from __future__ import annotations

import random
from collections import deque
from enum import Enum
from typing import Optional

SQUARES = 16
INITIAL_SPEED = 0.3
FRUIT_SCORE = 100

Point = tuple[int, int]


class Direction(Enum):
    """Direction of travel as a unit step on the board."""

    UP = (0, -1)
    DOWN = (0, 1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class SnakeGame:
    """State of one snake game; call :meth:`tick` once every ``speed`` seconds."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self) -> None:
        """Start a new game."""
        self.head: Point = (0, 0)
        self.body: deque[Point] = deque()
        self.direction = Direction.RIGHT
        self.fruit: Point = self._random_fruit()
        self.score = 0
        self.speed = INITIAL_SPEED
        self.game_over = False

    def _random_fruit(self) -> Point:
        return (self.rng.randrange(SQUARES), self.rng.randrange(SQUARES))

    def turn(self, direction: Direction) -> None:
        """Change direction unless it would reverse the snake onto itself."""
        if self.game_over:
            return
        if direction is not self.direction.opposite:
            self.direction = direction

    def tick(self) -> bool:
        """Move one square; returns False once the game is over."""
        if self.game_over:
            return False

        self.body.appendleft(self.head)
        dx, dy = self.direction.value
        self.head = (self.head[0] + dx, self.head[1] + dy)

        if self.head == self.fruit:
            self.fruit = self._random_fruit()
            self.score += FRUIT_SCORE
            self.speed *= 0.9
        else:
            self.body.pop()

        x, y = self.head
        if not (0 <= x < SQUARES and 0 <= y < SQUARES) or self.head in self.body:
            self.game_over = True
        return not self.game_over