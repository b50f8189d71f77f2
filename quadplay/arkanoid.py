"""Breakout-style game on a 20x20 board with a 10x10 wall of blocks."""

from __future__ import annotations

from .geometry import Rect, Vec2

BLOCKS_W = 10
BLOCKS_H = 10
SCR_W = 20.0
SCR_H = 20.0
PLATFORM_WIDTH = 5.0
PLATFORM_HEIGHT = 0.2
PLATFORM_SPEED = 3.0
BLOCK_W = SCR_W / BLOCKS_W
BLOCK_H = 7.0 / BLOCKS_H


class Arkanoid:
    """Ball, paddle and blocks; the ball sticks to the paddle until launched."""

    def __init__(self) -> None:
        self.blocks = [[True] * BLOCKS_W for _ in range(BLOCKS_H)]
        self.ball_x = 12.0
        self.ball_y = 7.0
        self.dx = 3.5
        self.dy = -3.5
        self.platform_x = 10.0
        self.stick = True

    @staticmethod
    def block_rect(i: int, j: int) -> Rect:
        """Area of block at column ``i`` and row ``j`` that the ball collides with."""
        return Rect(i * BLOCK_W + 0.05, j * BLOCK_H + 0.05, BLOCK_W, BLOCK_H)

    def update(self, dt: float, left: bool, right: bool, launch: bool) -> None:
        """Advance by ``dt`` seconds with the given keys held."""
        if right and self.platform_x < SCR_W - PLATFORM_WIDTH / 2.0:
            self.platform_x += PLATFORM_SPEED * dt
        if left and self.platform_x > PLATFORM_WIDTH / 2.0:
            self.platform_x -= PLATFORM_SPEED * dt

        if not self.stick:
            self.ball_x += self.dx * dt
            self.ball_y += self.dy * dt
        else:
            self.ball_x = self.platform_x
            self.ball_y = SCR_H - 0.5
            self.stick = not launch

        if self.ball_x <= 0.0 or self.ball_x > SCR_W:
            self.dx = -self.dx
        on_paddle = (
            self.ball_y > SCR_H - PLATFORM_HEIGHT - 0.15 / 2.0
            and self.platform_x - PLATFORM_WIDTH / 2.0
            <= self.ball_x
            <= self.platform_x + PLATFORM_WIDTH / 2.0
        )
        if self.ball_y <= 0.0 or on_paddle:
            self.dy = -self.dy
        if self.ball_y >= SCR_H:
            self.ball_y = 10.0
            self.dy = -abs(self.dy)
            self.stick = True

        ball = Vec2(self.ball_x, self.ball_y)
        for j, row in enumerate(self.blocks):
            for i, present in enumerate(row):
                if present and self.block_rect(i, j).contains(ball):
                    self.dy = -self.dy
                    row[i] = False

    def blocks_left(self) -> int:
        """Number of blocks not yet broken."""
        return sum(sum(row) for row in self.blocks)