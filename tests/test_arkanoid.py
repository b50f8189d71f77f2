import pytest

from quadplay.arkanoid import (
    BLOCKS_H,
    BLOCKS_W,
    PLATFORM_SPEED,
    PLATFORM_WIDTH,
    SCR_H,
    SCR_W,
    Arkanoid,
)


def test_starts_with_full_wall():
    game = Arkanoid()
    assert game.blocks_left() == BLOCKS_W * BLOCKS_H
    assert game.stick


def test_ball_sticks_to_paddle_until_launch():
    game = Arkanoid()
    game.update(0.1, left=False, right=False, launch=False)
    assert game.ball_x == game.platform_x
    assert game.ball_y == SCR_H - 0.5
    assert game.stick
    game.update(0.1, left=False, right=False, launch=True)
    assert not game.stick


def test_launched_ball_moves():
    game = Arkanoid()
    game.update(0.0, False, False, True)
    x, y = game.ball_x, game.ball_y
    game.update(0.1, False, False, False)
    assert game.ball_x == pytest.approx(x + game.dx * 0.1)
    assert game.ball_y == pytest.approx(y + game.dy * 0.1)


def test_paddle_moves_and_stays_in_bounds():
    game = Arkanoid()
    start = game.platform_x
    game.update(0.5, left=False, right=True, launch=False)
    assert game.platform_x == pytest.approx(start + PLATFORM_SPEED * 0.5)
    game.platform_x = SCR_W - PLATFORM_WIDTH / 2.0
    game.update(0.5, left=False, right=True, launch=False)
    assert game.platform_x == SCR_W - PLATFORM_WIDTH / 2.0


def test_ball_breaks_block_and_bounces():
    game = Arkanoid()
    game.stick = False
    game.ball_x, game.ball_y = 1.0, 0.3
    game.dx, game.dy = 0.0, -3.5
    game.update(0.0, False, False, False)
    assert game.blocks_left() == BLOCKS_W * BLOCKS_H - 1
    assert game.blocks[0][0] is False
    assert game.dy == 3.5


def test_wall_bounce_flips_dx():
    game = Arkanoid()
    game.stick = False
    game.ball_x, game.ball_y = 0.0, 12.0
    game.dx = -3.5
    game.update(0.0, False, False, False)
    assert game.dx == 3.5


def test_paddle_bounces_ball():
    game = Arkanoid()
    game.stick = False
    game.ball_x, game.ball_y = game.platform_x, SCR_H - 0.1
    game.dy = 3.5
    game.update(0.0, False, False, False)
    assert game.dy == -3.5


def test_missed_ball_resets_to_stick():
    game = Arkanoid()
    game.stick = False
    game.ball_x, game.ball_y = 1.0, SCR_H + 0.5
    game.dy = 3.5
    game.update(0.0, False, False, False)
    assert game.stick
    assert game.dy == -3.5
    assert game.ball_y == 10.0