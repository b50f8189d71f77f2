import math

import pytest

from quadplay.angles import angle_lerp, short_angle_dist, wheel_rotation


@pytest.mark.parametrize("a", [0.0, 45.0, 180.0, 359.0, -90.0])
def test_distance_to_self_is_zero(a):
    assert short_angle_dist(a, a) == 0.0


@pytest.mark.parametrize(
    "a0, a1", [(0.0, 350.0), (10.0, 200.0), (300.0, 20.0), (90.0, 45.0), (0.0, 179.0)]
)
def test_distance_is_short_and_reaches_target(a0, a1):
    d = short_angle_dist(a0, a1)
    assert abs(d) <= 180.0
    assert math.fmod(a0 + d - a1, 360.0) == pytest.approx(0.0, abs=1e-9) or abs(
        math.fmod(a0 + d - a1, 360.0)
    ) == pytest.approx(360.0)


def test_wraps_the_short_way():
    assert short_angle_dist(0.0, 350.0) == pytest.approx(-10.0)


def test_lerp_endpoints():
    assert angle_lerp(30.0, 90.0, 0.0) == 30.0
    assert angle_lerp(30.0, 90.0, 1.0) == pytest.approx(90.0)


def test_lerp_moves_partially():
    a = angle_lerp(0.0, 90.0, 0.1)
    assert 0.0 < a < 90.0
    assert a == pytest.approx(short_angle_dist(0.0, 90.0) * 0.1)


def test_wheel_rotation_steps():
    assert wheel_rotation(0.0, 1.0) == 10.0
    assert wheel_rotation(50.0, 0.0) == 50.0


def test_wheel_rotation_wraps():
    assert wheel_rotation(355.0, 1.0) == pytest.approx(5.0)
    assert wheel_rotation(5.0, -1.0) == pytest.approx(355.0)


@pytest.mark.parametrize("start", [0.0, 100.0, 359.0])
@pytest.mark.parametrize("wheel", [-3.0, -1.0, 1.0, 3.0])
def test_wheel_rotation_stays_in_range(start, wheel):
    r = wheel_rotation(start, wheel)
    assert 0.0 <= r < 360.0