import dataclasses
import random

import pytest

from quadplay.geometry import Vec2
from quadplay.particle_config import (
    AtlasConfig,
    BatchedCurve,
    BlendMode,
    Color,
    ColorCurve,
    Curve,
    EmitterConfig,
    Interpolation,
    PointEmission,
    RectEmission,
    SphereEmission,
)


def test_constant_curve_batches_to_constant():
    curve = Curve(points=[(0.0, 2.0), (1.0, 2.0)], resolution=4)
    batched = curve.batch()
    assert batched.points
    assert all(p == pytest.approx(2.0) for p in batched.points)


def test_identity_curve_samples_follow_x():
    curve = Curve(points=[(0.0, 0.0), (1.0, 1.0)], resolution=4)
    batched = curve.batch()
    step = 1.0 / curve.resolution
    for i, value in enumerate(batched.points):
        assert value == pytest.approx(i * step)


def test_source_size_curve_peaks_in_middle():
    curve = Curve(points=[(0.0, 0.5), (0.5, 1.0), (1.0, 0.0)])
    batched = curve.batch()
    assert batched.points[0] == pytest.approx(0.5)
    assert max(batched.points) == pytest.approx(1.0)
    assert min(batched.points) >= -1e-9


def test_bezier_is_rejected():
    curve = Curve(points=[(0.0, 0.0), (1.0, 1.0)], interpolation=Interpolation.BEZIER)
    with pytest.raises(ValueError):
        curve.batch()


def test_batched_get_at_ends():
    batched = BatchedCurve((3.0, 5.0, 9.0))
    assert batched.get(0.0) == pytest.approx(3.0)
    assert batched.get(1.0) == pytest.approx(9.0)


def test_batched_get_at_sample_positions():
    points = (1.0, 4.0, 2.0, 7.0)
    batched = BatchedCurve(points)
    for i, value in enumerate(points):
        assert batched.get(i / len(points)) == pytest.approx(value)


def test_batched_get_between_samples_is_bounded():
    batched = BatchedCurve((1.0, 4.0, 2.0, 7.0))
    for k in range(41):
        assert 1.0 <= batched.get(k / 40) <= 7.0


def test_batched_get_empty_raises():
    with pytest.raises(ValueError):
        BatchedCurve(()).get(0.5)


def test_color_curve_key_points():
    start = Color(1.0, 0.0, 0.0, 1.0)
    mid = Color(0.0, 1.0, 0.0, 0.5)
    end = Color(0.0, 0.0, 1.0, 0.0)
    curve = ColorCurve(start, mid, end)
    assert curve.at(0.0) == start
    assert curve.at(0.5) == mid
    got = curve.at(1.0)
    assert (got.r, got.g, got.b, got.a) == pytest.approx((end.r, end.g, end.b, end.a))


def test_default_color_curve_stays_white():
    curve = ColorCurve()
    for t in (0.0, 0.3, 0.5, 0.8, 1.0):
        got = curve.at(t)
        assert (got.r, got.g, got.b, got.a) == pytest.approx((1.0, 1.0, 1.0, 1.0))


def test_point_emission_is_origin():
    assert PointEmission().random_point(random.Random(1)) == Vec2(0.0, 0.0)


def test_rect_emission_within_bounds():
    shape = RectEmission(width=10.0, height=4.0)
    rng = random.Random(7)
    for _ in range(200):
        p = shape.random_point(rng)
        assert -5.0 <= p.x <= 5.0
        assert -2.0 <= p.y <= 2.0


def test_sphere_emission_within_radius():
    shape = SphereEmission(radius=3.0)
    rng = random.Random(11)
    for _ in range(200):
        assert shape.random_point(rng).length() <= 3.0 + 1e-9


def test_emission_is_deterministic_for_seed():
    shape = SphereEmission(radius=2.0)
    a = [shape.random_point(random.Random(5)) for _ in range(3)]
    b = [shape.random_point(random.Random(5)) for _ in range(3)]
    assert a == b


def test_atlas_open_end_covers_sheet():
    atlas = AtlasConfig.from_bounds(4, 4, 8)
    assert atlas.start_index == 8
    assert atlas.end_index == 4 * 4


def test_atlas_exclusive_range():
    atlas = AtlasConfig.from_bounds(4, 4, 0, 8)
    assert (atlas.start_index, atlas.end_index) == (0, 8)


def test_atlas_inclusive_end_is_one_less():
    inclusive = AtlasConfig.from_bounds(4, 4, 0, 8, end_inclusive=True)
    exclusive = AtlasConfig.from_bounds(4, 4, 0, 8)
    assert inclusive.end_index == exclusive.end_index - 1


def test_atlas_frame_uv_first_and_row_wrap():
    atlas = AtlasConfig.from_bounds(4, 2)
    assert atlas.frame_uv(0) == pytest.approx((0.0, 0.0, 1 / 4, 1 / 2))
    u, v, w, h = atlas.frame_uv(4)
    assert u == pytest.approx(0.0)
    assert v == pytest.approx(h)
    assert w == pytest.approx(1 / 4)


def test_emitter_config_replace_keeps_other_fields():
    base = EmitterConfig(lifetime=0.4, amount=10, blend_mode=BlendMode.ADDITIVE)
    changed = dataclasses.replace(base, local_coords=True)
    assert changed.local_coords is True
    assert changed.lifetime == base.lifetime
    assert changed.amount == base.amount
    assert changed.blend_mode is BlendMode.ADDITIVE


def test_emitter_config_instances_do_not_share_state():
    a = EmitterConfig()
    b = EmitterConfig()
    a.gravity = Vec2(0.0, -1000.0)
    assert b.gravity == Vec2(0.0, 0.0)
    assert a.emission_shape.random_point(random.Random(0)) == Vec2(0.0, 0.0)