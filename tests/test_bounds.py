import pytest

from sparkles.services.bounds import compute_bounds


def test_bounds_points_only():
    b = compute_bounds([(0.0, 0.2), (1.0, 1.0), (2.0, 0.6)], vertical_offset=10.0)
    assert b.as_tuple() == pytest.approx((0.0, -9.8, 2.0, 11.0))


def test_baseline_seeds_vertical_range():
    b = compute_bounds([(0.0, 0.5), (1.0, 1.0)], baseline_y=1.5, vertical_offset=0.0)
    assert (b.min_y, b.max_y) == pytest.approx((0.5, 1.5))


def test_baseline_only():
    b = compute_bounds([], baseline_y=0.3, vertical_offset=1.0)
    assert b.as_tuple() == pytest.approx((0.0, -0.7, 0.0, 1.3))


def test_default_offset_is_ten():
    b = compute_bounds([(0.0, 1.0)])
    assert b.as_tuple() == pytest.approx((0.0, -9.0, 0.0, 11.0))
