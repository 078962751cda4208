"""Tests for rejection sampling of points inside a circle."""
from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from circle3d import Circle, NumpyRandomSource, SamplingConfig, SamplingExhaustedError, SeededRandomSource
from circle3d.vector import project_onto_plane

CIRCUMSCRIBED = SamplingConfig(bounding_cube="circumscribed")


def in_plane_distance(circle: Circle, point: np.ndarray) -> float:
    return float(np.linalg.norm(project_onto_plane(point - circle.centre, circle.axis)))


# //1.- A rejected candidate is redrawn and the accepted point keeps its off-plane part.
def test_rejected_candidate_is_redrawn(scripted_random) -> None:
    source = scripted_random([1.0, 1.0, 0.5, 0.5, 0.75, 0.0])
    circle = Circle((0.0, 0.0, 0.0), 1.0, (0.0, 0.0, 1.0), random_source=source, config=CIRCUMSCRIBED)

    point = circle.random_point_inside()

    np.testing.assert_allclose(point, [0.0, 0.5, -1.0])
    assert source.calls == [(-1.0, 1.0)] * 6
    assert circle.sampling_stats.attempts == 2
    assert circle.sampling_stats.accepted == 1
    assert circle.sampling_stats.acceptance_rate == pytest.approx(0.5)


def test_candidate_cube_is_centred_on_circle(scripted_random) -> None:
    source = scripted_random([0.5])
    circle = Circle((10.0, -4.0, 2.0), 2.0, (0.0, 1.0, 0.0), random_source=source, config=CIRCUMSCRIBED)
    np.testing.assert_allclose(circle.random_point_inside(), [10.0, -4.0, 2.0])
    assert source.calls == [(8.0, 12.0), (-6.0, -2.0), (0.0, 4.0)]


def test_default_cube_uses_radius_over_root_two(scripted_random) -> None:
    source = scripted_random([0.5])
    circle = Circle((0.0, 0.0, 0.0), 2.0, (0.0, 0.0, 1.0), random_source=source)

    assert circle.bounding_half_side() == pytest.approx(math.sqrt(2.0))
    circle.random_point_inside()
    low, high = source.calls[0]
    assert low == pytest.approx(-math.sqrt(2.0))
    assert high == pytest.approx(math.sqrt(2.0))


def test_default_cube_bounds_for_unit_circle(scripted_random) -> None:
    source = scripted_random([0.5])
    circle = Circle((0.0, 0.0, 0.0), 1.0, (0.0, 0.0, 1.0), random_source=source)

    assert circle.bounding_half_side() == pytest.approx(math.sqrt(0.5))
    circle.random_point_inside()
    for low, high in source.calls:
        assert low == pytest.approx(-math.sqrt(0.5))
        assert high == pytest.approx(math.sqrt(0.5))


# //2.- Statistical behaviour over many draws.
def test_unit_circle_samples_stay_in_disc_with_quarter_pi_acceptance() -> None:
    circle = Circle(
        (0.0, 0.0, 0.0), 1.0, (0.0, 0.0, 1.0), random_source=SeededRandomSource(1234), config=CIRCUMSCRIBED
    )

    points = circle.random_points_inside(10_000)

    assert len(points) == 10_000
    xy = np.array(points)[:, :2]
    assert np.all(np.hypot(xy[:, 0], xy[:, 1]) <= 1.0 + 1e-12)
    assert circle.sampling_stats.acceptance_rate == pytest.approx(math.pi / 4.0, abs=0.02)
    # Uniform over the disc: a quarter of the area lies within half the radius.
    inner = np.mean(np.hypot(xy[:, 0], xy[:, 1]) <= 0.5)
    assert inner == pytest.approx(0.25, abs=0.02)


def test_default_cube_accepts_every_candidate_for_aligned_axis() -> None:
    circle = Circle((1.0, 1.0, 1.0), 3.0, (0.0, 0.0, 1.0), random_source=NumpyRandomSource(seed=3))

    points = np.array(circle.random_points_inside(2_000))

    half_side = 3.0 / math.sqrt(2.0)
    assert np.all(np.abs(points - 1.0) <= half_side + 1e-9)
    assert circle.sampling_stats.acceptance_rate > 0.999


@pytest.mark.parametrize("axis", [(1.0, 1.0, 0.0), (0.3, -0.5, 0.8), (1.0, 0.0, 0.0)])
def test_tilted_circle_samples_project_into_disc(axis) -> None:
    circle = Circle((2.0, 0.0, -1.0), 1.5, axis, random_source=SeededRandomSource(7))
    for point in circle.random_points_inside(500):
        assert in_plane_distance(circle, point) <= 1.5 + 1e-9
        assert np.all(np.abs(point - circle.centre) <= 1.5 + 1e-9)


def test_points_are_returned_in_draw_order(scripted_random) -> None:
    source = scripted_random([0.5, 0.5, 0.5, 0.75, 0.5, 0.5])
    circle = Circle((0.0, 0.0, 0.0), 1.0, (0.0, 0.0, 1.0), random_source=source, config=CIRCUMSCRIBED)
    points = circle.random_points_inside(2)
    np.testing.assert_allclose(points, [[0.0, 0.0, 0.0], [0.5, 0.0, 0.0]])


def test_zero_radius_returns_centre() -> None:
    circle = Circle((3.0, 2.0, 1.0), 0.0, (0.0, 1.0, 0.0), random_source=SeededRandomSource(0))
    np.testing.assert_array_equal(circle.random_point_inside(), [3.0, 2.0, 1.0])


def test_seeded_config_is_reproducible() -> None:
    config = SamplingConfig(seed=99)
    first = Circle((0.0, 0.0, 0.0), 1.0, (0.0, 0.0, 1.0), config=config)
    second = Circle((0.0, 0.0, 0.0), 1.0, (0.0, 0.0, 1.0), config=config)
    np.testing.assert_array_equal(first.random_points_inside(20), second.random_points_inside(20))


# //3.- The attempt cap ends the loop with the configured fallback.
def test_attempt_cap_returns_centre_and_warns(scripted_random, caplog) -> None:
    config = SamplingConfig(max_attempts=5, bounding_cube="circumscribed")
    circle = Circle(
        (1.0, 2.0, 3.0), 1.0, (0.0, 0.0, 1.0), random_source=scripted_random([1.0]), config=config
    )

    with caplog.at_level(logging.WARNING, logger="circle3d.circle"):
        point = circle.random_point_inside()

    np.testing.assert_array_equal(point, [1.0, 2.0, 3.0])
    assert circle.sampling_stats.exhausted == 1
    assert circle.sampling_stats.attempts == 5
    assert "No sample accepted after 5 attempts" in caplog.text


def test_attempt_cap_can_raise(scripted_random) -> None:
    config = SamplingConfig(max_attempts=3, fallback="raise", bounding_cube="circumscribed")
    circle = Circle(
        (0.0, 0.0, 0.0), 1.0, (0.0, 0.0, 1.0), random_source=scripted_random([1.0]), config=config
    )
    with pytest.raises(SamplingExhaustedError) as excinfo:
        circle.random_point_inside()
    assert excinfo.value.attempts == 3


def test_reset_sampling_stats(scripted_random) -> None:
    circle = Circle(
        (0.0, 0.0, 0.0), 1.0, (0.0, 0.0, 1.0), random_source=scripted_random([0.5])
    )
    circle.random_points_inside(3)
    assert circle.sampling_stats.accepted == 3
    circle.reset_sampling_stats()
    assert circle.sampling_stats.attempts == 0
    assert circle.sampling_stats.acceptance_rate == 0.0
