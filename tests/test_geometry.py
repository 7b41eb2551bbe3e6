import math

import numpy
import numpy.testing as npt
import pytest

from polylib.curve import geometry
from polylib.curve.tolerances import Tolerances

L_SHAPE = numpy.array([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)])


def _random_polyline(rng, n):
    return geometry.filter_dup_points(rng.uniform(-50, 50, size=(n, 2)))


def test_distance():
    assert geometry.distance((0, 0), (3, 4)) == 5.0
    assert geometry.distance((1.5, -2), (1.5, -2)) == 0.0


def test_filter_dup_points_removes_consecutive_duplicates():
    result = geometry.filter_dup_points([(0, 0), (0, 0), (1, 0)])
    npt.assert_array_equal(result, [(0, 0), (1, 0)])


def test_filter_dup_points_keeps_non_consecutive_repeats():
    result = geometry.filter_dup_points([(0, 0), (1, 0), (0, 0)])
    npt.assert_array_equal(result, [(0, 0), (1, 0), (0, 0)])


def test_filter_dup_points_compares_to_last_kept_point():
    # each step is within tolerance of the previous raw point, but the third
    # point has drifted past the tolerance from the first.
    result = geometry.filter_dup_points([(0, 0), (6e-13, 0), (1.2e-12, 0)])
    npt.assert_array_equal(result, [(0, 0), (1.2e-12, 0)])


def test_filter_dup_points_custom_tolerance():
    result = geometry.filter_dup_points([(0, 0), (0.05, 0), (1, 0)], Tolerances(duplicate=0.1, unique=1e-9))
    npt.assert_array_equal(result, [(0, 0), (1, 0)])


def test_filter_dup_points_degenerate():
    assert geometry.filter_dup_points(numpy.empty((0, 2))).shape == (0, 2)
    npt.assert_array_equal(geometry.filter_dup_points([(2, 3)]), [(2, 3)])


def test_cumulative_distances():
    npt.assert_array_equal(geometry.cumulative_distances([(0, 0), (3, 4), (3, 10)]), [0, 5, 11])


def test_cumulative_distances_degenerate():
    assert geometry.cumulative_distances(numpy.empty((0, 2))).shape == (0,)
    npt.assert_array_equal(geometry.cumulative_distances([(4, 4)]), [0])


def test_cumulative_distances_monotonic():
    rng = numpy.random.RandomState(0)
    for n in (2, 5, 50):
        distances = geometry.cumulative_distances(_random_polyline(rng, n))
        assert distances[0] == 0
        assert numpy.all(numpy.diff(distances) >= 0)


def test_project_point_to_segment_interior():
    t, point, dist = geometry.project_point_to_segment((0, 0), (10, 0), (5, 3))
    assert t == 0.5
    npt.assert_array_equal(point, (5, 0))
    assert dist == 3


def test_project_point_to_segment_clamps_to_endpoints():
    t, point, dist = geometry.project_point_to_segment((0, 0), (10, 0), (-2, 0))
    assert t == 0
    npt.assert_array_equal(point, (0, 0))
    assert dist == 2

    a, b = numpy.array([0.1, 0.7]), numpy.array([3.3, 9.1])
    t, point, dist = geometry.project_point_to_segment(a, b, b + (b - a))
    assert t == 1
    npt.assert_array_equal(point, b)
    assert dist == pytest.approx(geometry.distance(a, b))


def test_project_point_to_degenerate_segment():
    t, point, dist = geometry.project_point_to_segment((1, 1), (1, 1), (4, 5))
    assert t == 0
    npt.assert_array_equal(point, (1, 1))
    assert dist == 5


def test_project_point_onto_polyline():
    position, point, dist = geometry.project_point_onto_polyline(L_SHAPE, (12, 5))
    assert position == 15
    npt.assert_array_equal(point, (10, 5))
    assert dist == 2


def test_project_point_onto_polyline_with_precomputed_distances():
    distances = geometry.cumulative_distances(L_SHAPE)
    projection = geometry.project_point_onto_polyline(L_SHAPE, (3, -1), distances)
    assert projection.position == 3
    assert projection.distance == 1


def test_project_point_onto_polyline_first_minimum_wins():
    u_shape = [(0, 0), (0, 10), (10, 10), (10, 0)]
    # (5, 0) is equally far from the first and last segments
    position, point, dist = geometry.project_point_onto_polyline(u_shape, (5, 0))
    assert position == 0
    npt.assert_array_equal(point, (0, 0))
    assert dist == 5


def test_project_point_onto_polyline_degenerate():
    position, point, dist = geometry.project_point_onto_polyline(numpy.empty((0, 2)), (3, 4))
    assert (position, dist) == (0, 0)
    npt.assert_array_equal(point, (3, 4))

    position, point, dist = geometry.project_point_onto_polyline([(0, 0)], (3, 4))
    assert position == 0
    npt.assert_array_equal(point, (0, 0))
    assert dist == 5


def test_project_point_onto_polyline_matches_brute_force():
    rng = numpy.random.RandomState(1)
    points = _random_polyline(rng, 7)
    distances = geometry.cumulative_distances(points)
    samples_per_segment = 2001
    fractions = numpy.linspace(0, 1, samples_per_segment)[:, numpy.newaxis]
    dense = numpy.concatenate([a + fractions*(b - a) for a, b in zip(points[:-1], points[1:])])
    max_spacing = geometry.segment_lengths(points).max() / (samples_per_segment - 1)
    for query in rng.uniform(-60, 60, size=(25, 2)):
        position, point, dist = geometry.project_point_onto_polyline(points, query, distances)
        brute_force = numpy.sqrt(((dense - query)**2).sum(axis=1)).min()
        assert dist <= brute_force + 1e-9
        assert brute_force <= dist + max_spacing
        assert 0 <= position <= distances[-1]
        assert geometry.distance(point, query) == pytest.approx(dist)
        npt.assert_allclose(geometry.point_at_arc_length(points, distances, position), point, atol=1e-9)


def test_point_at_arc_length():
    distances = geometry.cumulative_distances(L_SHAPE)
    npt.assert_array_equal(geometry.point_at_arc_length(L_SHAPE, distances, 5), (5, 0))
    npt.assert_array_equal(geometry.point_at_arc_length(L_SHAPE, distances, 15), (10, 5))


def test_point_at_arc_length_at_vertex_is_exact():
    points = numpy.array([(0.1, 0.2), (3.7, 1.9), (4.4, 8.3)])
    distances = geometry.cumulative_distances(points)
    npt.assert_array_equal(geometry.point_at_arc_length(points, distances, distances[1]), points[1])


def test_point_at_arc_length_clamps():
    rng = numpy.random.RandomState(2)
    points = _random_polyline(rng, 5)
    distances = geometry.cumulative_distances(points)
    total = distances[-1]
    for target in (0, -1, -math.inf):
        npt.assert_array_equal(geometry.point_at_arc_length(points, distances, target), points[0])
    for target in (total, total + 1, math.inf):
        npt.assert_array_equal(geometry.point_at_arc_length(points, distances, target), points[-1])


def test_point_at_arc_length_degenerate():
    npt.assert_array_equal(geometry.point_at_arc_length(numpy.empty((0, 2)), numpy.zeros(0), 1), (0, 0))
    npt.assert_array_equal(geometry.point_at_arc_length([(2, 3)], [0], 1), (2, 3))


def test_interpolate_along_many_targets():
    distances = geometry.cumulative_distances(L_SHAPE)
    result = geometry.interpolate_along(L_SHAPE, distances, [-1, 0, 2.5, 10, 12.5, 20, 25])
    npt.assert_array_equal(result, [(0, 0), (0, 0), (2.5, 0), (10, 0), (10, 2.5), (10, 10), (10, 10)])
