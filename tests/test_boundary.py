"""Tests for the three-ellipsoid brain boundary."""

import numpy as np
import pytest

from boundary import BrainBoundary, Ellipsoid


class TestEllipsoid:

    @pytest.fixture
    def ellipsoid(self):
        return Ellipsoid('test', (1.0, 0.0, 0.0), (2.0, 1.0, 0.5))

    def test_center_is_inside(self, ellipsoid):
        assert ellipsoid.contains((1.0, 0.0, 0.0))
        assert ellipsoid.normalized_distance((1.0, 0.0, 0.0)) == pytest.approx(0.0)

    def test_surface_points_count_as_inside(self, ellipsoid):
        assert ellipsoid.normalized_distance((3.0, 0.0, 0.0)) == pytest.approx(1.0)
        assert ellipsoid.contains((1.0, 0.0, 0.5))

    def test_semi_axes_are_respected(self, ellipsoid):
        # Inside along x but outside along the short z axis
        assert ellipsoid.contains((2.5, 0.0, 0.0))
        assert not ellipsoid.contains((1.0, 0.0, 0.6))

    def test_vectorized_distance(self, ellipsoid):
        points = np.array([[1.0, 0.0, 0.0], [3.0, 0.0, 0.0], [1.0, 2.0, 0.0]])
        np.testing.assert_allclose(ellipsoid.normalized_distance(points), [0.0, 1.0, 4.0])


class TestBrainBoundary:

    def test_requires_ellipsoids(self):
        with pytest.raises(ValueError):
            BrainBoundary([])

    def test_union_of_default_lobes(self, config):
        boundary = config.boundary()
        # Hemisphere centers and the bridge center are inside
        assert boundary.contains((-1.0, 1.0, 0.0))
        assert boundary.contains((1.0, 1.0, 0.0))
        assert boundary.contains((0.0, 1.0, 0.0))
        # Far outside every lobe
        assert not boundary.contains((0.0, 5.0, 0.0))
        assert not boundary.contains((3.0, 1.0, 0.0))

    def test_occipital_center_lies_outside(self, config):
        # The back region is centered behind the boundary; only part of it is usable
        assert not config.boundary().contains((0.0, 0.85, -1.0))

    def test_contains_many_matches_contains(self, config, rng):
        boundary = config.boundary()
        points = rng.uniform(-3, 3, size=(200, 3))
        expected = [boundary.contains(p) for p in points]
        np.testing.assert_array_equal(boundary.contains_many(points), expected)

    def test_bounding_box(self, config):
        low, high = config.boundary().bounding_box()
        np.testing.assert_allclose(low, [-2.5, -0.3, -1.0])
        np.testing.assert_allclose(high, [2.5, 2.3, 1.0])
