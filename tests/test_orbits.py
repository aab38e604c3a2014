"""Tests for the linked twist map orbit sampler."""
import numpy as np
import pytest

from orbit_silhouettes.errors import InvalidParameterError
from orbit_silhouettes.synthetic import linked_twist_step, sample_orbit, sample_orbit_dataset


class TestSampleOrbit:
    def test_shape_and_range(self):
        X = sample_orbit(num_pts=500, r=2.0, rng=0)
        assert X.shape == (500, 2)
        assert np.all(X >= 0.0)
        assert np.all(X < 1.0)

    def test_single_point(self):
        X = sample_orbit(num_pts=1, r=2.0, rng=0)
        assert X.shape == (1, 2)

    def test_initial_point_is_first_row(self):
        X = sample_orbit(num_pts=10, r=2.0, initial_point=(0.25, 0.75))
        assert X[0, 0] == 0.25
        assert X[0, 1] == 0.75

    def test_recurrence_uses_updated_x(self):
        r = 3.3
        x, y = 0.1, 0.6
        X = sample_orbit(num_pts=4, r=r, initial_point=(x, y))
        for k in range(1, 4):
            x = (x + r * y * (1.0 - y)) % 1.0
            y = (y + r * x * (1.0 - x)) % 1.0
            assert X[k, 0] == x
            assert X[k, 1] == y

    def test_step_matches_orbit(self):
        X = sample_orbit(num_pts=2, r=2.5, initial_point=(0.3, 0.4))
        x1, y1 = linked_twist_step(0.3, 0.4, 2.5)
        assert (X[1, 0], X[1, 1]) == (x1, y1)

    def test_same_seed_same_orbit(self):
        a = sample_orbit(num_pts=200, r=2.1, rng=123)
        b = sample_orbit(num_pts=200, r=2.1, rng=123)
        np.testing.assert_array_equal(a, b)

    def test_generator_is_consumed(self):
        rng = np.random.default_rng(5)
        a = sample_orbit(num_pts=50, r=2.1, rng=rng)
        b = sample_orbit(num_pts=50, r=2.1, rng=rng)
        assert not np.array_equal(a, b)

    @pytest.mark.parametrize("num_pts", [0, -3, 2.5])
    def test_bad_num_pts(self, num_pts):
        with pytest.raises(InvalidParameterError):
            sample_orbit(num_pts=num_pts, r=2.0)

    @pytest.mark.parametrize("r", [0.0, -1.0, float("nan"), float("inf")])
    def test_bad_r(self, r):
        with pytest.raises(ValueError):
            sample_orbit(num_pts=10, r=r)

    def test_initial_point_outside_unit_square(self):
        with pytest.raises(InvalidParameterError):
            sample_orbit(num_pts=10, r=2.0, initial_point=(1.0, 0.5))


class TestOrbitDataset:
    def test_labels_follow_r_values(self):
        clouds, labels = sample_orbit_dataset(r_values=(2.5, 4.3), n_per_r=3, num_pts=50, rng=1)
        assert len(clouds) == 6
        np.testing.assert_array_equal(labels, [2.5, 2.5, 2.5, 4.3, 4.3, 4.3])
        assert all(c.shape == (50, 2) for c in clouds)

    def test_orbits_are_independent(self):
        clouds, _ = sample_orbit_dataset(r_values=(2.5,), n_per_r=2, num_pts=20, rng=1)
        assert not np.array_equal(clouds[0], clouds[1])

    def test_reproducible(self):
        a, _ = sample_orbit_dataset(r_values=(3.5,), n_per_r=2, num_pts=20, rng=9)
        b, _ = sample_orbit_dataset(r_values=(3.5,), n_per_r=2, num_pts=20, rng=9)
        for x, y in zip(a, b):
            np.testing.assert_array_equal(x, y)

    def test_empty_r_values(self):
        with pytest.raises(InvalidParameterError):
            sample_orbit_dataset(r_values=(), n_per_r=2)
