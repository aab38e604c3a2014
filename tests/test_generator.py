"""Tests for the orbit -> persistence -> silhouette pipeline."""
import numpy as np
import pytest

from orbit_silhouettes import (
    DegenerateTopologyError,
    OrbitConfig,
    OrbitSilhouetteGenerator,
    SilhouetteConfig,
    orbit_silhouette,
)

gudhi = pytest.importorskip("gudhi")


class TestOrbitSilhouette:
    @pytest.mark.parametrize("r", [1.9, 2.1])
    def test_default_sizes(self, r):
        grid, values = orbit_silhouette(num_pts=1000, resolution=1000, r=r, rng=11)
        assert len(grid) == 1000
        assert len(values) == 1000

    def test_grid_strictly_increasing_and_values_nonnegative(self):
        curve = orbit_silhouette(num_pts=400, resolution=250, r=4.3, rng=3)
        assert np.all(np.diff(curve.grid) > 0)
        assert np.all(curve.values >= 0.0)
        assert curve.n_intervals > 0
        assert curve.r == 4.3
        assert curve.num_pts == 400

    def test_same_seed_is_bit_identical(self):
        a = orbit_silhouette(num_pts=1000, resolution=1000, r=2.1, rng=2024)
        b = orbit_silhouette(num_pts=1000, resolution=1000, r=2.1, rng=2024)
        np.testing.assert_array_equal(a.grid, b.grid)
        np.testing.assert_array_equal(a.values, b.values)

    def test_different_seeds_differ(self):
        a = orbit_silhouette(num_pts=300, resolution=100, r=4.3, rng=1)
        b = orbit_silhouette(num_pts=300, resolution=100, r=4.3, rng=2)
        assert not np.array_equal(a.values, b.values)

    @pytest.mark.parametrize("num_pts", [1, 2])
    def test_tiny_orbits_raise_by_default(self, num_pts):
        with pytest.raises(DegenerateTopologyError):
            orbit_silhouette(num_pts=num_pts, resolution=50, r=2.0, rng=0)

    @pytest.mark.parametrize("num_pts", [1, 2])
    def test_tiny_orbits_zero_policy(self, num_pts):
        with pytest.warns(RuntimeWarning):
            grid, values = orbit_silhouette(num_pts=num_pts, resolution=50, r=2.0, rng=0, on_empty="zeros")
        assert len(grid) == 50
        np.testing.assert_array_equal(values, np.zeros(50))

    def test_invalid_resolution(self):
        with pytest.raises(ValueError):
            orbit_silhouette(num_pts=100, resolution=0)


class TestGenerator:
    def test_details_are_consistent(self):
        gen = OrbitSilhouetteGenerator(
            orbit=OrbitConfig(num_pts=300, r=4.3),
            silhouette=SilhouetteConfig(resolution=64),
        )
        sample = gen.generate_with_details(rng=8)
        assert sample.points.shape == (300, 2)
        assert np.all((sample.points >= 0.0) & (sample.points < 1.0))
        assert sample.persistence.n_points == 300
        assert sample.curve.n_intervals == sample.persistence.n_intervals(1)
        assert "Weighted Silhouette" in sample.to_text()
        assert sample == sample
        assert sample != gen.generate_with_details(rng=8)

    def test_generate_matches_functional_form(self):
        gen = OrbitSilhouetteGenerator(
            orbit=OrbitConfig(num_pts=300, r=4.3),
            silhouette=SilhouetteConfig(resolution=64),
        )
        a = gen.generate(rng=np.random.default_rng(4))
        b = orbit_silhouette(num_pts=300, resolution=64, r=4.3, rng=np.random.default_rng(4))
        np.testing.assert_array_equal(a.values, b.values)

    def test_power_changes_weights(self):
        base = dict(num_pts=300, resolution=64, r=4.3, rng=4)
        a = orbit_silhouette(power=1.0, **base)
        b = orbit_silhouette(power=2.0, **base)
        np.testing.assert_array_equal(a.grid, b.grid)
        assert not np.allclose(a.values, b.values)
