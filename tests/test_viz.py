"""Tests for plotting helpers (Agg backend, no display)."""
import numpy as np
import pandas as pd
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from orbit_silhouettes.samples import silhouettes_to_frame  # noqa: E402
from orbit_silhouettes.silhouette import SilhouetteCurve  # noqa: E402
from orbit_silhouettes.viz import mean_silhouettes, plot_orbit, plot_silhouettes  # noqa: E402


def _frame(n_per_group=3, resolution=15):
    rng = np.random.default_rng(0)
    samples = {}
    for r in (1.9, 2.1):
        curves = []
        for _ in range(n_per_group):
            lo = rng.uniform(0.0, 0.05)
            grid = np.linspace(lo, lo + 0.2, resolution)
            curves.append(SilhouetteCurve(grid=grid, values=rng.random(resolution), n_intervals=5))
        samples[r] = curves
    return silhouettes_to_frame(samples)


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


class TestPlotSilhouettes:
    def test_one_line_per_sample(self):
        frame = _frame(n_per_group=3)
        fig = plot_silhouettes(frame, show=False)
        ax = fig.axes[0]
        assert len(ax.get_lines()) == 6
        labels = [t.get_text() for t in ax.get_legend().get_texts()]
        assert labels == ["r = 1.9", "r = 2.1"]

    def test_mean_curves_added(self):
        frame = _frame(n_per_group=2)
        fig = plot_silhouettes(frame, show=False, show_mean=True)
        assert len(fig.axes[0].get_lines()) == 4 + 2

    def test_draws_into_given_axis(self):
        fig, ax = plt.subplots()
        out = plot_silhouettes(_frame(), ax=ax, show=False)
        assert out is fig

    def test_save_path(self, tmp_path):
        path = tmp_path / "silhouettes.png"
        plot_silhouettes(_frame(), show=False, save_path=str(path))
        assert path.exists()

    def test_missing_columns(self):
        with pytest.raises(ValueError):
            plot_silhouettes(pd.DataFrame({"x": [0.0], "y": [0.0]}), show=False)

    def test_too_few_colors(self):
        with pytest.raises(ValueError):
            plot_silhouettes(_frame(), colors=["red"], show=False)


class TestMeanSilhouettes:
    def test_shape(self):
        means = mean_silhouettes(_frame(), n_grid=50)
        assert list(means.columns) == ["x", "y", "group"]
        assert len(means) == 2 * 50
        assert np.all(means["y"] >= 0.0)


class TestPlotOrbit:
    def test_scatter(self):
        pts = np.random.default_rng(1).random((100, 2))
        fig = plot_orbit(pts, show=False, title="r = 2")
        ax = fig.axes[0]
        assert len(ax.collections) == 1
        assert ax.get_xlim() == (0.0, 1.0)

    def test_bad_shape(self):
        with pytest.raises(ValueError):
            plot_orbit(np.zeros((5, 3)), show=False)
