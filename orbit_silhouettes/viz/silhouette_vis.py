from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..samples import FRAME_COLUMNS

__all__ = ["plot_silhouettes", "mean_silhouettes"]


def mean_silhouettes(frame: pd.DataFrame, *, n_grid: int = 200) -> pd.DataFrame:
    """
    Per-group mean curve of a long silhouette table.

    Sample grids differ (each follows its own interval range), so every sample
    is linearly interpolated onto a shared grid spanning the group's x range,
    with zero outside the sample's own support.

    Returns a long table with columns ``x, y, group``.
    """
    _check_frame(frame)
    n_grid = int(n_grid)
    if n_grid < 2:
        raise ValueError(f"n_grid must be >= 2. Got {n_grid}.")

    pieces = []
    for group, gdf in frame.groupby("group", sort=False):
        xs = np.linspace(float(gdf["x"].min()), float(gdf["x"].max()), n_grid)
        curves = []
        for _, sdf in gdf.groupby("id", sort=False):
            curves.append(
                np.interp(xs, sdf["x"].to_numpy(), sdf["y"].to_numpy(), left=0.0, right=0.0)
            )
        pieces.append(
            pd.DataFrame({"x": xs, "y": np.mean(curves, axis=0), "group": group})
        )

    if not pieces:
        return pd.DataFrame({"x": pd.Series(dtype=float), "y": pd.Series(dtype=float), "group": pd.Series(dtype=object)})
    return pd.concat(pieces, ignore_index=True)


def plot_silhouettes(
    frame: pd.DataFrame,
    *,
    ax=None,
    colors: Optional[Sequence[str]] = None,
    alpha: float = 0.35,
    linewidth: float = 0.8,
    show_mean: bool = False,
    mean_linewidth: float = 2.0,
    title: Optional[str] = "Orbit silhouettes (H1)",
    figsize: Tuple[float, float] = (8, 5),
    dpi: int = 150,
    save_path: Optional[str] = None,
    show: bool = True,
):
    """
    Layered line chart of a long silhouette table.

    One thin line per sample ``id``, colored by ``group``; optionally a thick
    per-group mean drawn on top.

    Subplot usage
    -------------
    If `ax` is provided, the function draws into it and will not create a new
    figure (nor call ``plt.show``).
    """
    import matplotlib.pyplot as plt

    _check_frame(frame)

    created_fig = False
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize, dpi=int(dpi))
        created_fig = True
    else:
        fig = ax.figure

    groups = list(pd.unique(frame["group"]))
    if colors is None:
        cycle = plt.rcParams["axes.prop_cycle"].by_key().get("color", ["C0"])
        colors = [cycle[i % len(cycle)] for i in range(len(groups))]
    elif len(colors) < len(groups):
        raise ValueError(f"Need {len(groups)} colors, got {len(colors)}.")
    color_of = dict(zip(groups, colors))

    # ---- samples ----
    for group in groups:
        gdf = frame[frame["group"] == group]
        first = True
        for _, sdf in gdf.groupby("id", sort=False):
            ax.plot(
                sdf["x"].to_numpy(),
                sdf["y"].to_numpy(),
                color=color_of[group],
                alpha=float(alpha),
                linewidth=float(linewidth),
                label=str(group) if first else None,
            )
            first = False

    # ---- means ----
    if show_mean and len(frame) > 0:
        means = mean_silhouettes(frame)
        for group, mdf in means.groupby("group", sort=False):
            ax.plot(
                mdf["x"].to_numpy(),
                mdf["y"].to_numpy(),
                color=color_of[group],
                linewidth=float(mean_linewidth),
                label=f"{group} (mean)",
            )

    ax.set_xlabel("filtration value")
    ax.set_ylabel("silhouette")
    if title:
        ax.set_title(title)
    if groups:
        ax.legend(loc="upper right", frameon=False)

    # ---- save / show ----
    if save_path is not None:
        fig.savefig(save_path, dpi=300, bbox_inches="tight")

    if created_fig:
        plt.tight_layout()
        if show:
            plt.show()

    return fig


def _check_frame(frame: pd.DataFrame) -> None:
    missing = set(FRAME_COLUMNS) - set(frame.columns)
    if missing:
        raise ValueError(f"frame missing columns: {sorted(missing)}")
