from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

__all__ = ["plot_orbit"]


def plot_orbit(
    points: np.ndarray,
    *,
    ax=None,
    s: float = 1.0,
    color: str = "black",
    alpha: float = 0.8,
    title: Optional[str] = None,
    figsize: Tuple[float, float] = (5, 5),
    dpi: int = 150,
    save_path: Optional[str] = None,
    show: bool = True,
):
    """Scatter an orbit point cloud on the unit square."""
    import matplotlib.pyplot as plt

    points = np.asarray(points, dtype=float)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"points must have shape (n, 2). Got {points.shape}.")

    created_fig = False
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize, dpi=int(dpi))
        created_fig = True
    else:
        fig = ax.figure

    ax.scatter(points[:, 0], points[:, 1], s=float(s), color=color, alpha=float(alpha), linewidths=0)
    ax.set_xlim(0.0, 1.0)
    ax.set_ylim(0.0, 1.0)
    ax.set_aspect("equal")
    if title:
        ax.set_title(title)

    if save_path is not None:
        fig.savefig(save_path, dpi=300, bbox_inches="tight")

    if created_fig:
        plt.tight_layout()
        if show:
            plt.show()

    return fig
