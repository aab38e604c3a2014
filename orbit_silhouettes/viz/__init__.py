"""
Visualization utilities for orbit_silhouettes.

Notes
-----
matplotlib is imported inside the plotting functions, so importing this module
only needs numpy and pandas.
"""

from __future__ import annotations

# Keep submodules importable as namespaces
from . import (
    orbit_vis,
    silhouette_vis,
)

from .orbit_vis import (
    plot_orbit,
)

from .silhouette_vis import (
    mean_silhouettes,
    plot_silhouettes,
)

__all__ = [
    # namespaces
    "orbit_vis",
    "silhouette_vis",

    # plotting
    "plot_orbit",
    "plot_silhouettes",
    "mean_silhouettes",
]
