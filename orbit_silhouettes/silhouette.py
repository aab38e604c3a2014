# orbit_silhouettes/silhouette.py
from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Iterator, List, Optional

import numpy as np

from .config import SilhouetteConfig
from .errors import DegenerateTopologyError, PersistenceComputationError
from .persistence import finite_intervals

__all__ = [
    "SilhouetteCurve",
    "weighted_silhouette",
    "power_weight",
]

logger = logging.getLogger(__name__)

_DEFAULT_EMPTY_RANGE = (0.0, 1.0)


def power_weight(power: float):
    """Weight function (birth, death) -> (death - birth) ** power."""
    p = float(power)

    def w(interval) -> float:
        return float(np.power(interval[1] - interval[0], p))

    return w


# ----------------------------
# Result container
# ----------------------------

@dataclass(frozen=True, eq=False)
class SilhouetteCurve:
    """
    A weighted silhouette sampled on a uniform grid.

    Unpacks as a pair::

        grid, values = curve
    """
    grid: np.ndarray
    values: np.ndarray
    n_intervals: int
    power: float = 1.0
    r: Optional[float] = None
    num_pts: Optional[int] = None

    def __iter__(self) -> Iterator[np.ndarray]:
        yield self.grid
        yield self.values

    @property
    def resolution(self) -> int:
        return int(self.grid.shape[0])

    @property
    def is_degenerate(self) -> bool:
        return self.n_intervals == 0

    def to_text(self, *, decimals: int = 4) -> str:
        k = int(decimals)
        lines: List[str] = []
        lines.append("Weighted Silhouette")
        if self.r is not None:
            lines.append(f"  r = {self.r:g}, num_pts = {self.num_pts}")
        lines.append(f"  H1 intervals = {self.n_intervals}, weight power = {self.power:g}")
        lines.append(
            f"  grid: {self.resolution} samples on "
            f"[{self.grid[0]:.{k}f}, {self.grid[-1]:.{k}f}]"
        )
        lines.append(f"  max value = {float(np.max(self.values)):.{k}f}")
        if self.is_degenerate:
            lines.append("")
            lines.append("  WARNING: no dimension-1 intervals; silhouette is identically zero.")
        return "\n".join(lines)


# ----------------------------
# Transform
# ----------------------------

def weighted_silhouette(
    intervals,
    config: Optional[SilhouetteConfig] = None,
    *,
    r: Optional[float] = None,
    num_pts: Optional[int] = None,
) -> SilhouetteCurve:
    """
    Weighted silhouette of one persistence diagram.

    Each interval (b, d) contributes the tent function max(0, min(t - b, d - t)),
    weighted by (d - b) ** power; the weighted tents are averaged with the
    weights normalized to sum to one. Evaluation is delegated to
    ``gudhi.representations.Silhouette``, which works in the rotated diagram
    and so returns that average scaled by ``sqrt(2)``. The factor is kept.

    Parameters
    ----------
    intervals : (k, 2) array-like
        Persistence intervals. Infinite and zero-length rows are dropped.
    config : SilhouetteConfig, optional
        Resolution, weight power, sample range and empty-diagram policy.
    r, num_pts : optional metadata stored on the returned curve.

    Returns
    -------
    SilhouetteCurve
    """
    config = SilhouetteConfig() if config is None else config
    diagram = finite_intervals(intervals)
    k = int(diagram.shape[0])

    if k == 0:
        return _empty_silhouette(config, r=r, num_pts=num_pts)

    try:
        from gudhi.representations import Silhouette  # type: ignore
    except Exception as e:
        raise ImportError("weighted_silhouette requires gudhi (with scikit-learn) to be installed.") from e

    sample_range = [np.nan, np.nan] if config.sample_range is None else list(config.sample_range)

    try:
        sh = Silhouette(
            resolution=config.resolution,
            weight=power_weight(config.power),
            sample_range=sample_range,
        )
        values = np.asarray(sh.fit_transform([diagram])[0], dtype=float)
        grid = np.asarray(sh.grid_, dtype=float)
    except Exception as e:
        raise PersistenceComputationError(
            f"Silhouette transform failed on {k} intervals: {type(e).__name__}: {e}"
        ) from e

    if grid.shape != (config.resolution,) or values.shape != (config.resolution,):
        raise PersistenceComputationError(
            f"Silhouette returned grid {grid.shape} and values {values.shape}, "
            f"expected ({config.resolution},)."
        )

    # tents are >= 0; clip round-off
    values = np.maximum(values, 0.0)

    logger.debug("weighted_silhouette: %d intervals on [%g, %g]", k, grid[0], grid[-1])
    return SilhouetteCurve(
        grid=grid,
        values=values,
        n_intervals=k,
        power=config.power,
        r=r,
        num_pts=num_pts,
    )


def _empty_silhouette(
    config: SilhouetteConfig,
    *,
    r: Optional[float],
    num_pts: Optional[int],
) -> SilhouetteCurve:
    if config.on_empty == "raise":
        where = "" if r is None else f" (r={r:g}, num_pts={num_pts})"
        raise DegenerateTopologyError(
            f"No dimension-1 persistence intervals{where}; silhouette is undefined. "
            "Use on_empty='zeros' to get an all-zero curve instead.",
            num_pts=num_pts,
            r=r,
        )

    lo, hi = _DEFAULT_EMPTY_RANGE if config.sample_range is None else config.sample_range
    warnings.warn(
        "Empty persistence diagram: returning an all-zero silhouette.",
        RuntimeWarning,
        stacklevel=3,
    )
    return SilhouetteCurve(
        grid=np.linspace(lo, hi, config.resolution),
        values=np.zeros(config.resolution, dtype=float),
        n_intervals=0,
        power=config.power,
        r=r,
        num_pts=num_pts,
    )
