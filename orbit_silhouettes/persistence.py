# orbit_silhouettes/persistence.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np

from .errors import InvalidParameterError, PersistenceComputationError

__all__ = [
    "PersistenceResult",
    "alpha_persistence",
    "finite_intervals",
]

logger = logging.getLogger(__name__)


def _empty_intervals() -> np.ndarray:
    return np.zeros((0, 2), dtype=float)


def finite_intervals(intervals) -> np.ndarray:
    """
    Keep only rows (birth, death) with finite ends and death > birth.

    Accepts anything array-like of shape (k, 2), including an empty list.
    """
    arr = np.asarray(intervals, dtype=float)
    if arr.size == 0:
        return _empty_intervals()
    arr = arr.reshape(-1, 2)
    keep = np.all(np.isfinite(arr), axis=1) & (arr[:, 1] > arr[:, 0])
    return arr[keep]


# ----------------------------
# Result container
# ----------------------------

@dataclass(frozen=True, eq=False)
class PersistenceResult:
    """
    Finite persistence intervals of a point cloud, per homological dimension.

    Filtration values are those of the alpha complex (squared radii).
    """
    n_points: int
    max_dimension: int
    by_dimension: Dict[int, np.ndarray] = field(default_factory=dict)

    def intervals(self, dim: int) -> np.ndarray:
        return self.by_dimension.get(int(dim), _empty_intervals())

    def n_intervals(self, dim: int) -> int:
        return int(self.intervals(dim).shape[0])

    def total_persistence(self, dim: int, power: float = 1.0) -> float:
        iv = self.intervals(dim)
        if iv.shape[0] == 0:
            return 0.0
        return float(np.sum((iv[:, 1] - iv[:, 0]) ** float(power)))

    def to_text(self) -> str:
        lines: List[str] = []
        lines.append("Alpha Complex Persistence")
        lines.append(f"  n_points = {self.n_points}")
        for d in range(self.max_dimension + 1):
            lines.append(
                f"    H{d}: {self.n_intervals(d)} finite intervals, "
                f"total persistence = {self.total_persistence(d):.4g}"
            )
        return "\n".join(lines)


# ----------------------------
# Engine
# ----------------------------

def alpha_persistence(points: np.ndarray, *, max_dimension: int = 1) -> PersistenceResult:
    """
    Alpha complex persistent homology of a Euclidean point cloud.

    Parameters
    ----------
    points : (n, d) array
        Finite coordinates.
    max_dimension : int
        Highest homological dimension to report.

    Returns
    -------
    PersistenceResult
        Finite (birth, death) intervals for dimensions 0..max_dimension.

    Notes
    -----
    - Fewer than three points cannot bound a loop, so the complex is not built
      in that case; only the merge of two points is reported (in H0).
    - Any failure inside gudhi is re-raised as PersistenceComputationError.
    """
    X = np.asarray(points, dtype=float)
    if X.ndim != 2:
        raise InvalidParameterError(f"points must be 2D (n, d). Got shape {X.shape}.")
    if not np.all(np.isfinite(X)):
        raise InvalidParameterError("points must be finite.")
    max_dimension = int(max_dimension)
    if max_dimension < 0:
        raise InvalidParameterError(f"max_dimension must be >= 0. Got {max_dimension}.")

    n = int(X.shape[0])
    if n < 3:
        logger.debug("alpha_persistence: %d points, skipping complex construction", n)
        by_dimension: Dict[int, np.ndarray] = {}
        if n == 2:
            # the single edge enters at its squared half-length
            half_sq = float(np.sum((X[1] - X[0]) ** 2)) / 4.0
            by_dimension[0] = finite_intervals([[0.0, half_sq]])
        return PersistenceResult(n_points=n, max_dimension=max_dimension, by_dimension=by_dimension)

    try:
        import gudhi as gd  # type: ignore
    except Exception as e:
        raise ImportError("alpha_persistence requires gudhi to be installed.") from e

    logger.debug("alpha_persistence: building alpha complex on shape=%s", X.shape)
    try:
        st = gd.AlphaComplex(points=X).create_simplex_tree()
        st.compute_persistence()
        by_dimension = {
            d: finite_intervals(st.persistence_intervals_in_dimension(d))
            for d in range(max_dimension + 1)
        }
    except Exception as e:
        raise PersistenceComputationError(
            f"Alpha complex persistence failed on {n} points: {type(e).__name__}: {e}"
        ) from e

    logger.debug(
        "alpha_persistence: interval counts %s",
        {d: int(iv.shape[0]) for d, iv in by_dimension.items()},
    )
    return PersistenceResult(n_points=n, max_dimension=max_dimension, by_dimension=by_dimension)
