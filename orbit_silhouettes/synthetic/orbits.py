# synthetic/orbits.py
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ..config import check_positive_float, check_positive_int
from ..errors import InvalidParameterError

__all__ = [
    "RngLike",
    "linked_twist_step",
    "sample_orbit",
    "sample_orbit_dataset",
]

RngLike = Union[None, int, np.random.SeedSequence, np.random.Generator]


def linked_twist_step(x: float, y: float, r: float) -> Tuple[float, float]:
    """
    One step of the linked twist map on the unit torus.

        x' = (x + r y (1 - y)) mod 1
        y' = (y + r x' (1 - x')) mod 1

    The y update uses the new x.
    """
    x = (x + r * y * (1.0 - y)) % 1.0
    y = (y + r * x * (1.0 - x)) % 1.0
    return x, y


# ----------------------------
# Orbit point clouds
# ----------------------------

def sample_orbit(
    num_pts: int = 1000,
    r: float = 2.0,
    *,
    rng: RngLike = None,
    initial_point: Optional[Sequence[float]] = None,
) -> np.ndarray:
    """
    Sample one orbit of the linked twist map.

    A starting point is drawn uniformly from [0,1)^2 (unless ``initial_point``
    is given), recorded, and then advanced by :func:`linked_twist_step`; this
    repeats ``num_pts`` times.

    Parameters
    ----------
    num_pts : int
        Number of recorded points.
    r : float
        Driving parameter of the map. Small r gives quasi-periodic orbits with
        visible holes, large r gives orbits that fill the torus.
    rng : None | int | SeedSequence | Generator
        Source of randomness for the starting point. Passed through
        ``np.random.default_rng`` so each call can own its generator.
    initial_point : optional (x0, y0) in [0,1)^2

    Returns
    -------
    points : (num_pts, 2) array with entries in [0, 1)
    """
    num_pts = check_positive_int(num_pts, "num_pts")
    r = check_positive_float(r, "r")

    if initial_point is None:
        rng = np.random.default_rng(rng)
        x, y = (float(v) for v in rng.random(2))
    else:
        start = np.asarray(initial_point, dtype=float).reshape(-1)
        if start.shape != (2,):
            raise InvalidParameterError(f"initial_point must have 2 entries. Got shape {start.shape}.")
        if np.any(start < 0.0) or np.any(start >= 1.0):
            raise InvalidParameterError(f"initial_point must lie in [0,1)^2. Got {start.tolist()}.")
        x, y = float(start[0]), float(start[1])

    points = np.empty((num_pts, 2), dtype=float)
    for idx in range(num_pts):
        points[idx, 0] = x
        points[idx, 1] = y
        x, y = linked_twist_step(x, y, r)

    return points


def sample_orbit_dataset(
    r_values: Sequence[float] = (2.5, 3.5, 4.0, 4.1, 4.3),
    n_per_r: int = 10,
    num_pts: int = 1000,
    *,
    rng: RngLike = None,
) -> Tuple[List[np.ndarray], np.ndarray]:
    """
    Labelled orbit benchmark: ``n_per_r`` independent orbits for each r.

    Every orbit gets its own child generator spawned from ``rng``.

    Returns
    -------
    clouds : list of (num_pts, 2) arrays, grouped by r in input order
    labels : (len(clouds),) array of the r value used for each cloud
    """
    n_per_r = check_positive_int(n_per_r, "n_per_r")
    r_list = [check_positive_float(r, "r") for r in r_values]
    if len(r_list) == 0:
        raise InvalidParameterError("r_values must be non-empty.")

    children = np.random.default_rng(rng).spawn(len(r_list) * n_per_r)

    clouds: List[np.ndarray] = []
    labels: List[float] = []
    for i, r in enumerate(r_list):
        for j in range(n_per_r):
            child = children[i * n_per_r + j]
            clouds.append(sample_orbit(num_pts, r, rng=child))
            labels.append(r)

    return clouds, np.asarray(labels, dtype=float)
