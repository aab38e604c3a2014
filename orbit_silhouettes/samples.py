# orbit_silhouettes/samples.py
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .config import EmptyPolicy, OrbitConfig, SilhouetteConfig, check_positive_float, check_positive_int
from .errors import InvalidParameterError
from .generator import OrbitSilhouetteGenerator
from .silhouette import SilhouetteCurve
from .utils.status_utils import _status, _status_clear

__all__ = [
    "FRAME_COLUMNS",
    "sample_silhouettes",
    "prepend_origin",
    "silhouettes_to_frame",
]

FRAME_COLUMNS = ("id", "x", "y", "group")


# ----------------------------
# Batch sampling
# ----------------------------

def sample_silhouettes(
    r_values: Sequence[float] = (1.9, 2.1),
    n_samples: int = 10,
    *,
    num_pts: int = 1000,
    resolution: int = 1000,
    seed: Optional[int] = None,
    n_jobs: int = 1,
    power: float = 1.0,
    sample_range=None,
    on_empty: EmptyPolicy = "raise",
    verbose: bool = False,
) -> Dict[float, List[SilhouetteCurve]]:
    """
    Generate ``n_samples`` independent orbit silhouettes for each r.

    Randomness is isolated per sample: ``SeedSequence(seed)`` is spawned into
    one child stream per (r, sample) pair, so the output for a given seed does
    not depend on ``n_jobs`` or on execution order.

    Parameters
    ----------
    r_values : sequence of float
        Driving parameters; duplicates are rejected.
    n_samples : int
        Samples per r.
    num_pts, resolution, power, sample_range, on_empty :
        Forwarded to :class:`OrbitSilhouetteGenerator`.
    seed : optional int
        Root seed. ``None`` draws fresh entropy.
    n_jobs : int
        Worker threads. 1 runs inline.
    verbose : bool
        Print a one-line progress status.

    Returns
    -------
    dict r -> list of SilhouetteCurve (in sample order)
    """
    n_samples = check_positive_int(n_samples, "n_samples")
    n_jobs = check_positive_int(n_jobs, "n_jobs")
    r_list = [check_positive_float(r, "r") for r in r_values]
    if len(r_list) == 0:
        raise InvalidParameterError("r_values must be non-empty.")
    if len(set(r_list)) != len(r_list):
        raise InvalidParameterError(f"r_values must be distinct. Got {r_list}.")

    sil_config = SilhouetteConfig(
        resolution=resolution,
        power=power,
        sample_range=sample_range,
        on_empty=on_empty,
    )
    generators = [
        OrbitSilhouetteGenerator(orbit=OrbitConfig(num_pts=num_pts, r=r), silhouette=sil_config)
        for r in r_list
    ]

    tasks: List[Tuple[int, np.random.SeedSequence]] = []
    children = np.random.SeedSequence(seed).spawn(len(r_list) * n_samples)
    for i in range(len(r_list)):
        for j in range(n_samples):
            tasks.append((i, children[i * n_samples + j]))

    total = len(tasks)

    def run(task: Tuple[int, np.random.SeedSequence]) -> SilhouetteCurve:
        i, child = task
        return generators[i].generate(rng=np.random.default_rng(child))

    curves: List[SilhouetteCurve] = []
    if n_jobs == 1:
        for t, task in enumerate(tasks):
            if verbose:
                _status(f"Sampling silhouette {t + 1}/{total} (r={r_list[task[0]]:g})...")
            curves.append(run(task))
    else:
        with ThreadPoolExecutor(max_workers=n_jobs) as pool:
            for t, curve in enumerate(pool.map(run, tasks)):
                if verbose:
                    _status(f"Collected silhouette {t + 1}/{total}...")
                curves.append(curve)

    if verbose:
        _status_clear()

    return {
        r: curves[i * n_samples:(i + 1) * n_samples]
        for i, r in enumerate(r_list)
    }


# ----------------------------
# Reshaping
# ----------------------------

def prepend_origin(curve) -> Tuple[np.ndarray, np.ndarray]:
    """
    Prefix a (grid, values) pair with the point (0, 0).

    Anchors every curve at the origin when families are drawn together.
    A grid that already starts at 0 (e.g. a pinned ``sample_range`` with
    ``lo == 0``) is returned unchanged.
    """
    grid, values = curve
    grid = np.asarray(grid, dtype=float).reshape(-1)
    values = np.asarray(values, dtype=float).reshape(-1)
    if grid.shape != values.shape:
        raise InvalidParameterError(
            f"grid and values must have equal length. Got {grid.shape} and {values.shape}."
        )
    if grid.size and grid[0] == 0.0:
        return grid, values
    return np.concatenate([[0.0], grid]), np.concatenate([[0.0], values])


def silhouettes_to_frame(
    samples: Mapping[float, Sequence[SilhouetteCurve]],
    *,
    with_origin: bool = True,
    label_fmt: str = "r = {r:g}",
) -> pd.DataFrame:
    """
    Long table of silhouette samples, one row per grid point.

    Columns
    -------
    id    : sample id, unique across groups, numbered from 1 in input order
    x     : grid abscissa
    y     : silhouette value
    group : label built from ``label_fmt.format(r=r)``
    """
    ids: List[np.ndarray] = []
    xs: List[np.ndarray] = []
    ys: List[np.ndarray] = []
    groups: List[np.ndarray] = []

    next_id = 1
    for r, curves in samples.items():
        label = label_fmt.format(r=r)
        for curve in curves:
            if with_origin:
                x, y = prepend_origin(curve)
            else:
                x, y = (np.asarray(a, dtype=float).reshape(-1) for a in curve)
            n = int(x.shape[0])
            ids.append(np.full(n, next_id, dtype=int))
            xs.append(x)
            ys.append(y)
            groups.append(np.full(n, label, dtype=object))
            next_id += 1

    if not ids:
        return pd.DataFrame({c: pd.Series(dtype=t) for c, t in zip(FRAME_COLUMNS, (int, float, float, object))})

    return pd.DataFrame(
        {
            "id": np.concatenate(ids),
            "x": np.concatenate(xs),
            "y": np.concatenate(ys),
            "group": np.concatenate(groups),
        },
        columns=list(FRAME_COLUMNS),
    )
