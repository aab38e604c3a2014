# orbit_silhouettes/config.py
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Literal, Optional, Tuple

from .errors import InvalidParameterError

__all__ = [
    "EmptyPolicy",
    "OrbitConfig",
    "SilhouetteConfig",
    "check_positive_int",
    "check_positive_float",
]

EmptyPolicy = Literal["raise", "zeros"]

_EMPTY_POLICIES = ("raise", "zeros")


# ----------------------------
# validation helpers
# ----------------------------

def check_positive_int(value, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidParameterError(f"{name} must be a positive integer. Got {value!r}.")
    try:
        as_int = int(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidParameterError(f"{name} must be a positive integer. Got {value!r}.") from e
    if as_int != value or as_int <= 0:
        raise InvalidParameterError(f"{name} must be a positive integer. Got {value!r}.")
    return as_int


def check_positive_float(value, name: str) -> float:
    try:
        as_float = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(f"{name} must be a positive real number. Got {value!r}.") from e
    if not math.isfinite(as_float) or as_float <= 0.0:
        raise InvalidParameterError(f"{name} must be a positive real number. Got {value!r}.")
    return as_float


# ----------------------------
# configs
# ----------------------------

@dataclass(frozen=True)
class OrbitConfig:
    """
    Parameters of a linked twist map orbit.

    num_pts : number of recorded orbit points
    r       : driving parameter of the map
    """
    num_pts: int = 1000
    r: float = 2.0

    def __post_init__(self):
        object.__setattr__(self, "num_pts", check_positive_int(self.num_pts, "num_pts"))
        object.__setattr__(self, "r", check_positive_float(self.r, "r"))


@dataclass(frozen=True)
class SilhouetteConfig:
    """
    Parameters of the weighted silhouette transform.

    Notes
    -----
    - Each interval is weighted by ``(death - birth) ** power``.
    - ``sample_range=None`` lets the grid follow the observed interval range.
    - ``on_empty`` decides what an empty dimension-1 diagram produces:
      ``"raise"`` -> DegenerateTopologyError, ``"zeros"`` -> an all-zero curve.
    """
    resolution: int = 1000
    power: float = 1.0
    sample_range: Optional[Tuple[float, float]] = None
    on_empty: EmptyPolicy = "raise"

    def __post_init__(self):
        object.__setattr__(self, "resolution", check_positive_int(self.resolution, "resolution"))

        try:
            power = float(self.power)
        except (TypeError, ValueError) as e:
            raise InvalidParameterError(f"power must be a real number. Got {self.power!r}.") from e
        if not math.isfinite(power) or power < 0.0:
            raise InvalidParameterError(f"power must be finite and >= 0. Got {self.power!r}.")
        object.__setattr__(self, "power", power)

        if self.sample_range is not None:
            try:
                lo, hi = (float(v) for v in self.sample_range)
            except (TypeError, ValueError) as e:
                raise InvalidParameterError(
                    f"sample_range must be a pair (lo, hi). Got {self.sample_range!r}."
                ) from e
            if not (math.isfinite(lo) and math.isfinite(hi)) or lo >= hi:
                raise InvalidParameterError(
                    f"sample_range must satisfy lo < hi with finite ends. Got {self.sample_range!r}."
                )
            object.__setattr__(self, "sample_range", (lo, hi))

        if self.on_empty not in _EMPTY_POLICIES:
            raise InvalidParameterError(
                f"on_empty must be one of {_EMPTY_POLICIES}. Got {self.on_empty!r}."
            )

    def with_updates(self, **changes) -> "SilhouetteConfig":
        return replace(self, **changes)
