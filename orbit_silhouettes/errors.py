# orbit_silhouettes/errors.py
from __future__ import annotations

from typing import Optional

__all__ = [
    "OrbitSilhouetteError",
    "InvalidParameterError",
    "DegenerateTopologyError",
    "PersistenceComputationError",
]


class OrbitSilhouetteError(Exception):
    """Base class for all errors raised by orbit_silhouettes."""


class InvalidParameterError(OrbitSilhouetteError, ValueError):
    """A size, rate, or shape argument is out of range."""


class DegenerateTopologyError(OrbitSilhouetteError):
    """
    The persistence diagram has no dimension-1 intervals, so the silhouette is undefined.

    Raised only under the ``on_empty="raise"`` policy.
    """

    def __init__(
        self,
        message: str,
        *,
        num_pts: Optional[int] = None,
        r: Optional[float] = None,
    ):
        super().__init__(message)
        self.num_pts = num_pts
        self.r = r


class PersistenceComputationError(OrbitSilhouetteError, RuntimeError):
    """The alpha complex / persistence engine failed."""
