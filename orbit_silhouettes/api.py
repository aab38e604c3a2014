from __future__ import annotations

"""
Public API re-exports for orbit_silhouettes.

Import style:
    from orbit_silhouettes.api import orbit_silhouette, sample_silhouettes, silhouettes_to_frame, ...

Notes
-----
- This file is intentionally curated (not a dump of every internal helper).
- Plotting lives in :mod:`orbit_silhouettes.viz` and is not re-exported here.
"""

# ----------------------------
# Errors
# ----------------------------
from .errors import (
    OrbitSilhouetteError,
    InvalidParameterError,
    DegenerateTopologyError,
    PersistenceComputationError,
)

# ----------------------------
# Configuration
# ----------------------------
from .config import (
    OrbitConfig,
    SilhouetteConfig,
)

# ----------------------------
# Persistence + silhouettes
# ----------------------------
from .persistence import (
    PersistenceResult,
    alpha_persistence,
)

from .silhouette import (
    SilhouetteCurve,
    weighted_silhouette,
)

# ----------------------------
# Generator
# ----------------------------
from .generator import (
    OrbitSilhouetteGenerator,
    OrbitSilhouetteSample,
    orbit_silhouette,
)

# ----------------------------
# Batches + reshaping
# ----------------------------
from .samples import (
    sample_silhouettes,
    prepend_origin,
    silhouettes_to_frame,
)

__all__ = [
    # errors
    "OrbitSilhouetteError",
    "InvalidParameterError",
    "DegenerateTopologyError",
    "PersistenceComputationError",

    # config
    "OrbitConfig",
    "SilhouetteConfig",

    # persistence + silhouettes
    "PersistenceResult",
    "alpha_persistence",
    "SilhouetteCurve",
    "weighted_silhouette",

    # generator
    "OrbitSilhouetteGenerator",
    "OrbitSilhouetteSample",
    "orbit_silhouette",

    # batches
    "sample_silhouettes",
    "prepend_origin",
    "silhouettes_to_frame",
]
