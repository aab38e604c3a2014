"""
Synthetic point clouds from discrete dynamical systems.

Typical usage
-------------
>>> from orbit_silhouettes.synthetic import sample_orbit
>>> X = sample_orbit(num_pts=500, r=2.0, rng=0)
"""

from __future__ import annotations

from . import orbits

from .orbits import (
    RngLike,
    linked_twist_step,
    sample_orbit,
    sample_orbit_dataset,
)

__all__ = [
    # namespaces
    "orbits",

    # orbits
    "RngLike",
    "linked_twist_step",
    "sample_orbit",
    "sample_orbit_dataset",
]
