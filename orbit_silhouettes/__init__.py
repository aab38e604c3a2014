# orbit_silhouettes/__init__.py
from __future__ import annotations

"""
orbit_silhouettes: persistence silhouettes of linked twist map orbits.

Recommended usage:
    import orbit_silhouettes as osil

Public API:
    - Curated user-facing symbols are re-exported from :mod:`orbit_silhouettes.api`.
    - Subpackages are available as namespaces (``osil.synthetic``, ``osil.viz``)
      and are imported lazily so that matplotlib is only touched when plotting.
    - Convenience passthrough: if an attribute is not found at top-level, we try to resolve it
      from ``synthetic``, then ``viz``.
"""

import importlib
from typing import Any

__version__ = "0.1.0"

from .api import *  # noqa: F401,F403
from .api import __all__ as _api_all

# ------------------------------------------------------------
# Subpackages exposed as osil.synthetic / osil.viz
# ------------------------------------------------------------
_SUBPACKAGES = ("synthetic", "viz")

# Ordering matters: earlier modules win when names collide.
_PASSTHROUGH_MODULES = ("synthetic", "viz")

__all__ = ["__version__", *_api_all, *_SUBPACKAGES]


def __getattr__(name: str) -> Any:
    # 1) Lazy-load subpackages as namespaces
    if name in _SUBPACKAGES:
        return importlib.import_module(f"{__name__}.{name}")

    # 2) Convenience passthrough: osil.<x> -> orbit_silhouettes.<module>.<x>
    for mod in _PASSTHROUGH_MODULES:
        m = importlib.import_module(f"{__name__}.{mod}")
        if hasattr(m, name):
            return getattr(m, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    names = set(globals().keys())
    names.update(_SUBPACKAGES)
    for mod in _PASSTHROUGH_MODULES:
        m = importlib.import_module(f"{__name__}.{mod}")
        names.update(getattr(m, "__all__", []))
    return sorted(names)
