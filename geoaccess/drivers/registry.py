"""Driver registry: the ordered list of probes the resolver tries.

The module keeps a registry of known probe families.  Built-in families
(``vector`` via fiona, ``raster`` via rasterio) are registered as lazy
import thunks; new families are added with ``register_probe``.

Usage::

    from geoaccess.drivers.registry import DriverRegistry

    registry = DriverRegistry(("raster", "vector"))
    for probe in registry.probes:
        handle = probe.try_open(path, AccessMode.READ_ONLY)

The process-wide registry used by ``geoaccess.open`` follows
``GeoAccessConfig.probe_order`` (``GEOACCESS_PROBE_ORDER``).
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from geoaccess.core.constants import DEFAULT_PROBE_ORDER, RASTER, VECTOR
from geoaccess.drivers.base import DriverProbe, DriverRegistryError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Lazy-import probe registry
# ---------------------------------------------------------------------------

# Each entry maps a family name to a callable returning the probe *class*,
# so a family's library is only imported when that family is used.

_PROBE_REGISTRY: dict[str, Callable[[], type[DriverProbe]]] = {}


def _register_builtin_probes() -> None:
    """Register the built-in vector and raster probes."""

    def _vector() -> type[DriverProbe]:
        from geoaccess.drivers.vector import FionaProbe

        return FionaProbe

    def _raster() -> type[DriverProbe]:
        from geoaccess.drivers.raster import RasterioProbe

        return RasterioProbe

    _PROBE_REGISTRY[VECTOR] = _vector
    _PROBE_REGISTRY[RASTER] = _raster


def _ensure_registry() -> None:
    """Initialise the probe registry once (idempotent)."""
    if not _PROBE_REGISTRY:
        _register_builtin_probes()


def register_probe(name: str, loader: Callable[[], type[DriverProbe]]) -> None:
    """Register a custom probe family.

    Args:
        name: Family name (e.g. ``"netcdf"``).
        loader: A zero-argument callable that returns the probe class.

    Raises:
        ValueError: If the name is empty.
    """
    if not name:
        msg = "Probe family name must be non-empty"
        raise ValueError(msg)
    _ensure_registry()
    _PROBE_REGISTRY[name] = loader
    logger.debug("Registered driver probe: %s", name)


def list_probes() -> list[str]:
    """Return the names of all registered probe families."""
    _ensure_registry()
    return sorted(_PROBE_REGISTRY)


def create_probe(name: str) -> DriverProbe:
    """Instantiate the probe registered under *name*.

    Raises:
        DriverRegistryError: If no probe is registered under *name*.
    """
    _ensure_registry()
    loader = _PROBE_REGISTRY.get(name)
    if loader is None:
        available = ", ".join(sorted(_PROBE_REGISTRY))
        msg = f"Unknown driver family: {name!r}. Available: {available}"
        raise DriverRegistryError(family=name, message=msg)
    return loader()()


# ---------------------------------------------------------------------------
# Ordered registry
# ---------------------------------------------------------------------------


class DriverRegistry:
    """An ordered sequence of probes.

    Probes are instantiated eagerly so that an unknown family fails when
    the registry is built, not on the first open.
    """

    def __init__(self, order: Iterable[str] = DEFAULT_PROBE_ORDER) -> None:
        self._probes: tuple[DriverProbe, ...] = tuple(create_probe(name) for name in order)

    @classmethod
    def from_probes(cls, probes: Iterable[DriverProbe]) -> DriverRegistry:
        """Build a registry from already constructed probes (tests, hosts)."""
        registry = cls(order=())
        registry._probes = tuple(probes)
        return registry

    @property
    def probes(self) -> tuple[DriverProbe, ...]:
        return self._probes

    @property
    def families(self) -> list[str]:
        return [probe.family for probe in self._probes]

    def __len__(self) -> int:
        return len(self._probes)


_default_registry: DriverRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> DriverRegistry:
    """Return the process-wide registry, built from ``GeoAccessConfig``."""
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            from geoaccess.core.config import GeoAccessConfig

            config = GeoAccessConfig.from_env()
            _default_registry = DriverRegistry(config.probe_order)
            logger.info("Driver registry ready | order=%s", ",".join(config.probe_order))
        return _default_registry


def reset_default_registry() -> None:
    """Discard the process-wide registry; the next access rebuilds it."""
    global _default_registry
    with _default_registry_lock:
        _default_registry = None
