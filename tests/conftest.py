"""Shared pytest fixtures for the geoaccess test suite."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

from geoaccess.core.config_options import ConfigOptionStore, reset_default_store
from geoaccess.drivers.base import DriverProbe
from geoaccess.drivers.registry import reset_default_registry
from geoaccess.models.access import AccessMode

# ---------------------------------------------------------------------------
# Process-wide state
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolate_process_state() -> Any:
    """Give every test a fresh default store and registry."""
    reset_default_store()
    reset_default_registry()
    yield
    reset_default_store()
    reset_default_registry()


@pytest.fixture()
def store() -> ConfigOptionStore:
    """An isolated, empty configuration-option store."""
    return ConfigOptionStore()


# ---------------------------------------------------------------------------
# Fake probes
# ---------------------------------------------------------------------------


class RecordingProbe(DriverProbe):
    """Probe that records its calls and opens only the paths it is given.

    ``calls`` holds ``(path, access, options)`` tuples in call order.
    """

    def __init__(self, family: str, accepts: set[str] | None = None) -> None:
        self.family = family
        self.accepts = accepts or set()
        self.calls: list[tuple[str, AccessMode, dict[str, str]]] = []
        self._options: dict[str, str] = {}

    def env(self, options: dict[str, str]) -> Any:
        self._options = options
        return super().env(options)

    def open(self, path: str, access: AccessMode) -> Any:
        self.calls.append((path, access, self._options))
        if path not in self.accepts:
            raise LookupError(f"{self.family} cannot open {path}")
        return SimpleNamespace(family=self.family, path=path, driver=f"{self.family.upper()}_DRV")

    def open_errors(self) -> tuple[type[BaseException], ...]:
        return (LookupError,)


@pytest.fixture()
def recording_probe_cls() -> type[RecordingProbe]:
    return RecordingProbe


# ---------------------------------------------------------------------------
# Real dataset fixtures (rasterio / fiona)
# ---------------------------------------------------------------------------


@pytest.fixture()
def geotiff_path(tmp_path: Path) -> Path:
    """A 4x3 single-band GeoTIFF, north-up, 10 m pixels, in EPSG:32633."""
    import numpy as np
    import rasterio
    from rasterio.transform import from_origin

    path = tmp_path / "grid.tif"
    data = np.arange(12, dtype="uint8").reshape(3, 4)
    with rasterio.open(
        path,
        "w",
        driver="GTiff",
        width=4,
        height=3,
        count=1,
        dtype="uint8",
        crs="EPSG:32633",
        transform=from_origin(500000.0, 4600000.0, 10.0, 10.0),
    ) as dst:
        dst.write(data, 1)
    return path


@pytest.fixture()
def geojson_path(tmp_path: Path) -> Path:
    """A GeoJSON layer with two point features in EPSG:4326."""
    import fiona

    path = tmp_path / "points.geojson"
    schema = {"geometry": "Point", "properties": {"name": "str"}}
    with fiona.open(path, "w", driver="GeoJSON", schema=schema, crs="EPSG:4326") as dst:
        dst.write({"geometry": {"type": "Point", "coordinates": (10.0, 45.0)}, "properties": {"name": "a"}})
        dst.write({"geometry": {"type": "Point", "coordinates": (11.0, 46.0)}, "properties": {"name": "b"}})
    return path
