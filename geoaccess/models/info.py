"""Pydantic summary of an opened dataset.

``DatasetInfo`` is a serialisable snapshot of what a ``DatasetHandle``
wraps, suitable for logging or returning to a host application as JSON.
Fields that do not apply to a driver family are ``None`` (a vector layer
has no bands, a raster has no features).
"""

from __future__ import annotations

from pydantic import BaseModel


class DatasetInfo(BaseModel):
    """Summary of an opened dataset.

    Attributes:
        path: Path the dataset was opened from.
        family: Driver family that opened it (``"vector"`` or ``"raster"``).
        driver: GDAL/OGR driver short name (e.g. ``"GTiff"``, ``"GPKG"``).
        access: Caller mode token (``"r"`` or ``"r+"``).
        crs: CRS as a string (e.g. ``"EPSG:4326"``), or ``None``.
        geotransform: Six GDAL geotransform coefficients (raster only).
        band_count: Number of raster bands (raster only).
        feature_count: Number of features in the layer (vector only).
    """

    path: str
    family: str
    driver: str = ""
    access: str = "r"
    crs: str | None = None
    geotransform: list[float] | None = None
    band_count: int | None = None
    feature_count: int | None = None
