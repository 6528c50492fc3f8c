"""Raster probe backed by rasterio (GDAL raster drivers).

rasterio is imported lazily so that importing ``geoaccess`` does not load
GDAL until a dataset is actually opened.
"""

from __future__ import annotations

from typing import Any

from geoaccess.core.constants import RASTER
from geoaccess.drivers.base import DriverProbe, gdal_env_options
from geoaccess.models.access import AccessMode

# rasterio opens for update with "r+".
_RASTERIO_MODES: dict[AccessMode, str] = {
    AccessMode.READ_ONLY: "r",
    AccessMode.READ_UPDATE: "r+",
}


class RasterioProbe(DriverProbe):
    """Open datasets through ``rasterio.open``.

    In update mode rasterio reports an unopenable path as a ``TypeError``
    chained from a GDAL ``CPLE_*`` error rather than ``RasterioIOError``.
    """

    family = RASTER

    def open(self, path: str, access: AccessMode) -> Any:
        import rasterio

        return rasterio.open(path, _RASTERIO_MODES[access])

    def open_errors(self) -> tuple[type[BaseException], ...]:
        from rasterio._err import CPLE_BaseError
        from rasterio.errors import RasterioIOError

        return (RasterioIOError, CPLE_BaseError, TypeError)

    def declines(self, exc: BaseException) -> bool:
        if isinstance(exc, TypeError):
            from rasterio._err import CPLE_BaseError

            return isinstance(exc.__cause__, CPLE_BaseError)
        return True

    def env(self, options: dict[str, str]) -> Any:
        import rasterio

        return rasterio.Env(**gdal_env_options(options))
