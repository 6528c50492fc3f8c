"""Handle to a dataset opened by one of the driver probes.

The wrapped library object (a ``rasterio`` dataset or a ``fiona``
collection) keeps its own lifecycle; ``DatasetHandle`` only records how it
was opened and forwards ``close``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from geoaccess.core.constants import RASTER, VECTOR
from geoaccess.models.access import AccessMode
from geoaccess.models.geotransform import GeoTransform
from geoaccess.models.info import DatasetInfo


@dataclass(slots=True)
class DatasetHandle:
    """An opened dataset.

    Attributes:
        path: Path the dataset was opened from.
        access: Access mode the dataset was opened with.
        family: Driver family that succeeded (``"vector"`` or ``"raster"``).
        raw: The underlying rasterio dataset or fiona collection.
    """

    path: str
    access: AccessMode
    family: str
    raw: Any

    @property
    def driver(self) -> str:
        """GDAL/OGR short name of the driver that opened the dataset."""
        return str(getattr(self.raw, "driver", "") or "")

    @property
    def closed(self) -> bool:
        return bool(getattr(self.raw, "closed", False))

    @property
    def geotransform(self) -> GeoTransform | None:
        """Pixel-to-georeferenced transform of a raster, ``None`` for vectors."""
        if self.family != RASTER:
            return None
        transform = getattr(self.raw, "transform", None)
        if transform is None:
            return None
        return GeoTransform.from_affine(transform)

    def describe(self) -> DatasetInfo:
        crs = getattr(self.raw, "crs", None)
        geotransform = self.geotransform
        return DatasetInfo(
            path=self.path,
            family=self.family,
            driver=self.driver,
            access=self.access.value,
            crs=_crs_to_string(crs),
            geotransform=geotransform.to_list() if geotransform is not None else None,
            band_count=getattr(self.raw, "count", None) if self.family == RASTER else None,
            feature_count=len(self.raw) if self.family == VECTOR else None,
        )

    def close(self) -> None:
        self.raw.close()

    def __enter__(self) -> DatasetHandle:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _crs_to_string(crs: Any) -> str | None:
    """Render a rasterio/fiona CRS (or legacy fiona dict) as a string."""
    if not crs:
        return None
    to_string = getattr(crs, "to_string", None)
    if callable(to_string):
        return str(to_string())
    if isinstance(crs, dict) and "init" in crs:
        return str(crs["init"]).upper()
    return str(crs)
