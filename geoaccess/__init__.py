"""Geospatial dataset access helpers.

Opens raster and vector datasets through an ordered registry of driver
probes (fiona for OGR vector drivers, rasterio for GDAL raster drivers),
converts between pixel and georeferenced space with affine geotransforms,
holds driver configuration options, and formats angles as
degrees/minutes/seconds.
"""

from geoaccess.core.config_options import (
    ConfigOptionStore,
    get_default_store,
    reset_default_store,
)
from geoaccess.core.exceptions import (
    DatasetOpenError,
    GeoAccessError,
    InvalidArgumentError,
)
from geoaccess.models.access import AccessMode, Axis
from geoaccess.models.dataset import DatasetHandle
from geoaccess.models.geotransform import GeoTransform, InversionResult, Point
from geoaccess.operations.config_options import get_config_option, set_config_option
from geoaccess.operations.dms import dec_to_dms
from geoaccess.operations.geotransform import apply_geotransform, inv_geotransform
from geoaccess.operations.open_dataset import open_dataset

__version__ = "0.1.0"

open = open_dataset  # noqa: A001

__all__ = [
    "AccessMode",
    "Axis",
    "ConfigOptionStore",
    "DatasetHandle",
    "DatasetOpenError",
    "GeoAccessError",
    "GeoTransform",
    "InvalidArgumentError",
    "InversionResult",
    "Point",
    "apply_geotransform",
    "dec_to_dms",
    "get_config_option",
    "get_default_store",
    "inv_geotransform",
    "open",
    "open_dataset",
    "reset_default_store",
    "set_config_option",
]
