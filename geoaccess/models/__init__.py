"""Domain models.

Re-exports the public model types for convenient access.
"""

from geoaccess.models.access import AccessMode, Axis
from geoaccess.models.dataset import DatasetHandle
from geoaccess.models.geotransform import GeoTransform, InversionResult, Point
from geoaccess.models.info import DatasetInfo

__all__ = [
    "AccessMode",
    "Axis",
    "DatasetHandle",
    "DatasetInfo",
    "GeoTransform",
    "InversionResult",
    "Point",
]
