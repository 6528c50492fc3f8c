"""Driver probes.

Implements the probe strategy pattern used by the open resolver:
- DriverProbe: Abstract base class ("try open" capability)
- FionaProbe: OGR vector drivers via fiona
- RasterioProbe: GDAL raster drivers via rasterio
- DriverRegistry: Ordered probes, built from registered families
"""

from geoaccess.drivers.base import DriverProbe, DriverRegistryError
from geoaccess.drivers.registry import (
    DriverRegistry,
    create_probe,
    get_default_registry,
    list_probes,
    register_probe,
    reset_default_registry,
)

__all__ = [
    "DriverProbe",
    "DriverRegistry",
    "DriverRegistryError",
    "create_probe",
    "get_default_registry",
    "list_probes",
    "register_probe",
    "reset_default_registry",
]
