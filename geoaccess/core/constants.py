"""Shared constants: single source of truth.

Centralises mode tokens, axis tokens, driver family names and numeric
thresholds used across the operations and driver probes.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Open modes
# ---------------------------------------------------------------------------

MODE_READ_ONLY: str = "r"
"""Caller token requesting read-only access."""

MODE_READ_UPDATE: str = "r+"
"""Caller token requesting update-capable access."""

DEFAULT_OPEN_MODE: str = MODE_READ_ONLY

# ---------------------------------------------------------------------------
# Driver families
# ---------------------------------------------------------------------------

VECTOR: str = "vector"
"""OGR vector drivers, reached through fiona."""

RASTER: str = "raster"
"""GDAL raster drivers, reached through rasterio."""

DEFAULT_PROBE_ORDER: tuple[str, ...] = (VECTOR, RASTER)
"""Vector drivers are probed before raster drivers."""

# ---------------------------------------------------------------------------
# Geotransforms
# ---------------------------------------------------------------------------

GEOTRANSFORM_LENGTH: int = 6

INVERT_EPSILON: float = 1e-10
"""Relative threshold below which a determinant is treated as singular.

Compared against ``m * m`` where ``m`` is the largest absolute
coefficient of the linear part.
"""

# ---------------------------------------------------------------------------
# DMS formatting
# ---------------------------------------------------------------------------

AXIS_LATITUDE: str = "Lat"
AXIS_LONGITUDE: str = "Long"
DEFAULT_DMS_PRECISION: int = 2
MAX_DMS_ANGLE: float = 361.0
INVALID_ANGLE: str = "Invalid angle"
