"""Format decimal degrees as a degrees/minutes/seconds string.

Output follows GDAL's ``GDALDecToDMS`` layout::

    %3dd%2d'<seconds>"<hemisphere>

where seconds are printed with ``precision`` decimals in a field
``precision + 3`` wide, e.g. `` 45d30' 0.00"W`` for -45.5 degrees of longitude.

Rounding carries are handled by biasing the magnitude with half a unit of
the last printed seconds digit before truncating to degrees and minutes,
then removing the bias from the seconds.
"""

from __future__ import annotations

import math
from typing import Any

from geoaccess.core.constants import DEFAULT_DMS_PRECISION, INVALID_ANGLE, MAX_DMS_ANGLE
from geoaccess.models.access import Axis
from geoaccess.utils.validation import require_non_negative_int, require_real

_STAGE = "dms"

_HEMISPHERES: dict[Axis, tuple[str, str]] = {
    # (non-negative, negative)
    Axis.LATITUDE: ("N", "S"),
    Axis.LONGITUDE: ("E", "W"),
}


def dec_to_dms(angle: Any, axis: Any, precision: Any = DEFAULT_DMS_PRECISION) -> str:
    """Convert decimal degrees to a DMS string.

    Args:
        angle: Angle in decimal degrees.
        axis: ``"lat"`` or ``"long"`` (first letter may be upper-case).
        precision: Digits after the decimal point for the seconds.

    Returns:
        The formatted angle, or ``"Invalid angle"`` for NaN or magnitudes
        above 361 degrees.

    Raises:
        InvalidArgumentError: For an unknown axis, a non-numeric angle or
            a negative / non-integer precision.
    """
    angle = require_real(angle, "angle", stage=_STAGE)
    parsed_axis = Axis.from_token(axis)
    precision = require_non_negative_int(precision, "precision", stage=_STAGE)

    if math.isnan(angle):
        return INVALID_ANGLE

    epsilon = (0.5 / 3600.0) * math.pow(0.1, precision)
    magnitude = abs(angle) + epsilon
    if magnitude > MAX_DMS_ANGLE:
        return INVALID_ANGLE

    degrees = int(magnitude)
    minutes = int((magnitude - degrees) * 60)
    seconds = magnitude * 3600 - degrees * 3600 - minutes * 60

    # Drop the bias; an exact zero angle must print as zero seconds.
    if seconds >= epsilon * 3600.0:
        seconds -= epsilon * 3600.0
    if seconds <= 0.0:
        seconds = 0.0

    positive, negative = _HEMISPHERES[parsed_axis]
    hemisphere = negative if angle < 0.0 else positive

    return "%3dd%2d'%*.*f\"%s" % (
        degrees,
        minutes,
        precision + 3,
        precision,
        seconds,
        hemisphere,
    )
