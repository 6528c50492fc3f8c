"""Apply and invert affine geotransforms.

Both functions are pure and use IEEE-754 double arithmetic only.  The
inversion follows GDAL's ``GDALInvGeoTransform``:

- north-up transforms (no rotation terms, non-zero pixel sizes) are
  inverted per axis, without a determinant;
- otherwise the determinant of the 2x2 linear part is compared against
  ``INVERT_EPSILON * m * m`` (``m`` = largest absolute linear coefficient)
  and a transform at or below that bound is reported as degenerate.

A degenerate transform is an expected outcome, reported through
``InversionResult.status``, never raised.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from geoaccess.core.constants import INVERT_EPSILON
from geoaccess.core.exceptions import InvalidArgumentError
from geoaccess.models.geotransform import GeoTransform, InversionResult, Point
from geoaccess.utils.validation import is_real, require_real

_STAGE = "geotransform"

_DEGENERATE = GeoTransform(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


def apply_geotransform(gt: Any, x: Any, y: Any = None) -> Point:
    """Map pixel/line ``(x, y)`` through *gt*.

    ``x`` may also be a point: a mapping with ``"x"`` and ``"y"`` keys or
    an object with ``x`` and ``y`` attributes: when *y* is omitted.

    Args:
        gt: Six coefficients (sequence, ``GeoTransform`` or ``Affine``).
        x: Pixel coordinate, or a point.
        y: Line coordinate.

    Returns:
        The transformed ``Point``.

    Raises:
        InvalidArgumentError: If *gt* is not six numbers or the coordinates
            are not numeric.
    """
    transform = GeoTransform.from_sequence(gt)
    if y is None and not is_real(x):
        px, py = _point_coordinates(x)
    else:
        px = require_real(x, "x", stage=_STAGE)
        py = require_real(y, "y", stage=_STAGE)

    return Point(
        transform.origin_x + px * transform.pixel_width + py * transform.row_rotation,
        transform.origin_y + px * transform.column_rotation + py * transform.pixel_height,
    )


def inv_geotransform(gt: Any) -> InversionResult:
    """Invert *gt* so that it maps georeferenced coordinates to pixel/line.

    Returns:
        ``InversionResult(transform, status)``; status ``0`` (with an
        all-zero transform) when *gt* is not invertible.

    Raises:
        InvalidArgumentError: If *gt* is not six numbers.
    """
    transform = GeoTransform.from_sequence(gt)
    c0, c1, c2, c3, c4, c5 = transform.to_tuple()

    if transform.is_north_up and c1 != 0.0 and c5 != 0.0:
        inverse = GeoTransform(-c0 / c1, 1.0 / c1, 0.0, -c3 / c5, 0.0, 1.0 / c5)
        return InversionResult(inverse, 1)

    det = c1 * c5 - c2 * c4
    magnitude = max(abs(c1), abs(c2), abs(c4), abs(c5))
    if abs(det) <= INVERT_EPSILON * magnitude * magnitude:
        return InversionResult(_DEGENERATE, 0)

    inv_det = 1.0 / det
    inverse = GeoTransform(
        (c2 * c3 - c0 * c5) * inv_det,
        c5 * inv_det,
        -c2 * inv_det,
        (-c1 * c3 + c0 * c4) * inv_det,
        -c4 * inv_det,
        c1 * inv_det,
    )
    return InversionResult(inverse, 1)


def _point_coordinates(point: Any) -> tuple[float, float]:
    if isinstance(point, Mapping):
        px, py = point.get("x"), point.get("y")
    else:
        px, py = getattr(point, "x", None), getattr(point, "y", None)
    if not is_real(px) or not is_real(py):
        msg = "point must contain numerical properties x and y"
        raise InvalidArgumentError(msg, argument="x", stage=_STAGE)
    return float(px), float(py)
