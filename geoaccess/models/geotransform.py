"""Typed models for affine geotransforms.

A geotransform maps pixel/line space ``(P, L)`` to georeferenced space::

    X = c0 + c1 * P + c2 * L
    Y = c3 + c4 * P + c5 * L

Coefficients follow GDAL's ordering.  ``affine.Affine`` (the type rasterio
exposes as ``dataset.transform``) stores the same six numbers in a
different order; ``to_affine`` / ``from_affine`` convert between the two.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import astuple, dataclass
from typing import Any, NamedTuple

from affine import Affine

from geoaccess.core.constants import GEOTRANSFORM_LENGTH
from geoaccess.core.exceptions import InvalidArgumentError
from geoaccess.utils.validation import is_real

_STAGE = "geotransform"


@dataclass(frozen=True, slots=True)
class GeoTransform:
    """Six GDAL geotransform coefficients.

    Attributes:
        origin_x: X of the upper-left corner of the upper-left pixel (``c0``).
        pixel_width: X step per pixel column (``c1``).
        row_rotation: X step per line (0 for north-up rasters) (``c2``).
        origin_y: Y of the upper-left corner of the upper-left pixel (``c3``).
        column_rotation: Y step per pixel column (0 for north-up) (``c4``).
        pixel_height: Y step per line (negative for north-up) (``c5``).
    """

    origin_x: float
    pixel_width: float
    row_rotation: float
    origin_y: float
    column_rotation: float
    pixel_height: float

    @classmethod
    def from_sequence(cls, values: Any) -> GeoTransform:
        """Build a transform from a GeoTransform, an ``Affine`` or six numbers.

        Raises:
            InvalidArgumentError: If the input does not hold exactly six
                real numbers.
        """
        if isinstance(values, GeoTransform):
            return values
        if isinstance(values, Affine):
            return cls.from_affine(values)
        if isinstance(values, str | bytes | Mapping) or not isinstance(values, Iterable):
            msg = "geotransform must be a sequence of numbers"
            raise InvalidArgumentError(msg, argument="gt", stage=_STAGE)
        values = list(values)
        if len(values) != GEOTRANSFORM_LENGTH:
            msg = "Input geotransform array length must equal 6"
            raise InvalidArgumentError(msg, argument="gt", stage=_STAGE)
        if not all(is_real(value) for value in values):
            msg = "geotransform array must only contain numbers"
            raise InvalidArgumentError(msg, argument="gt", stage=_STAGE)
        return cls(*(float(value) for value in values))

    @classmethod
    def from_affine(cls, transform: Affine) -> GeoTransform:
        return cls(*transform.to_gdal())

    def to_affine(self) -> Affine:
        return Affine.from_gdal(*self.to_tuple())

    def to_tuple(self) -> tuple[float, float, float, float, float, float]:
        return astuple(self)  # type: ignore[return-value]

    def to_list(self) -> list[float]:
        return list(self.to_tuple())

    @property
    def is_north_up(self) -> bool:
        """True when the transform has no rotation or shear terms."""
        return self.row_rotation == 0.0 and self.column_rotation == 0.0


class Point(NamedTuple):
    """A coordinate pair produced by applying a geotransform."""

    x: float
    y: float


class InversionResult(NamedTuple):
    """Outcome of inverting a geotransform.

    ``status`` is ``1`` when the inverse was computed and ``0`` when the
    transform is degenerate; in that case ``transform`` is all zeros and
    must not be used.  Callers are expected to check the status::

        inverse, status = inv_geotransform(gt)
        if not status:
            ...
    """

    transform: GeoTransform
    status: int

    @property
    def ok(self) -> bool:
        return self.status == 1
