"""Access-mode and axis enumerations.

Caller-facing tokens (``"r"``, ``"r+"``, ``"lat"``, ``"long"``) are
translated into these enums at the edge of each operation; everything
downstream works with the enum values only.
"""

from __future__ import annotations

import enum

from geoaccess.core.constants import (
    AXIS_LATITUDE,
    AXIS_LONGITUDE,
    MODE_READ_ONLY,
    MODE_READ_UPDATE,
)
from geoaccess.core.exceptions import InvalidArgumentError


class AccessMode(enum.Enum):
    """Whether an opened dataset permits only reads or also updates.

    Values:
        READ_ONLY:   ``"r"``
        READ_UPDATE: ``"r+"``
    """

    READ_ONLY = MODE_READ_ONLY
    READ_UPDATE = MODE_READ_UPDATE

    @classmethod
    def from_token(cls, mode: object) -> AccessMode:
        """Translate a caller mode token.

        Raises:
            InvalidArgumentError: For anything other than ``"r"`` or ``"r+"``.
        """
        for member in cls:
            if mode == member.value:
                return member
        msg = 'Invalid open mode. Must be "r" or "r+"'
        raise InvalidArgumentError(msg, argument="mode", stage="open")

    @property
    def is_update(self) -> bool:
        return self is AccessMode.READ_UPDATE


class Axis(enum.Enum):
    """Axis kind of a geographic angle."""

    LATITUDE = AXIS_LATITUDE
    LONGITUDE = AXIS_LONGITUDE

    @classmethod
    def from_token(cls, axis: object) -> Axis:
        """Translate an axis token such as ``"lat"`` or ``"Long"``.

        Only the first character is upper-cased before matching, so
        ``"lat"`` and ``"Lat"`` are accepted while ``"LAT"`` is not.

        Raises:
            InvalidArgumentError: If the normalised token is not ``"Lat"``
                or ``"Long"``.
        """
        if isinstance(axis, str):
            normalised = axis[:1].upper() + axis[1:]
            for member in cls:
                if normalised == member.value:
                    return member
        msg = "Axis must be 'lat' or 'long'"
        raise InvalidArgumentError(msg, argument="axis", stage="dms")
