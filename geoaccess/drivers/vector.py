"""Vector probe backed by fiona (OGR vector drivers)."""

from __future__ import annotations

from typing import Any

from geoaccess.core.constants import VECTOR
from geoaccess.drivers.base import DriverProbe, gdal_env_options
from geoaccess.models.access import AccessMode

# fiona has no "r+"; appending is its update-capable mode.
_FIONA_MODES: dict[AccessMode, str] = {
    AccessMode.READ_ONLY: "r",
    AccessMode.READ_UPDATE: "a",
}


class FionaProbe(DriverProbe):
    """Open datasets through ``fiona.open``.

    In append mode fiona reports a missing path as a plain ``OSError``.
    """

    family = VECTOR

    def open(self, path: str, access: AccessMode) -> Any:
        import fiona

        return fiona.open(path, _FIONA_MODES[access])

    def open_errors(self) -> tuple[type[BaseException], ...]:
        from fiona.errors import FionaValueError

        return (FionaValueError, OSError)

    def env(self, options: dict[str, str]) -> Any:
        import fiona

        return fiona.Env(**gdal_env_options(options))
