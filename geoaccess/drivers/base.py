"""DriverProbe abstract base class.

A probe is one strategy for turning a path into an opened dataset: it
wraps a single driver family of the underlying geospatial library and
answers "could you open this?" with either a ``DatasetHandle`` or
``None``.  The open resolver tries probes in order and never sees the
library's own error types.

Lifecycle of ``try_open``:
    1. enter the library's configuration environment (``env``),
    2. call ``open`` with the family-specific mode,
    3. translate the library's "cannot open" errors (``open_errors``) into
       ``None``.  Anything else propagates.
"""

from __future__ import annotations

import abc
import contextlib
import logging
from typing import TYPE_CHECKING, Any

from geoaccess.core.exceptions import GeoAccessError
from geoaccess.models.dataset import DatasetHandle

if TYPE_CHECKING:
    from collections.abc import Mapping

    from geoaccess.models.access import AccessMode

logger = logging.getLogger(__name__)


class DriverProbe(abc.ABC):
    """Abstract base class for driver-family probes.

    Concrete implementations set ``family`` and override ``open`` and
    ``open_errors``; ``env`` defaults to a no-op context.
    """

    #: Driver family name reported on handles and in errors.
    family: str = ""

    def try_open(
        self,
        path: str,
        access: AccessMode,
        options: Mapping[str, str] | None = None,
    ) -> DatasetHandle | None:
        """Attempt to open *path*; return ``None`` if this family cannot.

        Args:
            path: Dataset path or GDAL connection string.
            access: Requested access mode.
            options: Configuration options applied for the duration of
                the open call.
        """
        try:
            with self.env(dict(options or {})):
                raw = self.open(path, access)
        except self.open_errors() as exc:
            if not self.declines(exc):
                raise
            logger.debug(
                "Probe could not open dataset | family=%s | path=%s | mode=%s | error=%s",
                self.family,
                path,
                access.value,
                exc,
            )
            return None

        return DatasetHandle(path=path, access=access, family=self.family, raw=raw)

    # ------------------------------------------------------------------
    # Abstract methods: every probe must implement these
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def open(self, path: str, access: AccessMode) -> Any:
        """Open *path* with the library and return its dataset object.

        Raises:
            One of ``open_errors()`` when the family cannot open *path*.
        """

    @abc.abstractmethod
    def open_errors(self) -> tuple[type[BaseException], ...]:
        """Return the library exception types meaning "not openable here"."""

    def declines(self, exc: BaseException) -> bool:
        """Return True if *exc*, one of ``open_errors()``, means "not openable here"."""
        return True

    def env(self, options: dict[str, str]) -> contextlib.AbstractContextManager[Any]:
        """Return a context that applies *options* to the library."""
        return contextlib.nullcontext()


# GDAL options that the rasterio and fiona Env classes only accept as integers.
_INTEGER_OPTIONS = frozenset({"GDAL_CACHEMAX"})


def gdal_env_options(options: Mapping[str, str]) -> dict[str, Any]:
    """Convert store options into keyword arguments for ``rasterio.Env`` / ``fiona.Env``.

    Integer-only options are converted with ``int``; a value that is not an
    integer (e.g. ``"10%"``) is skipped with a warning.
    """
    converted: dict[str, Any] = {}
    for name, value in options.items():
        if name.upper() in _INTEGER_OPTIONS:
            try:
                converted[name] = int(value)
            except ValueError:
                logger.warning(
                    "Skipping config option not accepted by GDAL Env | name=%s | value=%r",
                    name,
                    value,
                )
            continue
        converted[name] = value
    return converted


class DriverRegistryError(GeoAccessError):
    """Raised when a probe family is unknown to the registry.

    Attributes:
        family: The requested family name.
    """

    default_stage = "drivers"
    default_code = "UNKNOWN_DRIVER_FAMILY"

    def __init__(self, family: str, message: str) -> None:
        self.family = family
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.family}] {self.message}"
