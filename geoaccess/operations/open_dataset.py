"""Open a dataset through the driver registry.

Translates the caller's mode token into an ``AccessMode``, then asks each
probe of the registry, in order, to open the path.  The first handle wins.
When every probe declines, a single ``DatasetOpenError`` is raised; the
individual probe failures are only logged.

The configuration options of the store in effect (the process-wide store
by default) are applied around every probe attempt.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geoaccess.core.config_options import get_default_store
from geoaccess.core.constants import DEFAULT_OPEN_MODE
from geoaccess.core.exceptions import DatasetOpenError
from geoaccess.drivers.registry import get_default_registry
from geoaccess.models.access import AccessMode
from geoaccess.utils.validation import require_path

if TYPE_CHECKING:
    import os

    from geoaccess.core.config_options import ConfigOptionStore
    from geoaccess.drivers.registry import DriverRegistry
    from geoaccess.models.dataset import DatasetHandle

logger = logging.getLogger("geoaccess.operations.open_dataset")


def open_dataset(
    path: str | os.PathLike[str],
    mode: str = DEFAULT_OPEN_MODE,
    *,
    registry: DriverRegistry | None = None,
    store: ConfigOptionStore | None = None,
) -> DatasetHandle:
    """Open *path* with the first driver family that accepts it.

    Args:
        path: Dataset path or GDAL connection string.
        mode: ``"r"`` for read-only or ``"r+"`` for update access.
        registry: Probes to try. Defaults to the process-wide registry.
        store: Configuration options to apply. Defaults to the
            process-wide store.

    Returns:
        A ``DatasetHandle`` for the opened dataset.

    Raises:
        InvalidArgumentError: If *path* is empty or *mode* is not
            ``"r"`` / ``"r+"``. Raised before any driver is consulted.
        DatasetOpenError: If no probe could open *path*.
    """
    path = require_path(path, stage="open")
    access = AccessMode.from_token(mode)

    registry = registry if registry is not None else get_default_registry()
    store = store if store is not None else get_default_store()
    options = store.snapshot()

    attempted: list[str] = []
    for probe in registry.probes:
        attempted.append(probe.family)
        handle = probe.try_open(path, access, options)
        if handle is not None:
            logger.info(
                "Opened dataset | path=%s | mode=%s | family=%s | driver=%s",
                path,
                access.value,
                handle.family,
                handle.driver,
            )
            return handle

    logger.warning(
        "No driver could open dataset | path=%s | mode=%s | attempted=%s",
        path,
        access.value,
        ",".join(attempted),
    )
    raise DatasetOpenError(path=path, mode=access.value, attempted=attempted)
