"""Driver configuration-option store.

A string-keyed table of optional string values, equivalent to GDAL's
``CPLSetConfigOption`` / ``CPLGetConfigOption``.  The store is an explicit
object so tests and embedding hosts can create isolated instances; a
single process-wide instance is available through ``get_default_store``
and torn down with ``reset_default_store``.

The process-wide instance is shared state.  Each read and write takes an
internal lock, which gives single-key consistency and last-writer-wins
ordering between threads; there is no multi-key atomicity.

The resolver hands ``snapshot()`` to the driver probes, which apply it
through ``rasterio.Env`` / ``fiona.Env`` for the duration of each open.
"""

from __future__ import annotations

import contextlib
import logging
import os
import threading
from typing import TYPE_CHECKING

from geoaccess.core.exceptions import InvalidArgumentError
from geoaccess.utils.validation import require_non_empty_str

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger("geoaccess.core.config_options")

_STAGE = "config_options"


class ConfigOptionStore:
    """Thread-safe mapping of configuration option names to string values.

    Setting an option to ``None`` removes it; reading a missing option
    returns ``None`` (or the process environment value when
    *env_fallback* is enabled).
    """

    def __init__(
        self,
        initial: dict[str, str] | None = None,
        *,
        env_fallback: bool = False,
    ) -> None:
        self._options: dict[str, str] = {}
        self._lock = threading.Lock()
        self._env_fallback = env_fallback
        for name, value in (initial or {}).items():
            self.set(name, value)

    @property
    def env_fallback(self) -> bool:
        return self._env_fallback

    def set(self, name: str, value: str | None) -> None:
        """Insert, overwrite or (with ``None``) remove an option.

        Raises:
            InvalidArgumentError: If *name* is empty or *value* is neither a
                string nor ``None``.
        """
        require_non_empty_str(name, "name", stage=_STAGE)
        if value is not None and not isinstance(value, str):
            msg = "value must be a string or null"
            raise InvalidArgumentError(msg, argument="value", stage=_STAGE)

        with self._lock:
            if value is None:
                self._options.pop(name, None)
            else:
                self._options[name] = value
        logger.debug("Config option set | name=%s | value=%r", name, value)

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of *name*, or *default* when it is not set."""
        require_non_empty_str(name, "name", stage=_STAGE)
        with self._lock:
            value = self._options.get(name)
        if value is None and self._env_fallback:
            value = os.environ.get(name)
        return default if value is None else value

    def snapshot(self) -> dict[str, str]:
        """Return a copy of every explicitly set option."""
        with self._lock:
            return dict(self._options)

    def clear(self) -> None:
        with self._lock:
            self._options.clear()

    @contextlib.contextmanager
    def overrides(self, **options: str | None) -> Iterator[ConfigOptionStore]:
        """Temporarily set options, restoring previous values on exit.

        Example::

            with store.overrides(GDAL_DISABLE_READDIR_ON_OPEN="EMPTY_DIR"):
                handle = open_dataset(path, store=store)
        """
        with self._lock:
            previous = {name: self._options.get(name) for name in options}
        try:
            for name, value in options.items():
                self.set(name, value)
            yield self
        finally:
            for name, value in previous.items():
                self.set(name, value)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._options

    def __len__(self) -> int:
        with self._lock:
            return len(self._options)


# ---------------------------------------------------------------------------
# Process-wide store
# ---------------------------------------------------------------------------

_default_store: ConfigOptionStore | None = None
_default_store_lock = threading.Lock()


def get_default_store() -> ConfigOptionStore:
    """Return the process-wide store, creating it on first use.

    The env-fallback behaviour is taken from ``GeoAccessConfig.from_env()``
    at creation time.
    """
    global _default_store
    with _default_store_lock:
        if _default_store is None:
            from geoaccess.core.config import GeoAccessConfig

            config = GeoAccessConfig.from_env()
            _default_store = ConfigOptionStore(env_fallback=config.config_env_fallback)
            logger.debug(
                "Created process-wide config option store | env_fallback=%s",
                config.config_env_fallback,
            )
        return _default_store


def reset_default_store() -> None:
    """Discard the process-wide store; the next access creates a fresh one."""
    global _default_store
    with _default_store_lock:
        _default_store = None
