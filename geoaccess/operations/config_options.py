"""Set and read driver configuration options.

Thin wrappers over ``ConfigOptionStore`` that default to the process-wide
store.  Pass ``store=`` to work against an isolated instance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from geoaccess.core.config_options import get_default_store

if TYPE_CHECKING:
    from geoaccess.core.config_options import ConfigOptionStore


def set_config_option(
    name: str,
    value: str | None,
    *,
    store: ConfigOptionStore | None = None,
) -> None:
    """Set option *name* to *value*; ``None`` unsets it.

    Raises:
        InvalidArgumentError: If *name* is empty or *value* is neither a
            string nor ``None``.
    """
    (store if store is not None else get_default_store()).set(name, value)


def get_config_option(
    name: str,
    *,
    store: ConfigOptionStore | None = None,
) -> str | None:
    """Return the value of option *name*, or ``None`` if it is not set.

    Raises:
        InvalidArgumentError: If *name* is empty.
    """
    return (store if store is not None else get_default_store()).get(name)
