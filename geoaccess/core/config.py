"""Package settings loaded from environment variables.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if a value is out of
    its valid range, so bad settings surface at startup rather than on
    the first ``open`` call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from geoaccess.core.constants import DEFAULT_PROBE_ORDER
from geoaccess.core.exceptions import GeoAccessError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


class ConfigValidationError(GeoAccessError):
    """Raised when a setting is out of its valid range.

    Attributes:
        key: The environment variable that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class GeoAccessConfig:
    """Immutable package settings.

    Attributes:
        probe_order: Driver families tried by the open resolver, in order.
        config_env_fallback: When true, ``get_config_option`` falls back to
            the process environment for options that were never set.
    """

    probe_order: tuple[str, ...] = DEFAULT_PROBE_ORDER
    config_env_fallback: bool = False

    @classmethod
    def from_env(cls) -> GeoAccessConfig:
        """Load and validate settings from environment variables.

        Raises:
            ConfigValidationError: If the probe order is empty or repeats a
                family, or the fallback flag is not a recognised boolean.
        """
        raw_order = os.getenv("GEOACCESS_PROBE_ORDER", ",".join(DEFAULT_PROBE_ORDER))
        probe_order = tuple(part.strip() for part in raw_order.split(",") if part.strip())

        config = cls(
            probe_order=probe_order,
            config_env_fallback=_parse_bool(
                "GEOACCESS_CONFIG_ENV_FALLBACK",
                os.getenv("GEOACCESS_CONFIG_ENV_FALLBACK", "false"),
            ),
        )
        _validate(config)
        return config


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be a boolean (true/false, 1/0, yes/no)")


def _validate(config: GeoAccessConfig) -> None:
    """Validate settings.  Raises ``ConfigValidationError``."""
    if not config.probe_order:
        raise ConfigValidationError(
            "GEOACCESS_PROBE_ORDER",
            config.probe_order,
            "must name at least one driver family",
        )

    if len(set(config.probe_order)) != len(config.probe_order):
        raise ConfigValidationError(
            "GEOACCESS_PROBE_ORDER",
            ",".join(config.probe_order),
            "must not repeat a driver family",
        )
