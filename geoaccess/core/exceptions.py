"""Unified exception taxonomy.

Every error raised by ``geoaccess`` inherits from ``GeoAccessError`` and
carries structured context fields (stage, code, retryable) so that host
applications can report failures consistently.

Taxonomy categories
-------------------
- ``ValidationError``: malformed, missing or out-of-range input, detected
  before any driver is consulted. Never retryable.
- ``PermanentError``: the operation cannot succeed as requested
  (e.g. no driver could open a path). Not retryable.

A degenerate geotransform is *not* an error: ``inv_geotransform`` reports
it through the status of its result.

Every exception exposes ``to_error_dict()`` for a stable structured error
payload suitable for logging.
"""

from __future__ import annotations


class GeoAccessError(Exception):
    """Base exception for all geoaccess errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred
            (e.g. ``"open"``, ``"geotransform"``).
        code: Machine-readable error code (e.g. ``"DATASET_OPEN_FAILED"``).
        retryable: Whether retrying the same call could succeed.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, PermanentError):
            return "permanent"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeoAccessError):
    """Input validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs["retryable"] = False
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(GeoAccessError):
    """Unrecoverable failure. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class InvalidArgumentError(ValueError, ValidationError):
    """Raised when an operation receives a malformed or out-of-range argument.

    Subclasses ``ValueError`` so callers that only know the standard
    library still catch it.

    Attributes:
        argument: Name of the offending argument.
    """

    default_stage = "arguments"
    default_code = "INVALID_ARGUMENT"

    def __init__(self, message: str, *, argument: str = "", stage: str = "") -> None:
        self.argument = argument
        ValidationError.__init__(self, message, stage=stage)


class DatasetOpenError(PermanentError):
    """Raised when no driver could open a path under the requested mode.

    Attributes:
        path: The path that was requested.
        mode: The caller's mode token (``"r"`` or ``"r+"``).
        attempted: Driver families tried, in order.
    """

    default_stage = "open"
    default_code = "DATASET_OPEN_FAILED"

    def __init__(
        self,
        path: str,
        mode: str,
        attempted: list[str] | None = None,
        message: str = "Error opening dataset",
    ) -> None:
        self.path = path
        self.mode = mode
        self.attempted = list(attempted or [])
        super().__init__(message)

    def to_error_dict(self) -> dict[str, object]:
        payload = super().to_error_dict()
        payload["path"] = self.path
        payload["mode"] = self.mode
        payload["attempted"] = list(self.attempted)
        return payload
