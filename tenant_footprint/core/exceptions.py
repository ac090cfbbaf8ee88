"""Unified exception taxonomy.

Provides a shared base exception hierarchy for the workspace, the
configuration layer, and the provider adapters. Every domain exception
inherits from ``FootprintError`` and carries structured context fields
that enable consistent retry decisions and diagnostics.

The geometry functions (``tenant_footprint.geometry``) never raise: every
input produces a finite result. These exceptions belong to the layers
around them.

Taxonomy categories
-------------------
- ``ValidationError``  : input/contract violations, never retryable.
- ``TransientError``   : temporary failures (network, throttle), retryable.
- ``PermanentError``   : unrecoverable failures, not retryable.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and UI error banners.
"""

from __future__ import annotations


class FootprintError(Exception):
    """Base exception for all tenant-footprint errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred
            (e.g. ``"workspace"``, ``"provider"``).
        code: Machine-readable error code (e.g. ``"UNKNOWN_RECORD"``).
        retryable: Whether the caller may retry the operation.
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
        if isinstance(self, TransientError):
            return "transient"
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


class ValidationError(FootprintError):
    """Input or domain-model validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class TransientError(FootprintError):
    """Temporary failure that may succeed on retry."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(FootprintError):
    """Unrecoverable failure. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]
