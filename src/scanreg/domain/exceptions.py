"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the controller can catch them uniformly and hand them back as result
values instead of letting them escape to the UI.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scanreg.domain.model.product import Product


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Registration input is missing or malformed."""


class DuplicateError(DomainException):
    """A product with the same code is already registered."""

    def __init__(self, existing: Product) -> None:
        super().__init__(
            f"Product '{existing.name}' with code {existing.code} "
            f"is already registered"
        )
        self.existing = existing


class ConflictError(DomainException):
    """The stored registry changed between our read and our write."""


class ConfirmationError(DomainException):
    """A destructive operation was confirmed with a wrong or stale token."""


class PersistenceCorruptError(DomainException):
    """The stored registry payload could not be parsed."""


class AcquisitionFailure(Enum):
    NO_SOURCE = "NO_SOURCE"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    SOURCE_BUSY = "SOURCE_BUSY"
    OVERCONSTRAINED = "OVERCONSTRAINED"
    TIMEOUT = "TIMEOUT"
    LOST = "LOST"
    UNKNOWN = "UNKNOWN"


_FAILURE_MESSAGES = {
    AcquisitionFailure.NO_SOURCE: (
        "No camera was detected on this device."
    ),
    AcquisitionFailure.PERMISSION_DENIED: (
        "Camera permission was denied. Allow camera access and try again."
    ),
    AcquisitionFailure.SOURCE_BUSY: (
        "The camera is in use by another application. Close it and try again."
    ),
    AcquisitionFailure.OVERCONSTRAINED: (
        "The camera could not be configured with the requested settings."
    ),
    AcquisitionFailure.TIMEOUT: (
        "The camera did not respond in time."
    ),
    AcquisitionFailure.LOST: (
        "The capture source stopped unexpectedly."
    ),
    AcquisitionFailure.UNKNOWN: (
        "The capture source could not be started."
    ),
}

# Error names reported by common capture backends, mapped to failure kinds.
_NAMED_FAILURES = {
    "NotFoundError": AcquisitionFailure.NO_SOURCE,
    "DevicesNotFoundError": AcquisitionFailure.NO_SOURCE,
    "FileNotFoundError": AcquisitionFailure.NO_SOURCE,
    "NotAllowedError": AcquisitionFailure.PERMISSION_DENIED,
    "PermissionDeniedError": AcquisitionFailure.PERMISSION_DENIED,
    "PermissionError": AcquisitionFailure.PERMISSION_DENIED,
    "NotReadableError": AcquisitionFailure.SOURCE_BUSY,
    "TrackStartError": AcquisitionFailure.SOURCE_BUSY,
    "BlockingIOError": AcquisitionFailure.SOURCE_BUSY,
    "OverconstrainedError": AcquisitionFailure.OVERCONSTRAINED,
    "ConstraintNotSatisfiedError": AcquisitionFailure.OVERCONSTRAINED,
    "TimeoutError": AcquisitionFailure.TIMEOUT,
}


class AcquisitionError(DomainException):
    """A capture source could not be acquired, or was lost while active.

    ``kind`` tells the operator *what* went wrong so the message can be
    actionable; ``detail`` keeps the collaborator's own wording for logs.
    """

    def __init__(self, kind: AcquisitionFailure, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(self.operator_message)

    @property
    def operator_message(self) -> str:
        return (
            f"{_FAILURE_MESSAGES[self.kind]} "
            "You can still enter the code manually."
        )

    @classmethod
    def from_exception(cls, exc: BaseException) -> AcquisitionError:
        """Normalize any collaborator failure into an AcquisitionError."""
        if isinstance(exc, AcquisitionError):
            return exc
        name = getattr(exc, "name", None)
        if not isinstance(name, str) or not name:
            name = type(exc).__name__
        kind = _NAMED_FAILURES.get(name, AcquisitionFailure.UNKNOWN)
        return cls(kind, detail=str(exc) or name)
