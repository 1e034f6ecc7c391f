"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from scanreg.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so that summing prices for the registry total never
    picks up floating-point noise (9.99 + 5.00 is exactly 14.99).
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        text = amount.strip() if isinstance(amount, str) else str(amount)
        try:
            return Money(Decimal(text))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class ProductCode:
    """The scanned or typed identifier that makes a product unique.

    Stored trimmed. Comparison is exact and case-sensitive; every
    duplicate check in the system goes through ``matches`` so the capture
    path and the registration path can never disagree.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Product code must be a string, got {type(self.value).__name__}"
            )
        trimmed = self.value.strip()
        if not trimmed:
            raise ValidationError("Product code is required")
        object.__setattr__(self, "value", trimmed)

    def matches(self, candidate: str) -> bool:
        return isinstance(candidate, str) and candidate.strip() == self.value

    def __str__(self) -> str:
        return self.value
