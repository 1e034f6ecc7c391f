"""Data Transfer Objects: plain containers that cross layer boundaries.

Everything handed to the UI/CLI is frozen, so callers can render it
freely without reaching back into registry state.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from scanreg.domain.exceptions import DomainException


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a registry command: either a value or a domain error."""

    value: Any = None
    error: DomainException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RegistrySummary:
    count: int
    total_value: Decimal

    @property
    def formatted_total(self) -> str:
        return f"${self.total_value:.2f}"
