"""Abstract capture collaborator.

Whatever turns the physical world into identifier strings (a camera with
a barcode decoder, a handheld scanner in keyboard mode) is plugged in
behind this interface. Failures are raised as ordinary exceptions; the
capture session normalizes them into AcquisitionError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from scanreg.domain.model.capture import CaptureConfig, SourceInfo

IdentifierCallback = Callable[[str, str], None]
NoiseCallback = Callable[[str], None]


class CaptureSource(ABC):

    @abstractmethod
    def enumerate_sources(self) -> list[SourceInfo]:
        """Return every source currently available. May be empty."""

    @abstractmethod
    def start(
        self,
        source_id: str,
        config: CaptureConfig,
        on_identifier: IdentifierCallback,
        on_noise: NoiseCallback,
    ) -> None:
        """Open *source_id* and begin delivering decoded identifiers.

        ``on_identifier(text, format)`` is called once per decoded symbol;
        ``on_noise(message)`` for per-frame decode failures.
        """

    @abstractmethod
    def stop(self) -> None:
        """Release the source."""
