"""Line-stream implementation of CaptureSource.

Handheld barcode scanners in keyboard mode "type" each decoded code
followed by Enter, so a text stream (stdin, a serial device opened in
text mode) is a capture source where every line is one identifier.
Blank or non-printable lines are reported as noise.
"""

from __future__ import annotations

from typing import TextIO

from scanreg.domain.model.capture import CaptureConfig, SourceInfo
from scanreg.domain.port.capture_source import (
    CaptureSource,
    IdentifierCallback,
    NoiseCallback,
)

KEYBOARD_WEDGE_FORMAT = "KEYBOARD_WEDGE"


class StreamCaptureSource(CaptureSource):

    def __init__(
        self,
        stream: TextIO,
        source_id: str = "stdin",
        label: str = "Keyboard wedge scanner",
    ) -> None:
        self._stream = stream
        self._info = SourceInfo(source_id=source_id, label=label)
        self._on_identifier: IdentifierCallback | None = None
        self._on_noise: NoiseCallback | None = None

    # --- CaptureSource interface ----------------------------------------------

    def enumerate_sources(self) -> list[SourceInfo]:
        if self._stream.closed:
            return []
        return [self._info]

    def start(
        self,
        source_id: str,
        config: CaptureConfig,
        on_identifier: IdentifierCallback,
        on_noise: NoiseCallback,
    ) -> None:
        if source_id != self._info.source_id:
            raise FileNotFoundError(f"Unknown capture source: {source_id}")
        if self._on_identifier is not None:
            raise BlockingIOError(f"Capture source {source_id} is already in use")
        self._on_identifier = on_identifier
        self._on_noise = on_noise

    def stop(self) -> None:
        self._on_identifier = None
        self._on_noise = None

    # --- Reading --------------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._on_identifier is not None

    def poll(self) -> bool:
        """Read one line and dispatch it.

        Returns False once the stream is exhausted or the source has been
        stopped, True otherwise.
        """
        if not self.running:
            return False

        line = self._stream.readline()
        if not line:
            return False

        text = line.rstrip("\r\n")
        if not text.strip() or not text.isprintable():
            self._on_noise(f"No code in input line {line!r}")
        else:
            self._on_identifier(text, KEYBOARD_WEDGE_FORMAT)
        return True
