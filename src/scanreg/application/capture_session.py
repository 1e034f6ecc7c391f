"""Capture Session: lifecycle of one identifier source.

The session is an explicit object owned by whoever composes the app, not
module-level state. It wraps a CaptureSource collaborator and turns its
callbacks into a small state machine:

    IDLE   --start()-------------------> ACTIVE   (source acquired)
    IDLE   --start()-------------------> IDLE     (failure reported)
    ACTIVE --identifier(text, format)--> ACTIVE   (forwarded upward)
    ACTIVE --stop()--------------------> IDLE
    ACTIVE --acquisition_lost(reason)--> IDLE     (failure reported)

Collaborator exceptions never escape: they are normalized into
AcquisitionError and handed to ``on_acquisition_result``.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from datetime import datetime

from scanreg.application.register_product import utc_now
from scanreg.domain.exceptions import AcquisitionError, AcquisitionFailure
from scanreg.domain.model.capture import CaptureConfig, CaptureState, ScanEvent, SourceInfo
from scanreg.domain.port.capture_source import CaptureSource
from scanreg.domain.service.source_selection import choose_source

logger = logging.getLogger(__name__)

IdentifierHandler = Callable[[ScanEvent], None]
AcquisitionHandler = Callable[["AcquisitionError | None"], None]

DEFAULT_HISTORY_SIZE = 20


class CaptureSession:

    def __init__(
        self,
        source: CaptureSource,
        config: CaptureConfig | None = None,
        on_identifier: IdentifierHandler | None = None,
        on_acquisition_result: AcquisitionHandler | None = None,
        history_size: int = DEFAULT_HISTORY_SIZE,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._source = source
        self._config = config or CaptureConfig()
        self.on_identifier = on_identifier
        self.on_acquisition_result = on_acquisition_result
        self._clock = clock

        self.state = CaptureState.IDLE
        self.active_source: SourceInfo | None = None
        self.last_failure: AcquisitionError | None = None
        self.scan_count = 0
        self.noise_count = 0
        self.history: deque[ScanEvent] = deque(maxlen=history_size)

    @property
    def is_active(self) -> bool:
        return self.state is CaptureState.ACTIVE

    # --- Lifecycle ------------------------------------------------------------

    def start(self) -> bool:
        """Acquire a source and begin capturing.

        Returns True if the session is ACTIVE afterwards. Starting an
        already active session is a no-op.
        """
        if self.is_active:
            return True

        try:
            source = choose_source(self._source.enumerate_sources())
            logger.debug("Starting capture on %s (%s)", source.source_id, source.label)
            self._source.start(
                source.source_id,
                self._config,
                self._handle_identifier,
                self._handle_noise,
            )
        except Exception as exc:
            failure = AcquisitionError.from_exception(exc)
            logger.warning("Capture acquisition failed: %s (%s)", failure.kind.value, failure.detail)
            self._report(failure)
            return False

        self.state = CaptureState.ACTIVE
        self.active_source = source
        self._report(None)
        return True

    def stop(self) -> bool:
        """Release the source and return to IDLE.

        The session is IDLE afterwards even if the collaborator fails to
        tear down; such failures are only logged. Returns True on a clean
        stop, False if teardown raised or the session was not active.
        """
        if not self.is_active:
            return False

        self.state = CaptureState.IDLE
        self.active_source = None
        try:
            self._source.stop()
        except Exception:
            logger.warning("Capture source failed to stop cleanly", exc_info=True)
            return False
        logger.debug("Capture stopped")
        return True

    def acquisition_lost(self, reason: str = "") -> None:
        """Called by the collaborator when an active source goes away."""
        if not self.is_active:
            return
        self.state = CaptureState.IDLE
        self.active_source = None
        failure = AcquisitionError(AcquisitionFailure.LOST, detail=reason)
        logger.warning("Capture source lost: %s", reason or "no reason given")
        self._report(failure)

    # --- Collaborator callbacks -----------------------------------------------

    def _handle_identifier(self, text: str, format_name: str) -> None:
        # Events may still be in flight after stop(); drop them.
        if not self.is_active:
            return

        self.scan_count += 1
        event = ScanEvent(
            sequence=self.scan_count,
            text=text,
            format=format_name or "UNKNOWN",
            scanned_at=self._clock(),
        )
        self.history.appendleft(event)
        if self.on_identifier is not None:
            self.on_identifier(event)

    def _handle_noise(self, message: str) -> None:
        # Decode misses arrive for nearly every frame.
        self.noise_count += 1

    def _report(self, failure: AcquisitionError | None) -> None:
        self.last_failure = failure
        if self.on_acquisition_result is not None:
            self.on_acquisition_result(failure)
