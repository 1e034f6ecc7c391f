"""Scan intake: wires a capture session to the registry.

This is where the integration policy lives:

- A scanned code that is already registered stops the scanner, raises a
  single duplicate notification and resets the pending form. Nothing is
  registered.
- A new code is staged in the pending form and attention moves to the
  name field. Scanning continues so the operator can re-scan while
  filling in the form.
- After a successful registration an active scanner is stopped, unless
  the intake was built with ``stop_after_register=False``.

Manual entry (``submit`` with an explicit code) works whether or not a
scanner is running.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from scanreg.application.capture_session import CaptureSession
from scanreg.application.dto import CommandResult
from scanreg.application.notifications import NotificationChannel
from scanreg.application.registry_controller import RegistryController
from scanreg.domain.exceptions import AcquisitionError, DuplicateError
from scanreg.domain.model.capture import ScanEvent
from scanreg.domain.model.product import Product

logger = logging.getLogger(__name__)


@dataclass
class PendingRegistration:
    """The registration form as the operator is filling it in."""

    code: str = ""
    focus: str | None = None  # field that should receive input next

    def reset(self) -> None:
        self.code = ""
        self.focus = None


class ScanIntake:

    def __init__(
        self,
        controller: RegistryController,
        session: CaptureSession,
        notifications: NotificationChannel,
        stop_after_register: bool = True,
    ) -> None:
        self._controller = controller
        self.session = session
        self.notifications = notifications
        self.stop_after_register = stop_after_register
        self.pending = PendingRegistration()

        session.on_identifier = self.handle_identifier
        session.on_acquisition_result = self._handle_acquisition_result

    # --- Scanner controls -----------------------------------------------------

    def start_scanning(self) -> bool:
        return self.session.start()

    def stop_scanning(self) -> None:
        if self.session.is_active:
            self.session.stop()
            self.notifications.info("Scanner stopped")

    # --- Capture events -------------------------------------------------------

    def handle_identifier(self, event: ScanEvent) -> None:
        if not self.session.is_active:
            return

        existing = self._controller.find_by_code(event.text)
        if existing is not None:
            logger.info("Scanned duplicate code %s, stopping capture", existing.code)
            self.session.stop()
            self.pending.reset()
            self.notifications.error(
                f"DUPLICATE: '{existing.name}' with code {existing.code} "
                f"is already registered"
            )
            return

        self.pending.code = event.text
        self.pending.focus = "name"
        self.notifications.success(
            f"NEW: code {event.text.strip()} detected. Fill in the details to register it."
        )

    def _handle_acquisition_result(self, failure: AcquisitionError | None) -> None:
        if failure is None:
            self.notifications.info("Scanner active. Point the camera at the barcode.")
        else:
            self.notifications.error(failure.operator_message)

    # --- Form -----------------------------------------------------------------

    def submit(
        self,
        name: str,
        price: str | float | int,
        code: str | None = None,
    ) -> CommandResult:
        """Register the pending (or explicitly given) code."""
        result = self._controller.register(
            self.pending.code if code is None else code, name, price
        )

        if result.ok:
            product: Product = result.value
            self.pending.reset()
            self.notifications.success(f"REGISTERED: '{product.name}' saved")
            if self.stop_after_register and self.session.is_active:
                self.session.stop()
        elif isinstance(result.error, DuplicateError):
            existing = result.error.existing
            self.pending.reset()
            self.notifications.error(
                f"DUPLICATE: code {existing.code} already belongs to "
                f"'{existing.name}'. It cannot be added again."
            )
        else:
            self.notifications.error(str(result.error))
        return result

    def reset_form(self) -> None:
        self.pending.reset()
        self.notifications.info("Form cleared")
