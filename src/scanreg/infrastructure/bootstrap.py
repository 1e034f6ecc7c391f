"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from scanreg.application.capture_session import CaptureSession
from scanreg.application.notifications import NotificationChannel
from scanreg.application.registry_controller import RegistryController
from scanreg.application.scan_intake import ScanIntake
from scanreg.domain.port.capture_source import CaptureSource
from scanreg.infrastructure.config import Settings
from scanreg.infrastructure.persistence.json_file_store import JsonFileStore
from scanreg.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(JsonFileStore(settings.data_dir), settings.storage_key)


def registry_controller(settings: Settings) -> RegistryController:
    return RegistryController(product_repository(settings))


def scan_intake(
    settings: Settings,
    source: CaptureSource,
    notifications: NotificationChannel,
    stop_after_register: bool | None = None,
) -> ScanIntake:
    session = CaptureSession(
        source,
        config=settings.capture,
        history_size=settings.history_size,
    )
    return ScanIntake(
        registry_controller(settings),
        session,
        notifications,
        stop_after_register=(
            settings.stop_after_register
            if stop_after_register is None
            else stop_after_register
        ),
    )
