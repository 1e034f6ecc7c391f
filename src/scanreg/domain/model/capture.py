"""Capture-side value types: sources, configuration and scan events."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class CaptureState(Enum):
    IDLE = "IDLE"
    ACTIVE = "ACTIVE"


@dataclass(frozen=True)
class SourceInfo:
    """One identifier source as enumerated by the capture collaborator."""

    source_id: str
    label: str = ""


@dataclass(frozen=True)
class ResolutionHint:
    minimum: int
    ideal: int
    maximum: int


@dataclass(frozen=True)
class CaptureConfig:
    """Advisory options passed to the collaborator on start.

    Collaborators may ignore anything they do not support.
    """

    fps: int = 10
    scan_region: tuple[int, int] = (250, 150)
    aspect_ratio: float = 1.777778
    width: ResolutionHint = field(default_factory=lambda: ResolutionHint(640, 1920, 1920))
    height: ResolutionHint = field(default_factory=lambda: ResolutionHint(480, 1080, 1080))
    facing_mode: str = "environment"
    focus_mode: str = "continuous"


@dataclass(frozen=True)
class ScanEvent:
    """A successfully decoded identifier, as recorded in the scan history."""

    sequence: int
    text: str
    format: str
    scanned_at: datetime
