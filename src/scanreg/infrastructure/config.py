"""Runtime settings.

Values come from the environment (a ``.env`` file in the working
directory is loaded first) and can be overridden by CLI options. Callers
should go through ``load_settings`` rather than reading ``os.environ``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from scanreg.domain.model.capture import CaptureConfig

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    storage_key: str = "products"
    notification_ttl: float = 5.0
    history_size: int = 20
    stop_after_register: bool = True
    capture: CaptureConfig = field(default_factory=CaptureConfig)


def load_settings(data_dir: Path | None = None) -> Settings:
    """Build Settings from the environment; *data_dir* wins if given."""
    env_file = find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(env_file, override=False)

    env_dir = os.getenv("SCANREG_DATA_DIR", "").strip()
    return Settings(
        data_dir=data_dir or (Path(env_dir) if env_dir else DEFAULT_DATA_DIR),
        notification_ttl=_get_float("SCANREG_NOTIFICATION_TTL", 5.0),
        history_size=_get_int("SCANREG_HISTORY_SIZE", 20),
        stop_after_register=_get_bool("SCANREG_STOP_AFTER_REGISTER", True),
    )


def _get_float(key: str, default: float) -> float:
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{key} must be positive, got {raw!r}")
    return value


def _get_int(key: str, default: int) -> int:
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{key} must be positive, got {raw!r}")
    return value


def _get_bool(key: str, default: bool) -> bool:
    raw = os.getenv(key, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"{key} must be true or false, got {raw!r}")
