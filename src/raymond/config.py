"""Configuration for raymond, read from environment variables."""

import os

from raymond.core.errors import ConfigurationError


def _int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


def _float(name: str, default: float) -> float:
    raw = os.getenv(name, str(default))
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


# Render target
WIDTH = _int("RAYMOND_WIDTH", 320)
HEIGHT = _int("RAYMOND_HEIGHT", 320)
WINDOW_SCALE = _int("RAYMOND_WINDOW_SCALE", 2)
TARGET_FPS = _int("RAYMOND_TARGET_FPS", 30)

# Renderer settings
BACKENDS = ("python", "numba")
BACKEND = os.getenv("RAYMOND_BACKEND", "numba").lower()
ROWS_PER_BAND = _int("RAYMOND_ROWS_PER_BAND", 16)
MAX_DEPTH = _int("RAYMOND_MAX_DEPTH", 100)

# Camera
MOVE_STEP = _float("RAYMOND_MOVE_STEP", 1.0)

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

if BACKEND not in BACKENDS:
    raise ConfigurationError(f"RAYMOND_BACKEND must be one of {BACKENDS}, got {BACKEND!r}")

__all__ = [
    "WIDTH",
    "HEIGHT",
    "WINDOW_SCALE",
    "TARGET_FPS",
    "BACKENDS",
    "BACKEND",
    "ROWS_PER_BAND",
    "MAX_DEPTH",
    "MOVE_STEP",
    "LOG_LEVEL",
    "LOG_FORMAT",
]
