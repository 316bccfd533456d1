# core/errors.py


class RaymondError(Exception):
    """Base class for every error raised by raymond."""


class DegenerateVectorError(RaymondError, ValueError):
    """Raised when a zero-length vector is normalized."""

    def __init__(self, message: str = "degenerate direction"):
        super().__init__(message)


class RenderCancelled(RaymondError):
    """Raised when a render is stopped through its cancellation flag."""

    def __init__(self, row: int):
        super().__init__(f"render cancelled before scanline {row}")
        self.row = row


class ConfigurationError(RaymondError, ValueError):
    """Raised for invalid settings (environment values, backend names)."""
