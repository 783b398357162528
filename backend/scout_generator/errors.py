from __future__ import annotations

from typing import Optional


class ScoutGeneratorError(Exception):
    """Base class for errors raised by the scout generator."""


class ValidationError(ScoutGeneratorError):
    """Required request input is missing or malformed."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class PersistenceWarning(ScoutGeneratorError):
    """The persistence sink could not store a generated player. Recorded, never raised."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
