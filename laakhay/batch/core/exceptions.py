"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class BatchError(Exception):
    """Base exception for all library errors.

    Errors raised by user-supplied chunk operations or page fetchers are
    never wrapped in this hierarchy; they propagate unchanged.
    """

    pass


class SettingsError(BatchError):
    """Batch settings could not be interpreted."""

    def __init__(self, message: str, field: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value
