"""Core components."""

from .exceptions import BatchError, SettingsError
from .settings import (
    DEFAULT_CHUNK_SIZE,
    BatchSettings,
    coerce_settings,
    resolve_chunk_size,
)

__all__ = [
    "BatchError",
    "SettingsError",
    "DEFAULT_CHUNK_SIZE",
    "BatchSettings",
    "coerce_settings",
    "resolve_chunk_size",
]
