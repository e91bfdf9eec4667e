"""Call-scoped batch settings and chunk size resolution."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import SettingsError

DEFAULT_CHUNK_SIZE = 100

CHUNK_SIZE_ENV = "LAAKHAY_BATCH_CHUNK_SIZE"
MAX_PAGES_ENV = "LAAKHAY_BATCH_MAX_PAGES"

# Accepted spellings when settings arrive as a plain mapping
_CHUNK_SIZE_KEYS = ("chunk_size", "chunkSize")


class BatchSettings(BaseModel):
    """Options recognised by the chunked executor and paginated accumulator.

    Attributes:
        chunk_size: Items per chunk / page (None = DEFAULT_CHUNK_SIZE)
        max_pages: Maximum number of page fetches (None = unbounded)
    """

    chunk_size: int | None = None
    max_pages: int | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("chunk_size", "max_pages", mode="before")
    @classmethod
    def drop_flags(cls, v: Any) -> Any:
        if isinstance(v, bool):
            return None
        return v

    @field_validator("chunk_size", "max_pages", mode="after")
    @classmethod
    def drop_non_positive(cls, v: int | None) -> int | None:
        """Treat zero and negative values as "not configured"."""
        if v is not None and v <= 0:
            return None
        return v

    @property
    def effective_chunk_size(self) -> int:
        return self.chunk_size or DEFAULT_CHUNK_SIZE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BatchSettings:
        """Build settings from LAAKHAY_BATCH_* environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            BatchSettings with any configured values

        Raises:
            SettingsError: If a variable is set but is not an integer
        """
        env = os.environ if environ is None else environ
        values: dict[str, int] = {}
        for field, var in (("chunk_size", CHUNK_SIZE_ENV), ("max_pages", MAX_PAGES_ENV)):
            raw = env.get(var)
            if raw is None or not raw.strip():
                continue
            try:
                values[field] = int(raw)
            except ValueError as e:
                raise SettingsError(f"{var} must be an integer, got {raw!r}", field, raw) from e
        return cls(**values)


def coerce_settings(settings: Any) -> BatchSettings:
    """Normalise any supported settings carrier into BatchSettings.

    Accepts None, a BatchSettings, a mapping (``chunk_size``/``chunkSize``
    and ``max_pages`` keys), or an object exposing a ``settings`` attribute
    holding one of those.
    """
    if settings is None:
        return BatchSettings()
    if isinstance(settings, BatchSettings):
        return settings
    if isinstance(settings, Mapping):
        chunk_size = None
        for key in _CHUNK_SIZE_KEYS:
            if settings.get(key):
                chunk_size = settings[key]
                break
        return _build(chunk_size=chunk_size, max_pages=settings.get("max_pages"))
    if hasattr(settings, "settings"):
        return coerce_settings(settings.settings)
    raise SettingsError(f"Unsupported settings object: {type(settings).__name__}", value=settings)


def resolve_chunk_size(settings: Any = None) -> int:
    """Resolve the effective chunk size for one call.

    Args:
        settings: Any carrier accepted by coerce_settings

    Returns:
        Positive chunk size, DEFAULT_CHUNK_SIZE when not configured
    """
    return coerce_settings(settings).effective_chunk_size


def _build(**values: Any) -> BatchSettings:
    try:
        return BatchSettings.model_validate(values)
    except ValidationError as e:
        loc = e.errors()[0].get("loc") or ("settings",)
        field = str(loc[0])
        value = values.get(field)
        raise SettingsError(f"{field} must be an integer, got {value!r}", field, value) from e
