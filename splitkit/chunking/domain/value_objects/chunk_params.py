#!/usr/bin/env python3
"""
Immutable chunking parameters value object.

Sizes are measured in unicode code points. No relation between size and
overlap is enforced here: both strategies stay terminating for any integers,
so only values that are not integers at all are rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from splitkit.chunking.domain.exceptions import InvalidConfigurationError

if TYPE_CHECKING:
    from splitkit.config.base import ChunkingSettings

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200


def _require_int(name: str, value: Any) -> int:
    # bool is an int subclass but never a meaningful size
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(
            f"{name} must be an integer, got {type(value).__name__}",
            {name: value},
        )
    return value


@dataclass(frozen=True)
class ChunkParams:
    """Size and overlap for one splitting call."""

    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP

    def __post_init__(self) -> None:
        _require_int("chunk_size", self.chunk_size)
        _require_int("chunk_overlap", self.chunk_overlap)

    @classmethod
    def from_settings(cls, settings: ChunkingSettings) -> ChunkParams:
        """Build parameters from the configured defaults."""
        return cls(chunk_size=settings.CHUNK_SIZE, chunk_overlap=settings.CHUNK_OVERLAP)

    def with_overrides(self, chunk_size: int | None = None, chunk_overlap: int | None = None) -> ChunkParams:
        """Return a copy where the given non-None values replace the current ones."""
        return ChunkParams(
            chunk_size=self.chunk_size if chunk_size is None else chunk_size,
            chunk_overlap=self.chunk_overlap if chunk_overlap is None else chunk_overlap,
        )

    def to_dict(self) -> dict[str, int]:
        return {"chunk_size": self.chunk_size, "chunk_overlap": self.chunk_overlap}
