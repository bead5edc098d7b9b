#!/usr/bin/env python3
"""
Domain-specific exceptions for chunking operations.

The splitting algorithms themselves fall back to usable defaults and never raise
for odd sizes or unknown strategy names. These exceptions cover the remaining
configuration mistakes that callers are expected to surface.
"""

from typing import Any


class ChunkingDomainError(Exception):
    """Base exception for all chunking domain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional details."""
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidConfigurationError(ChunkingDomainError):
    """Raised when chunking parameters are not usable at all."""


class StrategyNotFoundError(ChunkingDomainError, LookupError):
    """Raised when no splitter can be resolved for a strategy name."""

    def __init__(self, strategy_name: str | None) -> None:
        """Initialize with strategy name."""
        super().__init__(
            f"No text splitter available for strategy '{strategy_name}'",
            {"strategy_name": strategy_name},
        )
        self.strategy_name = strategy_name
