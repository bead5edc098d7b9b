"""
Chunking domain layer: parameters and business errors.
"""

from .exceptions import ChunkingDomainError, InvalidConfigurationError, StrategyNotFoundError
from .value_objects import ChunkParams

__all__ = [
    "ChunkParams",
    "ChunkingDomainError",
    "InvalidConfigurationError",
    "StrategyNotFoundError",
]
