"""
splitkit: hierarchical text chunking for retrieval pipelines.
"""

from splitkit.chunking.domain import ChunkParams, ChunkingDomainError, InvalidConfigurationError, StrategyNotFoundError
from splitkit.chunking.service import ChunkingService
from splitkit.chunking.unified import (
    FixedSizeTextSplitter,
    RecursiveTextSplitter,
    TextSplitter,
    TextSplitterRegistry,
    create_default_registry,
)
from splitkit.version import __version__

__all__ = [
    "ChunkParams",
    "ChunkingDomainError",
    "ChunkingService",
    "FixedSizeTextSplitter",
    "InvalidConfigurationError",
    "RecursiveTextSplitter",
    "StrategyNotFoundError",
    "TextSplitter",
    "TextSplitterRegistry",
    "__version__",
    "create_default_registry",
]
