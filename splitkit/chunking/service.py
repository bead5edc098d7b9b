#!/usr/bin/env python3
"""
High-level chunking service.

Combines the splitter registry with the configured defaults so ingestion
code can ask for chunks without knowing which strategy or sizes are active.
"""

from __future__ import annotations

import logging

from splitkit.chunking.domain.exceptions import StrategyNotFoundError
from splitkit.chunking.domain.value_objects.chunk_params import ChunkParams
from splitkit.chunking.unified.base import TextSplitter
from splitkit.chunking.unified.registry import TextSplitterRegistry, create_default_registry
from splitkit.config.base import ChunkingSettings

logger = logging.getLogger(__name__)


class ChunkingService:
    """Splits documents using the configured strategy, size and overlap."""

    def __init__(
        self,
        registry: TextSplitterRegistry | None = None,
        settings: ChunkingSettings | None = None,
    ) -> None:
        if settings is None:
            from splitkit.config import settings as default_settings

            settings = default_settings

        self.settings = settings
        self.registry = registry if registry is not None else create_default_registry()

    def resolve_splitter(self, strategy: str | None = None) -> TextSplitter:
        """
        Return the splitter for a strategy, defaulting to the configured one.

        Raises:
            StrategyNotFoundError: If the registry is empty
        """
        name = strategy or self.settings.CHUNKING_STRATEGY
        splitter = self.registry.resolve(name)
        if splitter is None:
            raise StrategyNotFoundError(name)
        return splitter

    def get_splitter(self) -> TextSplitter:
        """Return the splitter for the configured strategy."""
        return self.resolve_splitter()

    def resolve_params(self, size: int | None = None, overlap: int | None = None) -> ChunkParams:
        """Merge explicit values over the configured size and overlap."""
        return ChunkParams.from_settings(self.settings).with_overrides(size, overlap)

    def chunk_text(
        self,
        text: str,
        size: int | None = None,
        overlap: int | None = None,
        strategy: str | None = None,
    ) -> list[str]:
        """
        Split text using the configured settings for anything not given.

        Args:
            text: Text to split
            size: Chunk size override, in characters
            overlap: Chunk overlap override, in characters
            strategy: Strategy alias override

        Returns:
            Ordered list of chunks
        """
        splitter = self.resolve_splitter(strategy)
        params = self.resolve_params(size, overlap)

        chunks = splitter.split_params(text, params)
        logger.debug(
            "Chunked %d characters into %d chunks with '%s' (%s)",
            len(text),
            len(chunks),
            splitter.name,
            params.to_dict(),
        )
        return chunks

    async def chunk_text_async(
        self,
        text: str,
        size: int | None = None,
        overlap: int | None = None,
        strategy: str | None = None,
    ) -> list[str]:
        """Asynchronous variant of chunk_text."""
        splitter = self.resolve_splitter(strategy)
        params = self.resolve_params(size, overlap)
        return await splitter.split_text_async(text, params.chunk_size, params.chunk_overlap)
