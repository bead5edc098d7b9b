#!/usr/bin/env python3
"""
Text splitter base class.

This module provides the single abstract base class for all splitting
strategies. Strategies are stateless between calls: they read only their
arguments and keep call-local buffers, so one instance can serve any number
of concurrent callers.
"""

import asyncio
from abc import ABC, abstractmethod

from splitkit.chunking.domain.value_objects.chunk_params import (
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    ChunkParams,
)


class TextSplitter(ABC):
    """
    Single abstract base class for all splitting strategies.

    Implementations turn a text into an ordered list of non-empty chunk
    strings whose length is measured in unicode code points.
    """

    def __init__(self, name: str) -> None:
        """
        Initialize the strategy with a name.

        Args:
            name: The name of the strategy
        """
        self._name = name

    @property
    def name(self) -> str:
        """Get the strategy name."""
        return self._name

    @abstractmethod
    def split_text(
        self,
        text: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
    ) -> list[str]:
        """
        Split text into chunks.

        Args:
            text: The full text to split
            chunk_size: Target upper bound of each chunk, in characters
            chunk_overlap: Characters of context repeated between consecutive chunks

        Returns:
            Ordered list of chunks
        """

    def split_params(self, text: str, params: ChunkParams) -> list[str]:
        """Split text using a ChunkParams value object."""
        return self.split_text(text, params.chunk_size, params.chunk_overlap)

    async def split_text_async(
        self,
        text: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
    ) -> list[str]:
        """
        Asynchronous splitting.

        Splitting is CPU-bound, so it runs in the default executor to keep
        the event loop responsive.
        """
        if not text:
            return []

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None,
            self.split_text,
            text,
            chunk_size,
            chunk_overlap,
        )

    def __repr__(self) -> str:
        """String representation of the strategy."""
        return f"{self.__class__.__name__}(name='{self._name}')"
