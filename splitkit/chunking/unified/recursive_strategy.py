#!/usr/bin/env python3
"""
Recursive text splitting strategy.

Splits text on a hierarchy of separators (paragraphs, lines, words,
characters), packing neighbouring segments into chunks and descending to a
finer separator only for segments that are still too large on their own.
This keeps as much semantic context together as chunk_size allows.
"""

import logging
from collections.abc import Sequence

from splitkit.chunking.domain.value_objects.chunk_params import DEFAULT_CHUNK_OVERLAP, DEFAULT_CHUNK_SIZE
from splitkit.chunking.types import StrategyName
from splitkit.chunking.unified.accumulator import ChunkAccumulator, join_docs
from splitkit.chunking.unified.base import TextSplitter
from splitkit.chunking.unified.separators import CHARACTER_SEPARATOR, DEFAULT_SEPARATORS

logger = logging.getLogger(__name__)


class RecursiveTextSplitter(TextSplitter):
    """
    Recursive separator-hierarchy splitting strategy.

    A chunk only exceeds chunk_size when it comes from an atomic segment, one
    that no remaining separator can subdivide. With the default hierarchy
    that cannot happen, because the last separator splits per character.
    """

    def __init__(
        self,
        separators: Sequence[str] = DEFAULT_SEPARATORS,
        name: str = StrategyName.RECURSIVE.value,
    ) -> None:
        """
        Initialize the recursive splitting strategy.

        Args:
            separators: Separators from most to least preferred
            name: Alias the strategy is known by
        """
        super().__init__(name)
        self.separators: tuple[str, ...] = tuple(separators)

    def split_text(
        self,
        text: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
    ) -> list[str]:
        """
        Recursively split text into chunks.

        Args:
            text: The text to split
            chunk_size: Maximum chunk length in characters
            chunk_overlap: Overlap budget between consecutive chunks

        Returns:
            Ordered list of trimmed, non-empty chunks
        """
        if not text:
            return []

        if chunk_size <= 0:
            logger.debug("Non-positive chunk_size %d, returning text as a single chunk", chunk_size)
            doc = join_docs([text], CHARACTER_SEPARATOR)
            return [doc] if doc is not None else []

        chunks = self._split_at(text, self.separators, chunk_size, chunk_overlap)

        logger.debug(
            "Recursive splitter produced %d chunks (size=%d, overlap=%d, length=%d)",
            len(chunks),
            chunk_size,
            chunk_overlap,
            len(text),
        )
        return chunks

    @staticmethod
    def _select_separator(text: str, separators: Sequence[str]) -> tuple[str, tuple[str, ...]] | None:
        """
        Pick the first usable separator for this text.

        Returns:
            The separator and the separators after it, or None when none of
            the remaining separators occurs in the text
        """
        for index, separator in enumerate(separators):
            if separator == CHARACTER_SEPARATOR or separator in text:
                return separator, tuple(separators[index + 1 :])
        return None

    @staticmethod
    def _segment(text: str, separator: str) -> list[str]:
        """Split text on the separator, dropping empty segments."""
        splits = list(text) if separator == CHARACTER_SEPARATOR else text.split(separator)
        return [s for s in splits if s]

    def _split_at(
        self,
        text: str,
        separators: Sequence[str],
        chunk_size: int,
        chunk_overlap: int,
    ) -> list[str]:
        """
        Split text with the best separator of the remaining hierarchy.

        Args:
            text: Text to split
            separators: Remaining separators in priority order
            chunk_size: Maximum chunk length in characters
            chunk_overlap: Overlap budget in characters

        Returns:
            Chunks for this text, in order
        """
        selected = self._select_separator(text, separators)
        if selected is None:
            # Atomic segment: emitted whole rather than cut mid-token
            doc = join_docs([text], CHARACTER_SEPARATOR)
            return [doc] if doc is not None else []

        separator, next_separators = selected
        final_chunks: list[str] = []
        accumulator = ChunkAccumulator(separator, chunk_size, chunk_overlap)

        for segment in self._segment(text, separator):
            segment_len = len(segment)

            if accumulator.fits(segment_len):
                accumulator.append(segment)
                continue

            if accumulator:
                doc = accumulator.join()
                if doc is not None:
                    final_chunks.append(doc)
                accumulator.evict_for(segment_len)

            if segment_len > chunk_size:
                # Too large on its own: descend one separator level
                final_chunks.extend(self._split_at(segment, next_separators, chunk_size, chunk_overlap))
            else:
                accumulator.append(segment)

        doc = accumulator.join()
        if doc is not None:
            final_chunks.append(doc)

        return final_chunks

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', separators={list(self.separators)!r})"
