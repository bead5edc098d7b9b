#!/usr/bin/env python3
"""
Fixed-size sliding window splitting strategy.

Cuts the raw character stream every chunk_size code points, ignoring words
and punctuation. It is the baseline strategy: predictable, fast, and a
fallback for content where the recursive strategy is not wanted.
"""

import logging
from collections.abc import Iterator

from splitkit.chunking.domain.value_objects.chunk_params import DEFAULT_CHUNK_OVERLAP, DEFAULT_CHUNK_SIZE
from splitkit.chunking.types import StrategyName
from splitkit.chunking.unified.base import TextSplitter

logger = logging.getLogger(__name__)


class FixedSizeTextSplitter(TextSplitter):
    """
    Sliding window over the text.

    Consecutive windows start chunk_size - chunk_overlap characters apart.
    Windows are returned verbatim so their offsets stay exact; only windows
    made entirely of whitespace are skipped.
    """

    def __init__(self, name: str = StrategyName.FIXED.value) -> None:
        super().__init__(name)

    def split_text(
        self,
        text: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
    ) -> list[str]:
        if chunk_size <= 0:
            logger.debug("Non-positive chunk_size %d, returning text as a single chunk", chunk_size)
            return [text] if text.strip() else []

        chunks = [
            window
            for window in (text[start:end] for start, end in self.iter_windows(len(text), chunk_size, chunk_overlap))
            if window.strip()
        ]

        logger.debug(
            "Fixed splitter produced %d chunks (size=%d, overlap=%d, length=%d)",
            len(chunks),
            chunk_size,
            chunk_overlap,
            len(text),
        )
        return chunks

    @staticmethod
    def iter_windows(text_length: int, chunk_size: int, chunk_overlap: int) -> Iterator[tuple[int, int]]:
        """
        Yield the (start, end) offsets of every window.

        Args:
            text_length: Length of the text in characters
            chunk_size: Window width; must be positive
            chunk_overlap: Characters shared by consecutive windows

        Yields:
            Half-open offset pairs, in order
        """
        start = 0
        while start < text_length:
            end = min(start + chunk_size, text_length)
            yield start, end

            if end == text_length:
                return

            next_start = end - chunk_overlap
            # Overlap >= size would stall or move backwards; negative overlap would skip text
            if next_start <= start or next_start > end:
                next_start = end
            start = next_start
