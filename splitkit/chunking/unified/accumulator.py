#!/usr/bin/env python3
"""
Greedy chunk packing with a sliding overlap window.

A ChunkAccumulator is the pending buffer of one packing pass: segments are
appended while they fit, the buffer is joined into a chunk when the next
segment would not fit, and the oldest segments are then evicted until what is
left is small enough to seed the next chunk as overlap.
"""

from collections import deque
from collections.abc import Iterable


def join_docs(docs: Iterable[str], separator: str) -> str | None:
    """
    Join segments with the separator and trim surrounding whitespace.

    Args:
        docs: Segments in order
        separator: Separator the segments were split on

    Returns:
        The joined text, or None if nothing but whitespace remains
    """
    text = separator.join(docs).strip()
    return text or None


class ChunkAccumulator:
    """
    Pending buffer for a single separator level.

    ``total_len`` mirrors how the buffer will be rejoined: every buffered
    segment contributes its own length plus one separator length.
    """

    def __init__(self, separator: str, chunk_size: int, chunk_overlap: int) -> None:
        self.separator = separator
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._separator_len = len(separator)
        self._docs: deque[str] = deque()
        self.total_len = 0

    def fits(self, segment_len: int) -> bool:
        """Check whether a segment of this length can join the pending chunk."""
        return self.total_len + segment_len + self._separator_len <= self.chunk_size

    def append(self, segment: str) -> None:
        self._docs.append(segment)
        self.total_len += len(segment) + self._separator_len

    def evict_for(self, segment_len: int) -> None:
        """
        Drop the oldest segments after a flush.

        Eviction continues while the buffer is above the overlap budget or the
        incoming segment still would not fit next to it. Whole segments are
        removed, so the retained overlap can be smaller than chunk_overlap.
        """
        while self._docs and (
            self.total_len > self.chunk_overlap or self.total_len + segment_len > self.chunk_size
        ):
            removed = self._docs.popleft()
            self.total_len -= len(removed) + self._separator_len

    def join(self) -> str | None:
        return join_docs(self._docs, self.separator)

    def __len__(self) -> int:
        return len(self._docs)

    def __bool__(self) -> bool:
        return bool(self._docs)

    def __repr__(self) -> str:
        return (
            f"ChunkAccumulator(separator={self.separator!r}, segments={len(self._docs)}, "
            f"total_len={self.total_len})"
        )
