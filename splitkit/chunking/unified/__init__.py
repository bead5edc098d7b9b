#!/usr/bin/env python3
"""
Text splitting strategies.

This module provides the splitter contract, the two built-in strategies and
the registry that selects between them by name.
"""

from splitkit.chunking.unified.accumulator import ChunkAccumulator, join_docs
from splitkit.chunking.unified.base import TextSplitter
from splitkit.chunking.unified.fixed_strategy import FixedSizeTextSplitter
from splitkit.chunking.unified.recursive_strategy import RecursiveTextSplitter
from splitkit.chunking.unified.registry import TextSplitterRegistry, create_default_registry
from splitkit.chunking.unified.separators import DEFAULT_SEPARATORS

__all__ = [
    "TextSplitter",
    "ChunkAccumulator",
    "join_docs",
    "DEFAULT_SEPARATORS",
    "FixedSizeTextSplitter",
    "RecursiveTextSplitter",
    "TextSplitterRegistry",
    "create_default_registry",
]
