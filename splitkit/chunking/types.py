"""
Shared chunking types.

Kept free of imports from the strategy modules so the configuration layer and
the registry can both use it without circular imports.
"""

from enum import Enum


class StrategyName(str, Enum):
    """Built-in splitter strategies."""

    FIXED = "fixed"
    RECURSIVE = "recursive"


DEFAULT_STRATEGY = StrategyName.RECURSIVE.value

# Alternative names accepted for the fixed-window strategy
FIXED_ALIASES: tuple[str, ...] = ("character", "fixed_size")
