#!/usr/bin/env python3
"""
Registry of text splitting strategies.

Maps strategy aliases to splitter instances. Lookups never fail for an
unknown alias: they fall back to the default strategy, and then to the first
registered one, so chunking stays available as long as anything is
registered.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from splitkit.chunking.types import DEFAULT_STRATEGY, FIXED_ALIASES, StrategyName
from splitkit.chunking.unified.base import TextSplitter
from splitkit.chunking.unified.fixed_strategy import FixedSizeTextSplitter
from splitkit.chunking.unified.recursive_strategy import RecursiveTextSplitter

logger = logging.getLogger(__name__)


class TextSplitterRegistry:
    """
    Alias to splitter mapping with a two-level fallback.

    Writers serialize on a lock and publish a fresh read-only snapshot, so
    resolve() reads a consistent mapping without locking. Registration is
    expected at startup; resolution happens on every chunking call.
    """

    def __init__(
        self,
        splitters: Mapping[str, TextSplitter] | Iterable[tuple[str, TextSplitter]] | None = None,
        default_name: str = DEFAULT_STRATEGY,
    ) -> None:
        """
        Initialize the registry.

        Args:
            splitters: Initial splitters, as a mapping or (alias, splitter) pairs
            default_name: Alias used when a requested alias is unknown
        """
        self.default_name = default_name
        self._lock = threading.Lock()
        self._splitters: Mapping[str, TextSplitter] = MappingProxyType({})

        if splitters is not None:
            items = splitters.items() if isinstance(splitters, Mapping) else splitters
            for alias, splitter in items:
                self.register(alias, splitter)

    def register(self, name: str, splitter: TextSplitter) -> None:
        """
        Bind a splitter to an alias, replacing any previous binding.

        Args:
            name: Strategy alias
            splitter: Splitter instance
        """
        with self._lock:
            updated = dict(self._splitters)
            replaced = name in updated
            updated[name] = splitter
            self._splitters = MappingProxyType(updated)

        if replaced:
            logger.info("Replaced text splitter '%s' with %r", name, splitter)
        else:
            logger.info("Registered text splitter '%s' (%r)", name, splitter)

    def resolve(self, name: str | None) -> TextSplitter | None:
        """
        Return the splitter for an alias.

        Falls back to the default alias, then to the first registered
        splitter. Returns None only when nothing is registered; treating that
        as fatal is up to the caller.

        Args:
            name: Requested alias; None behaves like an unknown alias

        Returns:
            A splitter, or None for an empty registry
        """
        splitters = self._splitters

        if name and name in splitters:
            return splitters[name]

        if self.default_name in splitters:
            if name:
                logger.debug("Unknown text splitter '%s', using default '%s'", name, self.default_name)
            return splitters[self.default_name]

        if not splitters:
            logger.warning("No text splitters registered, cannot resolve '%s'", name)
            return None

        fallback_name = next(iter(splitters))
        logger.warning(
            "Neither '%s' nor default '%s' is registered, falling back to '%s'",
            name,
            self.default_name,
            fallback_name,
        )
        return splitters[fallback_name]

    def names(self) -> list[str]:
        """Registered aliases, in registration order."""
        return list(self._splitters)

    def __contains__(self, name: object) -> bool:
        return name in self._splitters

    def __len__(self) -> int:
        return len(self._splitters)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(names={self.names()!r}, default='{self.default_name}')"


def create_default_registry(default_name: str = DEFAULT_STRATEGY) -> TextSplitterRegistry:
    """
    Build a registry holding the built-in strategies.

    The fixed-window splitter is shared between its primary alias and the
    legacy aliases.
    """
    fixed = FixedSizeTextSplitter()
    registry = TextSplitterRegistry(
        [
            (StrategyName.RECURSIVE.value, RecursiveTextSplitter()),
            (StrategyName.FIXED.value, fixed),
        ],
        default_name=default_name,
    )
    for alias in FIXED_ALIASES:
        registry.register(alias, fixed)
    return registry
