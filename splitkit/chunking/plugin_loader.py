#!/usr/bin/env python3
"""Runtime loader for external text splitter plugins.

Plugins register an entry point under the group ``splitkit.text_splitters``.
The entry point name becomes the strategy alias. Each entry point should
resolve to one of:

    - a TextSplitter subclass (instantiated without arguments)
    - a TextSplitter instance
    - a callable returning a TextSplitter instance
"""

from __future__ import annotations

import logging
from importlib import metadata
from typing import Any

from splitkit.chunking.unified.base import TextSplitter
from splitkit.chunking.unified.registry import TextSplitterRegistry

logger = logging.getLogger(__name__)


ENTRYPOINT_GROUP = "splitkit.text_splitters"


def _should_enable_plugins() -> bool:
    """Check the settings flag that allows disabling plugin loading."""

    from splitkit.config import settings

    return settings.ENABLE_PLUGINS


def _coerce_splitter(obj: Any) -> TextSplitter | None:
    """Return a splitter instance for a loaded entry point object."""

    if isinstance(obj, TextSplitter):
        return obj
    if isinstance(obj, type):
        return obj() if issubclass(obj, TextSplitter) else None
    if callable(obj):
        maybe_splitter = obj()
        if isinstance(maybe_splitter, TextSplitter):
            return maybe_splitter
    return None


def load_splitter_plugins(registry: TextSplitterRegistry, enabled: bool | None = None) -> list[str]:
    """
    Discover plugin splitters via entry points and register them.

    Args:
        registry: Registry to add the plugins to
        enabled: Overrides the ENABLE_PLUGINS setting when given

    Returns:
        List of aliases successfully registered.
    """

    if enabled is None:
        enabled = _should_enable_plugins()
    if not enabled:
        logger.info("Text splitter plugins disabled")
        return []

    try:
        entry_points = metadata.entry_points(group=ENTRYPOINT_GROUP)
    except Exception as exc:  # pragma: no cover
        logger.warning("Unable to query entry points for text splitter plugins: %s", exc)
        return []

    registered: list[str] = []

    for ep in entry_points:
        try:
            splitter = _coerce_splitter(ep.load())
            if splitter is None:
                raise TypeError(f"Entry point {ep.name} did not resolve to a TextSplitter.")

            registry.register(ep.name, splitter)
            registered.append(ep.name)
            logger.info("Registered text splitter plugin '%s' (%s)", ep.name, ep.value)
        except Exception as exc:
            logger.warning("Failed to load text splitter plugin %s: %s", getattr(ep, "name", "unknown"), exc)
            continue

    return registered
