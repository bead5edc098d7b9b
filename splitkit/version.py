"""Centralized version management for splitkit.

The version is read from the installed package metadata. A source checkout
that was never installed reports a placeholder version.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

logger = logging.getLogger(__name__)

_FALLBACK_VERSION = "0.0.0"


@lru_cache(maxsize=1)
def get_version() -> str:
    """Get the current splitkit version.

    Returns:
        The installed version string, or "0.0.0" when not installed.
    """
    try:
        return version("splitkit")
    except PackageNotFoundError:
        logger.warning("Could not determine splitkit version, using fallback")
        return _FALLBACK_VERSION


# Convenience export
__version__ = get_version()
