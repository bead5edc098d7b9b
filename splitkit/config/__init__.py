# splitkit/config/__init__.py
"""
Configuration module for chunking settings.
Exposes a default ChunkingSettings instance built from the environment.
"""

from .base import ChunkingSettings

# Instantiate settings once and export
settings = ChunkingSettings()

__all__ = ["ChunkingSettings", "settings"]
