"""Shared test configuration and fixtures."""

import os

import pytest

from splitkit.chunking.unified.registry import TextSplitterRegistry, create_default_registry
from splitkit.config import ChunkingSettings


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove SPLITKIT_ variables so settings fall back to their defaults."""
    for key in list(os.environ):
        if key.startswith("SPLITKIT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def settings(clean_env: None) -> ChunkingSettings:
    return ChunkingSettings(_env_file=None)


@pytest.fixture()
def registry() -> TextSplitterRegistry:
    return create_default_registry()
