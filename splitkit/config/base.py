# splitkit/config/base.py

from pydantic_settings import BaseSettings, SettingsConfigDict

from splitkit.chunking.domain.value_objects.chunk_params import DEFAULT_CHUNK_OVERLAP, DEFAULT_CHUNK_SIZE
from splitkit.chunking.types import DEFAULT_STRATEGY


class ChunkingSettings(BaseSettings):
    """
    Default chunking configuration.
    Every value can be overridden with a SPLITKIT_-prefixed environment variable.
    """

    # Chunking defaults (character counts)
    CHUNK_SIZE: int = DEFAULT_CHUNK_SIZE
    CHUNK_OVERLAP: int = DEFAULT_CHUNK_OVERLAP
    CHUNKING_STRATEGY: str = DEFAULT_STRATEGY

    # Entry point plugins (group "splitkit.text_splitters")
    ENABLE_PLUGINS: bool = True

    # Logging level used by the command line entry point
    LOG_LEVEL: str = "INFO"

    # Pydantic model config
    model_config = SettingsConfigDict(
        env_prefix="SPLITKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
