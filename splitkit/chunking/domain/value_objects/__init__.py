"""Value objects for chunking."""

from .chunk_params import DEFAULT_CHUNK_OVERLAP, DEFAULT_CHUNK_SIZE, ChunkParams

__all__ = ["ChunkParams", "DEFAULT_CHUNK_SIZE", "DEFAULT_CHUNK_OVERLAP"]
