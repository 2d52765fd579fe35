"""
Configuration module for the document splitters.
Reads splitter and embedding settings from environment variables.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_separators() -> Optional[List[str]]:
    raw = os.getenv("SPLITTER_SEPARATORS")
    if not raw:
        return None
    separators = json.loads(raw)
    if not isinstance(separators, list) or not all(
        isinstance(s, str) for s in separators
    ):
        raise ValueError(
            f"SPLITTER_SEPARATORS must be a JSON list of strings, got: {raw}"
        )
    return separators


@dataclass
class SplitterSettings:
    """Splitter settings loaded from environment."""

    # Semantic splitter
    BUFFER_SIZE: int = field(
        default_factory=lambda: int(os.getenv("SPLITTER_BUFFER_SIZE", "0"))
    )
    MIN_CHUNK_SIZE: int = field(
        default_factory=lambda: int(os.getenv("SPLITTER_MIN_CHUNK_SIZE", "0"))
    )
    PERCENTILE: float = field(
        default_factory=lambda: float(os.getenv("SPLITTER_PERCENTILE", "0.9"))
    )
    SEPARATORS: Optional[List[str]] = field(default_factory=_env_separators)

    # Embedding model
    EMBEDDING_MODEL: str = field(
        default_factory=lambda: os.getenv("EMBEDDING_MODEL", "all-MiniLM-L6-v2")
    )
    EMBEDDING_NORMALIZE: bool = field(
        default_factory=lambda: os.getenv("EMBEDDING_NORMALIZE", "true").lower()
        == "true"
    )

    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    def embedding_config(self):
        """Build an EmbeddingConfig for the configured model."""
        from embeddings.embedder import EmbeddingConfig

        return EmbeddingConfig(
            model_name=self.EMBEDDING_MODEL, normalize=self.EMBEDDING_NORMALIZE
        )

    def to_splitter_config(self, embedding):
        """Build a SemanticSplitterConfig around the given embedder."""
        from chunking.semantic_splitter import SemanticSplitterConfig

        return SemanticSplitterConfig(
            embedding=embedding,
            buffer_size=self.BUFFER_SIZE,
            min_chunk_size=self.MIN_CHUNK_SIZE,
            separators=self.SEPARATORS,
            percentile=self.PERCENTILE,
        )


@lru_cache()
def get_settings() -> SplitterSettings:
    """Get cached settings instance."""
    return SplitterSettings()


def configure_logging(level: Optional[str] = None) -> None:
    """Install the standard log format at the configured level."""
    level = level or get_settings().LOG_LEVEL
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)
