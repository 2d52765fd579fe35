"""
Embeddings Module.

The semantic splitter consumes embeddings through the Embedder
protocol: ``embed_strings(texts) -> vectors``, one vector per text,
in order.

Usage:
    from embeddings import EmbeddingService

    service = EmbeddingService()
    vectors = service.embed_strings(["text1", "text2"])
"""

from .embedder import Embedder, EmbeddingConfig, EmbeddingService

__all__ = [
    "Embedder",
    "EmbeddingConfig",
    "EmbeddingService",
]
