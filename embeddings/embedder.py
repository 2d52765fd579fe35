"""
Embedding capability consumed by the semantic splitter.

The splitter only needs one thing from an embedding backend: one vector
per input string, in input order. Anything with an ``embed_strings``
method satisfies the Embedder protocol; EmbeddingService is the
sentence-transformers backed implementation.
"""

import logging
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    List,
    Optional,
    Protocol,
    Sequence,
    runtime_checkable,
)

import numpy as np

if TYPE_CHECKING:
    from sentence_transformers import SentenceTransformer

logger = logging.getLogger(__name__)


@runtime_checkable
class Embedder(Protocol):
    """Produces one float vector per input text, preserving order and count."""

    def embed_strings(self, texts: List[str]) -> Sequence[Sequence[float]]:
        ...


@dataclass
class EmbeddingConfig:
    """
    Embedding model configuration.

    Distances are only comparable between vectors from the same model,
    so never mix models within one splitting run.
    """

    model_name: str = "all-MiniLM-L6-v2"
    normalize: bool = True
    max_seq_length: int = 512
    batch_size: int = 32


class EmbeddingService:
    """
    Sentence-transformers embedder.

    Usage:
        service = EmbeddingService()
        vectors = service.embed_strings(["text1", "text2"])

        # With custom config
        config = EmbeddingConfig(model_name="BAAI/bge-small-en-v1.5")
        service = EmbeddingService(config=config)
    """

    def __init__(
        self,
        config: Optional[EmbeddingConfig] = None,
        model: Optional["SentenceTransformer"] = None,
    ):
        self.config = config or EmbeddingConfig()
        self._model = model

    @property
    def model(self) -> "SentenceTransformer":
        """Lazy load the model."""
        if self._model is None:
            from sentence_transformers import SentenceTransformer

            logger.info(f"Loading embedding model: {self.config.model_name}")
            self._model = SentenceTransformer(self.config.model_name)
        return self._model

    def preprocess_text(self, text: str) -> str:
        """
        Deterministic text preprocessing.

        Whitespace is collapsed and very long texts are truncated to
        roughly the model's sequence limit.
        """
        text = " ".join(text.split())

        max_chars = self.config.max_seq_length * 4  # Approximate
        if len(text) > max_chars:
            text = text[:max_chars]

        return text

    def embed_strings(self, texts: List[str]) -> np.ndarray:
        """
        Embed a batch of texts.

        Args:
            texts: Texts to embed

        Returns:
            Array of shape (len(texts), dim)
        """
        if not texts:
            return np.zeros((0, 0), dtype=np.float32)

        processed = [self.preprocess_text(t) for t in texts]

        vectors = self.model.encode(
            processed,
            batch_size=self.config.batch_size,
            show_progress_bar=False,
            convert_to_numpy=True,
        )

        if self.config.normalize:
            norms = np.linalg.norm(vectors, axis=1, keepdims=True)
            vectors = vectors / (norms + 1e-10)  # Avoid division by zero

        logger.debug(f"Embedded {len(texts)} texts with {self.config.model_name}")
        return vectors
