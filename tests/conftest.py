"""
Shared pytest fixtures for the splitter tests.

Provides deterministic and random fake embedders so no model is
ever downloaded during the test run.
"""

import hashlib
from typing import List

import numpy as np
import pytest

from shared.schemas import Document


class HashEmbedder:
    """Repeatable embedder: the same text always maps to the same vector."""

    def __init__(self, dim: int = 5):
        self.dim = dim
        self.calls: List[List[str]] = []

    def embed_strings(self, texts: List[str]) -> List[List[float]]:
        self.calls.append(list(texts))
        vectors = []
        for text in texts:
            seed = int(hashlib.md5(text.encode("utf-8")).hexdigest()[:8], 16)
            rng = np.random.default_rng(seed)
            vectors.append(rng.random(self.dim).tolist())
        return vectors


class RandomEmbedder:
    """Fresh random vectors on every call."""

    def __init__(self, dim: int = 5):
        self.dim = dim
        self._rng = np.random.default_rng()

    def embed_strings(self, texts: List[str]) -> np.ndarray:
        return self._rng.random((len(texts), self.dim))


class FailingEmbedder:
    def __init__(self, error: Exception):
        self.error = error

    def embed_strings(self, texts: List[str]):
        raise self.error


class ShortEmbedder:
    """Breaks the contract by returning one vector too few."""

    def embed_strings(self, texts: List[str]) -> List[List[float]]:
        return [[1.0, 0.0]] * (len(texts) - 1)


@pytest.fixture
def hash_embedder():
    return HashEmbedder()


@pytest.fixture
def random_embedder():
    return RandomEmbedder()


@pytest.fixture
def failing_embedder():
    return FailingEmbedder(RuntimeError("embedding service unavailable"))


@pytest.fixture
def short_embedder():
    return ShortEmbedder()


@pytest.fixture
def numbered_text():
    """Six 11-character sentences separated by periods."""
    return ".".join(["1234567890"] * 6)


@pytest.fixture
def sample_documents():
    return [
        Document(
            id="doc_001",
            content=(
                "Cats purr when content. Dogs wag their tails.\n"
                "Stocks fell sharply today! Bonds rallied? Markets closed."
            ),
            metadata={"tenant": "acme", "source": "notes.txt"},
        ),
        Document(
            id="doc_002",
            content="A single line without terminators",
            metadata={"tenant": "acme"},
        ),
        Document(
            id="doc_003",
            content="First point. Second point. Third point. Fourth point.",
        ),
    ]
