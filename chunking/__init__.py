"""
Chunking Module.

Document splitters sharing one contract: ``transform(documents)``
returns the chunks of every document in order, each chunk carrying its
source document's id and a copy of its metadata.

- SemanticSplitter: cuts where adjacent sentence embeddings stay close
  relative to a percentile threshold of the distance distribution
- RecursiveSplitter: separator-driven splitting with size-bounded merging

Usage:
    from chunking import SemanticSplitter, SemanticSplitterConfig
    from embeddings import EmbeddingService

    splitter = SemanticSplitter(
        SemanticSplitterConfig(embedding=EmbeddingService(), buffer_size=1)
    )
    chunks = splitter.transform(documents)
"""

from .distances import (
    calculate_threshold,
    cosine_distances,
    cosine_similarity,
    dot,
    find_cut_points,
)
from .errors import EmbeddingError, SplitterConfigError, SplitterError
from .recursive_splitter import KeepType, RecursiveSplitter, RecursiveSplitterConfig
from .semantic_splitter import (
    SemanticSplitter,
    SemanticSplitterConfig,
    assemble_chunks,
    combine_sentences,
    new_semantic_splitter,
    split_after,
    split_sentences,
)
from .tokens import num_tokens

__all__ = [
    "SemanticSplitter",
    "SemanticSplitterConfig",
    "new_semantic_splitter",
    "split_after",
    "split_sentences",
    "combine_sentences",
    "assemble_chunks",
    "dot",
    "cosine_similarity",
    "cosine_distances",
    "calculate_threshold",
    "find_cut_points",
    "RecursiveSplitter",
    "RecursiveSplitterConfig",
    "KeepType",
    "num_tokens",
    "SplitterError",
    "SplitterConfigError",
    "EmbeddingError",
]
