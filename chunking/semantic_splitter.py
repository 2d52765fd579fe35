"""
Semantic splitting driven by embedding distances.

Pipeline per document:
    text -> sentence units -> context windows -> embeddings
         -> adjacent cosine distances -> percentile threshold
         -> cut points -> chunks (short chunks merged forward)

Tuning:
- buffer_size: neighbours on each side embedded with a sentence.
  Larger windows smooth out single-sentence noise.
- percentile: higher values accept fewer cut points, giving longer chunks.
- min_chunk_size: chunks below this length are merged into the next one.
  Only the final chunk of a document may be shorter.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from embeddings.embedder import Embedder
from shared.schemas import Document

from .distances import calculate_threshold, cosine_distances, find_cut_points
from .errors import EmbeddingError, SplitterConfigError, SplitterError

logger = logging.getLogger(__name__)

DEFAULT_SEPARATORS = ("\n", ".", "?", "!")
DEFAULT_PERCENTILE = 0.9


@dataclass(frozen=True)
class SemanticSplitterConfig:
    """Configuration for semantic splitting."""

    embedding: Optional[Embedder] = None
    buffer_size: int = 0
    min_chunk_size: int = 0
    separators: Optional[Sequence[str]] = None
    length_function: Optional[Callable[[str], int]] = None
    percentile: float = DEFAULT_PERCENTILE

    def resolved(self) -> "SemanticSplitterConfig":
        """
        Validate the config and fill in defaults.

        Raises:
            SplitterConfigError: If the embedder is missing or a value is
                out of range
        """
        if self.embedding is None:
            raise SplitterConfigError("embedding is required")
        if self.buffer_size < 0:
            raise SplitterConfigError(
                f"buffer_size must be >= 0, got {self.buffer_size}"
            )
        if self.min_chunk_size < 0:
            raise SplitterConfigError(
                f"min_chunk_size must be >= 0, got {self.min_chunk_size}"
            )

        percentile = self.percentile or DEFAULT_PERCENTILE
        if not 0 < percentile <= 1:
            raise SplitterConfigError(
                f"percentile must be in (0, 1], got {self.percentile}"
            )

        return SemanticSplitterConfig(
            embedding=self.embedding,
            buffer_size=self.buffer_size,
            min_chunk_size=self.min_chunk_size,
            separators=tuple(self.separators or DEFAULT_SEPARATORS),
            length_function=self.length_function or len,
            percentile=percentile,
        )


def split_after(text: str, separator: str) -> List[str]:
    """
    Split text after every occurrence of separator, keeping the separator.

    An empty separator splits into single characters.

    Example:
        >>> split_after("a.b.", ".")
        ['a.', 'b.', '']
    """
    if separator == "":
        return list(text) if text else [text]

    parts = text.split(separator)
    return [p + separator for p in parts[:-1]] + [parts[-1]]


def split_sentences(text: str, separators: Sequence[str]) -> List[str]:
    """
    Split text into sentence units, one separator at a time.

    Each separator is applied to every unit produced by the previous
    ones, so earlier separators take priority. Joining the result
    always reproduces the original text.

    Args:
        text: Document text
        separators: Separators in priority order

    Returns:
        Non-empty list of sentence units
    """
    sentences = [text]
    for separator in separators:
        sentences = [unit for s in sentences for unit in split_after(s, separator)]
    return sentences


def combine_sentences(sentences: Sequence[str], buffer_size: int) -> List[str]:
    """
    Join each sentence with up to buffer_size neighbours on either side.

    Windows are clipped at the document boundaries.
    """
    combined = []
    for i in range(len(sentences)):
        start = max(0, i - buffer_size)
        combined.append("".join(sentences[start : i + buffer_size + 1]))
    return combined


def assemble_chunks(
    sentences: Sequence[str],
    cut_points: Sequence[int],
    min_chunk_size: int = 0,
    length_function: Callable[[str], int] = len,
) -> List[str]:
    """
    Build chunks from sentence units and cut points.

    A cut that would produce a chunk shorter than min_chunk_size is
    skipped, so the short span merges into the following chunk. The
    text after the last accepted cut is always emitted.

    Args:
        sentences: Sentence units in order
        cut_points: Ascending sentence indices to cut before
        min_chunk_size: Minimum length of every chunk but the last
        length_function: Length measure for min_chunk_size

    Returns:
        Chunk texts covering all sentences in order
    """
    chunks = []
    start = 0

    for cut in cut_points:
        chunk = "".join(sentences[start:cut])
        if length_function(chunk) < min_chunk_size:
            continue
        chunks.append(chunk)
        start = cut

    chunks.append("".join(sentences[start:]))
    return chunks


class SemanticSplitter:
    """
    Splits documents where adjacent sentence embeddings stay close.

    Stateless after construction; one instance can serve concurrent
    transform calls on disjoint document batches.

    Usage:
        splitter = SemanticSplitter(
            SemanticSplitterConfig(embedding=EmbeddingService(), buffer_size=1)
        )
        chunks = splitter.transform(documents)
    """

    def __init__(self, config: SemanticSplitterConfig):
        self.config = config.resolved()

    def get_type(self) -> str:
        return "SemanticSplitter"

    def _embed(self, texts: List[str]) -> List[Sequence[float]]:
        try:
            vectors = list(self.config.embedding.embed_strings(texts))
        except Exception as e:
            raise EmbeddingError(f"embedding failed: {e}") from e

        if len(vectors) != len(texts):
            raise EmbeddingError(
                f"embedder returned {len(vectors)} vectors for {len(texts)} texts"
            )
        return vectors

    def split_text(self, text: str) -> List[str]:
        """
        Split one text into semantic chunks.

        Text without any separator comes back whole, and the embedder
        is not called.

        Raises:
            EmbeddingError: If the embedder fails or miscounts its output
        """
        config = self.config
        sentences = split_sentences(text, config.separators)
        if len(sentences) == 1:
            return sentences

        combined = combine_sentences(sentences, config.buffer_size)
        vectors = self._embed(combined)

        distances = cosine_distances(vectors)
        threshold = calculate_threshold(distances, config.percentile)
        cut_points = find_cut_points(distances, threshold)
        logger.debug(
            f"{len(sentences)} sentences, threshold {threshold:.4f}, "
            f"{len(cut_points)} cut points"
        )

        return assemble_chunks(
            sentences, cut_points, config.min_chunk_size, config.length_function
        )

    def transform(self, documents: Sequence[Document]) -> List[Document]:
        """
        Split every document, preserving order.

        Each chunk keeps its source document's id and a shallow copy of
        its metadata. Input documents are not modified.

        Raises:
            SplitterError: If any document fails; no partial output
        """
        result = []
        for doc in documents:
            try:
                chunks = self.split_text(doc.content)
            except Exception as e:
                raise SplitterError(
                    f"failed to split document {doc.id!r}: {e}"
                ) from e

            result.extend(doc.with_content(chunk) for chunk in chunks)
            logger.info(f"Document {doc.id} split into {len(chunks)} chunks")

        return result


def new_semantic_splitter(config: SemanticSplitterConfig) -> SemanticSplitter:
    """Create a semantic splitter, validating the config first."""
    return SemanticSplitter(config)
