"""
Recursive separator-based text splitting.

For size-bounded chunking when no embedding model is available.
Text is split on the first separator it contains; pieces that are
still too long are split again with the remaining separators, and
short pieces are packed back together up to chunk_size with a
configurable overlap.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence

from shared.schemas import Document

from .errors import SplitterConfigError
from .semantic_splitter import DEFAULT_SEPARATORS, split_after

logger = logging.getLogger(__name__)


class KeepType(Enum):
    NONE = "none"  # Discard separators
    START = "start"  # Separator starts the following piece
    END = "end"  # Separator ends the preceding piece


@dataclass(frozen=True)
class RecursiveSplitterConfig:
    """Configuration for recursive splitting."""

    chunk_size: int
    overlap_size: int = 0
    separators: Optional[Sequence[str]] = None
    length_function: Optional[Callable[[str], int]] = None
    keep_type: KeepType = KeepType.NONE


class RecursiveSplitter:
    """
    Separator-driven splitter with size-bounded merging.

    Usage:
        splitter = RecursiveSplitter(RecursiveSplitterConfig(chunk_size=500))
        chunks = splitter.transform(documents)

        # Measure in tokens and keep sentence terminators
        config = RecursiveSplitterConfig(
            chunk_size=200,
            overlap_size=20,
            length_function=num_tokens,
            keep_type=KeepType.END,
        )
    """

    def __init__(self, config: RecursiveSplitterConfig):
        """
        Args:
            config: Splitter configuration

        Raises:
            SplitterConfigError: If chunk_size <= 0 or overlap_size < 0
        """
        if config.chunk_size <= 0:
            raise SplitterConfigError("chunk size must be greater than zero")
        if config.overlap_size < 0:
            raise SplitterConfigError(
                "overlap must be greater than or equal to zero"
            )

        self.chunk_size = config.chunk_size
        self.overlap = config.overlap_size
        self.separators = list(config.separators or DEFAULT_SEPARATORS)
        self.length_function = config.length_function or len
        self.keep_type = config.keep_type

    def get_type(self) -> str:
        return "RecursiveSplitter"

    def transform(self, documents: Sequence[Document]) -> List[Document]:
        """
        Split every document, preserving order.

        Each chunk keeps its source document's id and a shallow copy of
        its metadata.
        """
        result = []
        for doc in documents:
            chunks = self.split_text(doc.content)
            result.extend(doc.with_content(chunk) for chunk in chunks)
            logger.info(f"Document {doc.id} split into {len(chunks)} chunks")
        return result

    def split_text(
        self, text: str, separators: Optional[List[str]] = None
    ) -> List[str]:
        """
        Split text into chunks no longer than chunk_size where possible.

        Args:
            text: Text to split
            separators: Separators still available (all by default)

        Returns:
            List of chunk strings
        """
        if separators is None:
            separators = self.separators

        # Find the first separator present in the text
        separator = separators[-1]
        remaining: List[str] = []
        for i, sep in enumerate(separators):
            if sep == "" or sep in text:
                separator = sep
                remaining = separators[i + 1 :]
                break

        final_chunks = []
        good_splits = []

        for piece in self._split(text, separator):
            if self.length_function(piece) < self.chunk_size:
                good_splits.append(piece)
                continue

            if good_splits:
                final_chunks.extend(self._merge_splits(good_splits, separator))
                good_splits = []

            if not remaining:
                final_chunks.append(piece)
            else:
                final_chunks.extend(self.split_text(piece, remaining))

        if good_splits:
            final_chunks.extend(self._merge_splits(good_splits, separator))

        return final_chunks

    def _split(self, text: str, separator: str) -> List[str]:
        if self.keep_type == KeepType.END:
            return split_after(text, separator)

        pieces = list(text) if separator == "" else text.split(separator)
        if self.keep_type == KeepType.START:
            pieces = pieces[:1] + [separator + p for p in pieces[1:]]
        return pieces

    def _join(self, pieces: List[str], separator: str) -> str:
        if self.keep_type == KeepType.NONE:
            return separator.join(pieces).strip()
        return "".join(pieces).strip()

    def _merge_splits(self, splits: List[str], separator: str) -> List[str]:
        """Pack small pieces into chunks close to chunk_size, with overlap."""
        length = self.length_function
        sep_len = length(separator)
        # Separators only count towards size when they are dropped and re-joined
        joins_separator = self.keep_type == KeepType.NONE

        docs = []
        current: List[str] = []
        total = 0

        for piece in splits:
            piece_len = length(piece)
            total_with_piece = total + piece_len
            if current and joins_separator:
                total_with_piece += sep_len

            if total_with_piece > self.chunk_size and current:
                doc = self._join(current, separator)
                if doc:
                    docs.append(doc)

                # Drop leading pieces until only the overlap remains
                while self._should_pop(total, piece_len, sep_len, len(current)):
                    total -= length(current[0])
                    if len(current) > 1 and joins_separator:
                        total -= sep_len
                    current = current[1:]

            current.append(piece)
            total += piece_len
            if len(current) > 1 and joins_separator:
                total += sep_len

        doc = self._join(current, separator)
        if doc:
            docs.append(doc)

        return docs

    def _should_pop(
        self, total: int, piece_len: int, sep_len: int, current_count: int
    ) -> bool:
        if current_count == 0:
            return False
        if total > self.overlap:
            return True
        if self.keep_type != KeepType.NONE or current_count < 2:
            sep_len = 0
        return total + piece_len + sep_len > self.chunk_size and total > 0
