"""
Exceptions raised by the document splitters.
"""


class SplitterError(Exception):
    """Raised when a batch of documents cannot be split."""

    pass


class SplitterConfigError(SplitterError, ValueError):
    """Raised when a splitter is constructed from an invalid configuration."""

    pass


class EmbeddingError(SplitterError):
    """Raised when the embedder fails or breaks its one-vector-per-text contract."""

    pass
