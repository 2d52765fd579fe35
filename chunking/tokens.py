"""
Token-based length function for the splitters.

Pass ``num_tokens`` as ``length_function`` to size chunks in tokens
instead of characters.
"""

from functools import lru_cache

import tiktoken


@lru_cache()
def _encoding() -> tiktoken.Encoding:
    return tiktoken.get_encoding("cl100k_base")


def num_tokens(text: str) -> int:
    """Count tokens using cl100k_base encoding."""
    return len(_encoding().encode(text))
