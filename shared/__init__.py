"""
Shared Module.

Types and settings used across the splitting packages:
- Document schema exchanged between pipeline stages
- Environment-driven settings
- Logging setup

Usage:
    from shared import Document, get_settings

    doc = Document(id="doc_001", content=text, metadata={"tenant": "acme"})
    settings = get_settings()
"""

from .config import SplitterSettings, configure_logging, get_settings
from .schemas import Document

__all__ = [
    "Document",
    "SplitterSettings",
    "get_settings",
    "configure_logging",
]
