"""
Pydantic schemas shared by loaders, parsers and splitters.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class Document(BaseModel):
    """A unit of text flowing through the document pipeline."""

    id: str = Field(default="", description="Source document identifier")
    content: str = Field(default="", description="Document text")
    metadata: Optional[Dict[str, Any]] = Field(
        default=None, description="Arbitrary metadata carried with the text"
    )

    def with_content(self, content: str) -> "Document":
        """
        Derive a fragment of this document.

        The fragment keeps the id and gets a shallow copy of the metadata,
        so adding keys to one fragment never leaks into its siblings.
        """
        metadata = dict(self.metadata) if self.metadata is not None else None
        return Document(id=self.id, content=content, metadata=metadata)
