"""Document model for Folio pipelines."""

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from folio.core.metadata import Metadata


class Document(BaseModel):
    """Immutable unit of content and metadata flowing through a pipeline.

    Documents are never changed in place. A module that wants different
    content or metadata calls :meth:`clone`, which returns a new document
    whose metadata layers the overrides on top of this document's metadata.
    """

    content: Any = Field(default=None, description="Opaque document content")
    metadata: Metadata = Field(default_factory=Metadata, description="Metadata scope")

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra='forbid'
    )

    @classmethod
    def create(
        cls,
        content: Any = None,
        metadata: Optional[Mapping] = None,
        parent: Optional[Mapping] = None,
    ) -> "Document":
        """Create a root document.

        Args:
            content: Document content
            metadata: Local metadata entries
            parent: Optional scope for keys missing locally

        Returns:
            New document
        """
        return cls(content=content, metadata=Metadata(metadata, parent=parent))

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a metadata value, falling back to ``default``."""
        return self.metadata.get(key, default)

    def clone(self, content: Any, overrides: Optional[Mapping] = None) -> "Document":
        """Create a new document with new content and metadata overrides.

        Args:
            content: Content of the new document
            overrides: Metadata entries shadowing this document's values

        Returns:
            New document; this document is left untouched
        """
        return self.model_copy(
            update={
                'content': content,
                'metadata': self.metadata.with_overrides(overrides),
            }
        )
