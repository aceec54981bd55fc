"""Core document model for Folio."""

from folio.core.document import Document
from folio.core.errors import ConfigurationError, FolioError
from folio.core.metadata import Metadata

__all__ = [
    'ConfigurationError',
    'Document',
    'FolioError',
    'Metadata'
]
