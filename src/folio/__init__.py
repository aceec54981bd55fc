"""Folio - composable content-processing pipelines."""

__version__ = "0.1.0"

from folio.core import ConfigurationError, Document, FolioError, Metadata
from folio.pipeline import Engine, ExecutionContext, Module, Pipeline

__all__ = [
    'ConfigurationError',
    'Document',
    'Engine',
    'ExecutionContext',
    'FolioError',
    'Metadata',
    'Module',
    'Pipeline'
]
