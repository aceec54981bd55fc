"""Pipeline execution."""

from folio.pipeline.context import ExecutionContext
from folio.pipeline.engine import Engine, Pipeline
from folio.pipeline.module import Module, ModuleProtocol

__all__ = [
    'Engine',
    'ExecutionContext',
    'Module',
    'ModuleProtocol',
    'Pipeline'
]
