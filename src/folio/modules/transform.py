"""Per-document content and metadata transforms."""

from typing import Any, Callable, Iterator, Sequence

from folio.core.document import Document
from folio.core.errors import ConfigurationError
from folio.pipeline.context import ExecutionContext
from folio.pipeline.module import Module

DocumentFunc = Callable[[Document, ExecutionContext], Any]


def _require_callable(func: Any, name: str) -> None:
    if func is None or not callable(func):
        raise ConfigurationError(
            f"{name} requires a callable",
            details={'func': repr(func)}
        )


class Content(Module):
    """Replaces each document's content with ``func(document, context)``."""

    def __init__(self, func: DocumentFunc):
        _require_callable(func, 'Content')
        self.func = func

    def execute(self, inputs: Sequence[Document], context: ExecutionContext) -> Iterator[Document]:
        for document in inputs:
            yield document.clone(self.func(document, context))


class Meta(Module):
    """Sets ``key`` on each document to ``func(document, context)``.

    Content is carried over unchanged.
    """

    def __init__(self, key: str, func: DocumentFunc):
        if not key:
            raise ConfigurationError("Meta requires a metadata key")
        _require_callable(func, 'Meta')
        self.key = key
        self.func = func

    def execute(self, inputs: Sequence[Document], context: ExecutionContext) -> Iterator[Document]:
        for document in inputs:
            yield document.clone(document.content, {self.key: self.func(document, context)})
