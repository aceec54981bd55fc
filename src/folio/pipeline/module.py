"""Module contract for pipeline steps."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Protocol, Sequence, runtime_checkable

from folio.core.document import Document

if TYPE_CHECKING:
    from folio.pipeline.context import ExecutionContext


@runtime_checkable
class ModuleProtocol(Protocol):
    """Structural protocol for a pipeline module.

    Any object with a matching ``execute`` method can be placed in a
    pipeline, including plain classes that do not inherit from
    :class:`Module`.
    """

    def execute(
        self, inputs: Sequence[Document], context: "ExecutionContext"
    ) -> Iterable[Document]: ...


class Module(ABC):
    """Base class for pipeline modules.

    A module turns an ordered sequence of input documents into a sequence of
    output documents. It may yield zero, one or many outputs per input, or
    ignore its inputs and create new documents. The result may be produced
    lazily; the execution context materializes it before the next module
    runs.

    Modules may keep their own configuration state but never mutate the
    documents they receive. New content or metadata goes through
    :meth:`Document.clone`.

    Example::

        class Upper(Module):
            def execute(self, inputs, context):
                for document in inputs:
                    yield document.clone(document.content.upper())
    """

    @abstractmethod
    def execute(
        self, inputs: Sequence[Document], context: "ExecutionContext"
    ) -> Iterable[Document]:
        """Execute the module.

        Args:
            inputs: Documents produced by the previous module
            context: Execution context used to run nested modules

        Returns:
            Output documents, in production order
        """
