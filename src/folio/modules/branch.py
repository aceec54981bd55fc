"""Side-effect branch."""

from typing import Callable, List, Optional, Sequence

from folio.core.document import Document
from folio.core.errors import ConfigurationError
from folio.pipeline.context import ExecutionContext
from folio.pipeline.module import Module, ModuleProtocol


class Branch(Module):
    """Runs modules on the inputs and discards their results.

    The original inputs are returned unchanged, which makes ``Branch``
    useful for modules run only for their side effects. Unlike :class:`If`,
    nothing produced inside the branch replaces the inputs.
    """

    def __init__(
        self,
        *modules: ModuleProtocol,
        predicate: Optional[Callable[[Document], bool]] = None,
    ):
        if predicate is not None and not callable(predicate):
            raise ConfigurationError(
                "Branch predicate must be callable",
                details={'predicate': repr(predicate)}
            )
        self.modules = tuple(modules)
        self.predicate = predicate

    def execute(self, inputs: Sequence[Document], context: ExecutionContext) -> List[Document]:
        documents = list(inputs)
        if self.predicate is None:
            selected = documents
        else:
            selected = [document for document in documents if self.predicate(document)]
        context.execute(self.modules, selected)
        return documents
