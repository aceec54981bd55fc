"""Conditional branching over a document set."""

from typing import Callable, List, Optional, Sequence, Tuple

from folio.core.document import Document
from folio.core.errors import ConfigurationError
from folio.core.logging import get_logger
from folio.pipeline.context import ExecutionContext
from folio.pipeline.module import Module, ModuleProtocol

logger = get_logger(__name__)

Predicate = Callable[[Document], bool]
Condition = Tuple[Optional[Predicate], Tuple[ModuleProtocol, ...]]


class If(Module):
    """Routes each document to the first branch whose predicate matches.

    Conditions are checked in the order they were added. Documents matched
    by a condition are run through that condition's modules and are not
    offered to later conditions. Documents no condition matched are passed
    through unchanged.

    Output is grouped by branch: every output of the first branch, then
    every output of the second, and so on, followed by the unmatched
    documents in their original relative order.

    Example::

        (
            If(lambda doc: doc.get("Draft"), Meta("Hidden", lambda doc, ctx: True))
            .else_if(lambda doc: doc.content is None, Content(lambda doc, ctx: ""))
            .else_(Content(lambda doc, ctx: doc.content.strip()))
        )
    """

    def __init__(self, predicate: Predicate, *modules: ModuleProtocol):
        """Initialize the branch.

        Args:
            predicate: Selects documents for ``modules``
            modules: Modules run on the matching documents

        Raises:
            ConfigurationError: If the predicate is not callable
        """
        self._conditions: List[Condition] = []
        self._has_else = False
        self._frozen = False
        self._add(predicate, modules)

    @property
    def conditions(self) -> Tuple[Condition, ...]:
        """Registered conditions, in evaluation order."""
        return tuple(self._conditions)

    def else_if(self, predicate: Predicate, *modules: ModuleProtocol) -> "If":
        """Add a condition checked against documents earlier ones skipped.

        Raises:
            ConfigurationError: If the predicate is not callable, or the
                branch already has an ``else_`` or has been executed
        """
        self._add(predicate, modules)
        return self

    def else_(self, *modules: ModuleProtocol) -> "If":
        """Add the fallback branch receiving every remaining document.

        Raises:
            ConfigurationError: If the branch already has an ``else_`` or
                has been executed
        """
        self._check_open()
        self._conditions.append((None, tuple(modules)))
        self._has_else = True
        return self

    def _add(self, predicate: Predicate, modules: Sequence[ModuleProtocol]) -> None:
        self._check_open()
        if predicate is None or not callable(predicate):
            raise ConfigurationError(
                "Branch predicate must be callable",
                details={'predicate': repr(predicate)}
            )
        self._conditions.append((predicate, tuple(modules)))

    def _check_open(self) -> None:
        if self._has_else:
            raise ConfigurationError("Cannot add a condition after else_")
        if self._frozen:
            raise ConfigurationError("Cannot add a condition to a branch that has been executed")

    def execute(self, inputs: Sequence[Document], context: ExecutionContext) -> List[Document]:
        self._frozen = True
        results: List[Document] = []
        remaining = list(inputs)
        for index, (predicate, modules) in enumerate(self._conditions):
            matched: List[Document] = []
            unmatched: List[Document] = []
            for document in remaining:
                if predicate is None or predicate(document):
                    matched.append(document)
                else:
                    unmatched.append(document)

            logger.debug(
                "branch_partitioned",
                condition=index,
                matched=len(matched),
                unmatched=len(unmatched),
            )
            results.extend(context.execute(modules, matched))
            remaining = unmatched

        # Documents no condition claimed pass through unchanged
        results.extend(remaining)
        return results
