"""Execution context handed to every module."""

from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, List, Mapping, Optional, Sequence

from folio.core.document import Document
from folio.core.logging import get_logger
from folio.pipeline.module import ModuleProtocol

if TYPE_CHECKING:
    from folio.pipeline.engine import Engine, Pipeline

logger = get_logger(__name__)


class ExecutionContext:
    """Runs module sequences on behalf of a pipeline.

    The same :meth:`execute` call drives top-level pipelines and the nested
    module lists of branching modules, so sub-pipelines compose without any
    extra structure.
    """

    def __init__(
        self,
        engine: Optional["Engine"] = None,
        pipeline: Optional["Pipeline"] = None,
    ) -> None:
        """Initialize the context.

        Args:
            engine: Engine running the pipeline, if any
            pipeline: Pipeline being executed, if any
        """
        self.engine = engine
        self.pipeline = pipeline

    @property
    def pipeline_name(self) -> Optional[str]:
        """Name of the running pipeline."""
        return self.pipeline.name if self.pipeline is not None else None

    @property
    def metadata(self) -> Mapping:
        """Read-only view of the engine's global metadata."""
        if self.engine is None:
            return MappingProxyType({})
        return MappingProxyType(self.engine.metadata)

    @property
    def documents(self) -> Mapping[str, List[Document]]:
        """Outputs of the pipelines that already ran, keyed by pipeline name."""
        if self.engine is None:
            return MappingProxyType({})
        return MappingProxyType(self.engine.documents)

    def execute(
        self,
        modules: Sequence[ModuleProtocol],
        inputs: Iterable[Document],
    ) -> List[Document]:
        """Run ``inputs`` through ``modules`` in order.

        Each module receives the fully materialized output of the previous
        one. An empty module sequence returns the inputs unchanged.

        Args:
            modules: Modules to run, in order
            inputs: Documents fed to the first module

        Returns:
            Output of the last module
        """
        documents = list(inputs)
        for module in modules:
            module_name = type(module).__name__
            logger.debug(
                "module_executing",
                module=module_name,
                pipeline=self.pipeline_name,
                inputs=len(documents),
            )
            documents = list(module.execute(documents, self))
            logger.debug(
                "module_executed",
                module=module_name,
                pipeline=self.pipeline_name,
                outputs=len(documents),
            )
        return documents
