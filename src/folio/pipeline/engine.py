"""Engine running named pipelines."""

from typing import Any, Dict, List, Optional

from folio.core.config import FolioConfig
from folio.core.document import Document
from folio.core.errors import ConfigurationError
from folio.core.logging import get_logger
from folio.pipeline.context import ExecutionContext
from folio.pipeline.module import ModuleProtocol

logger = get_logger(__name__)

INPUT_PATH_KEY = 'InputPath'
OUTPUT_PATH_KEY = 'OutputPath'


class Pipeline:
    """Named, ordered list of modules run by an engine."""

    def __init__(
        self,
        name: str,
        engine: Optional["Engine"] = None,
        modules: Optional[List[ModuleProtocol]] = None,
    ):
        """Initialize the pipeline.

        Args:
            name: Pipeline name
            engine: Engine that owns the pipeline
            modules: Initial modules
        """
        self.name = name
        self.engine = engine
        self.modules: List[ModuleProtocol] = list(modules or [])

    def add(self, *modules: ModuleProtocol) -> "Pipeline":
        """Append modules to the pipeline."""
        self.modules.extend(modules)
        return self

    def execute(self) -> List[Document]:
        """Run the pipeline from a single empty seed document.

        The seed document's metadata falls back to the engine's global
        metadata, so modules such as ReadFiles can find ``InputPath``.

        Returns:
            Output documents of the last module
        """
        parent = self.engine.metadata if self.engine is not None else None
        seed = Document.create(parent=parent)
        context = ExecutionContext(self.engine, self)
        return context.execute(self.modules, [seed])


class Engine:
    """Runs pipelines in registration order and keeps their outputs."""

    def __init__(self, config: Optional[FolioConfig] = None):
        """Initialize the engine.

        Args:
            config: Engine configuration, defaults apply when omitted
        """
        self.config = config or FolioConfig()
        self.metadata: Dict[str, Any] = dict(self.config.engine.metadata)
        if self.config.engine.input_path is not None:
            self.metadata[INPUT_PATH_KEY] = str(self.config.engine.input_path)
        if self.config.engine.output_path is not None:
            self.metadata[OUTPUT_PATH_KEY] = str(self.config.engine.output_path)
        self.pipelines: Dict[str, Pipeline] = {}
        self.documents: Dict[str, List[Document]] = {}

    def add_pipeline(self, *modules: ModuleProtocol, name: Optional[str] = None) -> Pipeline:
        """Register a new pipeline.

        Args:
            modules: Modules of the pipeline
            name: Pipeline name, ``Pipeline{n}`` when omitted

        Returns:
            The registered pipeline

        Raises:
            ConfigurationError: If the name is already registered
        """
        if name is None:
            name = f"Pipeline{len(self.pipelines) + 1}"
        if name in self.pipelines:
            raise ConfigurationError(
                f"Pipeline already exists: {name}",
                details={'pipeline': name}
            )
        pipeline = Pipeline(name, self, list(modules))
        self.pipelines[name] = pipeline
        return pipeline

    def execute(self) -> Dict[str, List[Document]]:
        """Run every pipeline in registration order.

        Later pipelines can read the outputs of earlier ones through
        ``context.documents``. Any error aborts the run, discards the
        documents produced so far and is re-raised unchanged.

        Returns:
            Output documents keyed by pipeline name
        """
        self.documents.clear()
        for name, pipeline in self.pipelines.items():
            logger.info("pipeline_started", pipeline=name, modules=len(pipeline.modules))
            try:
                outputs = pipeline.execute()
            except Exception as e:
                logger.error(
                    "pipeline_failed",
                    pipeline=name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                self.documents.clear()
                raise
            self.documents[name] = outputs
            logger.info("pipeline_completed", pipeline=name, documents=len(outputs))
        return dict(self.documents)
