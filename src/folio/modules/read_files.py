"""Module reading files from the input directory."""

from pathlib import Path
from typing import Callable, Iterator, List, Sequence, Union

from folio.core.document import Document
from folio.core.errors import ConfigurationError
from folio.core.logging import get_logger
from folio.core.metadata import Metadata
from folio.pipeline.context import ExecutionContext
from folio.pipeline.engine import INPUT_PATH_KEY
from folio.pipeline.module import Module

logger = get_logger(__name__)

FILE_ROOT = 'FileRoot'
FILE_BASE = 'FileBase'
FILE_EXT = 'FileExt'
FILE_NAME = 'FileName'
FILE_DIR = 'FileDir'
FILE_PATH = 'FilePath'

SearchPattern = Union[str, Callable[[Metadata], str]]


class ReadFiles(Module):
    """Reads every file matching a glob pattern below ``InputPath``.

    For each input document the pattern is resolved against the document's
    ``InputPath`` metadata value. Inputs without ``InputPath`` produce no
    output. Each matching file becomes a clone of the input document with
    the file text as content and ``FileRoot``, ``FileBase``, ``FileExt``,
    ``FileName``, ``FileDir`` and ``FilePath`` metadata.

    The pattern may name sub-directories (``posts/*.md``) or a single file.
    """

    def __init__(
        self,
        search_pattern: SearchPattern,
        recursive: bool = False,
        encoding: str = 'utf-8',
    ):
        """Initialize the reader.

        Args:
            search_pattern: Glob pattern, or a callable computing one from
                the input document's metadata
            recursive: Also search every sub-directory
            encoding: Text encoding of the files

        Raises:
            ConfigurationError: If no search pattern is given
        """
        if search_pattern is None:
            raise ConfigurationError("ReadFiles requires a search pattern")
        if not isinstance(search_pattern, str) and not callable(search_pattern):
            raise ConfigurationError(
                "ReadFiles search pattern must be a string or a callable",
                details={'search_pattern': repr(search_pattern)}
            )
        self.search_pattern = search_pattern
        self.recursive = recursive
        self.encoding = encoding

    def _resolve_pattern(self, document: Document) -> str:
        if callable(self.search_pattern):
            return self.search_pattern(document.metadata)
        return self.search_pattern

    def _find_files(self, root: Path, pattern: str) -> List[Path]:
        pattern_path = root / pattern
        directory = pattern_path.parent
        name = pattern_path.name
        matches = directory.rglob(name) if self.recursive else directory.glob(name)
        files = sorted(path for path in matches if path.is_file())
        logger.debug(
            "files_found",
            directory=str(directory),
            pattern=name,
            recursive=self.recursive,
            count=len(files),
        )
        return files

    def execute(self, inputs: Sequence[Document], context: ExecutionContext) -> Iterator[Document]:
        for document in inputs:
            input_path = document.get(INPUT_PATH_KEY)
            if not input_path:
                logger.debug("input_path_missing", pipeline=context.pipeline_name)
                continue

            root = Path(input_path).absolute()
            for file_path in self._find_files(root, self._resolve_pattern(document)):
                file_path = file_path.absolute()
                yield document.clone(
                    file_path.read_text(encoding=self.encoding),
                    {
                        FILE_ROOT: str(root),
                        FILE_BASE: file_path.stem,
                        FILE_EXT: file_path.suffix,
                        FILE_NAME: file_path.name,
                        FILE_DIR: str(file_path.parent),
                        FILE_PATH: str(file_path),
                    }
                )
