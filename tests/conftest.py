"""Test fixtures for Folio."""

from collections.abc import Generator
from typing import Callable, Iterator, List, Sequence

import pytest
import structlog

from folio.core.document import Document
from folio.pipeline.context import ExecutionContext
from folio.pipeline.module import Module


class CountModule(Module):
    """Clones every input with an incrementing counter.

    ``additional_outputs`` extra clones are produced per input. The counter
    is stored under ``value_key`` and appended to the content.
    """

    def __init__(self, value_key: str, additional_outputs: int = 0):
        self.value_key = value_key
        self.additional_outputs = additional_outputs
        self.value = 0
        self.execute_count = 0
        self.input_count = 0
        self.output_count = 0

    def execute(self, inputs: Sequence[Document], context: ExecutionContext) -> Iterator[Document]:
        self.execute_count += 1
        for document in inputs:
            self.input_count += 1
            for _ in range(self.additional_outputs + 1):
                self.output_count += 1
                self.value += 1
                content = str(self.value) if document.content is None else f"{document.content}{self.value}"
                yield document.clone(content, {self.value_key: self.value})


class RecordingModule(Module):
    """Records the documents it receives and passes them through."""

    def __init__(self):
        self.calls: List[List[Document]] = []

    @property
    def seen(self) -> List[Document]:
        return [document for call in self.calls for document in call]

    def execute(self, inputs: Sequence[Document], context: ExecutionContext) -> List[Document]:
        self.calls.append(list(inputs))
        return list(inputs)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def context() -> ExecutionContext:
    """Execution context without an engine."""
    return ExecutionContext()


@pytest.fixture
def make_documents() -> Callable[..., List[Document]]:
    """Build root documents from content values."""
    def _make(*contents) -> List[Document]:
        return [Document.create(content) for content in contents]
    return _make


@pytest.fixture
def count_module() -> Callable[..., CountModule]:
    """Factory for counting modules."""
    return CountModule


@pytest.fixture
def recording_module() -> Callable[[], RecordingModule]:
    """Factory for recording modules."""
    return RecordingModule
