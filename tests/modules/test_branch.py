"""Tests for the Branch module."""

import pytest

from folio.core.errors import ConfigurationError
from folio.modules.branch import Branch


def test_results_are_discarded(context, make_documents, count_module) -> None:
    """Test the inputs come back unchanged after the branch runs."""
    inputs = make_documents("a", "b")
    module = count_module("A")
    outputs = context.execute([Branch(module)], inputs)

    assert outputs == inputs
    assert all(output is original for output, original in zip(outputs, inputs))
    assert module.input_count == 2
    assert module.output_count == 2


def test_predicate_selects_inputs(context, make_documents, recording_module) -> None:
    """Test only matching documents reach the branch modules."""
    inputs = make_documents("a", "b", "c")
    recorder = recording_module()
    outputs = Branch(recorder, predicate=lambda doc: doc.content != "b").execute(inputs, context)

    assert [document.content for document in recorder.seen] == ["a", "c"]
    assert outputs == inputs


def test_errors_propagate(context, make_documents) -> None:
    """Test failures inside the branch abort the run."""

    def fail(doc):
        raise RuntimeError("bad predicate")

    with pytest.raises(RuntimeError):
        Branch(predicate=fail).execute(make_documents("a"), context)


def test_invalid_predicate() -> None:
    """Test a non-callable predicate fails at construction."""
    with pytest.raises(ConfigurationError):
        Branch(predicate="nope")
