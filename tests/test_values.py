from __future__ import annotations

import pytest

from choiceflow.values import (
    InvalidSubmissionError,
    join_values,
    split_values,
    validate_submission_record,
    value_to_text,
)


def test_join_values_without_separator_is_plain():
    assert join_values(["a", "b", "c"]) == "a,b,c"
    assert join_values(['a"b', "c"]) == 'a"b,c'


@pytest.mark.parametrize(
    "values",
    [
        [],
        [""],
        ["", ""],
        ["a", ""],
        ["a,b"],
        ["x", "y,z", "w"],
        ['"leading quote', "mid\"quote", "trailing,"],
        ["multi\nline", "carriage\rreturn"],
        [",", '"', '""'],
    ],
)
def test_split_values_reverses_join(values):
    assert split_values(join_values(values)) == values


def test_join_values_stringifies_elements():
    assert join_values([1, None, True]) == "1,,True"


def test_value_to_text_handles_tuples_and_scalars():
    assert value_to_text(("a", "b")) == "a,b"
    assert value_to_text("a,b") == "a,b"
    assert value_to_text(None) == ""


def test_split_values_of_empty_text():
    assert split_values("") == []
    assert split_values(None) == []


def test_validate_submission_record_accepts_scalar_and_list():
    validate_submission_record({"name": "env", "value": "a"})
    validate_submission_record({"name": "env", "value": ["a", "b"]})
    validate_submission_record({"name": "env"})


@pytest.mark.parametrize(
    "record",
    [
        None,
        ["env", "a"],
        {"value": "a"},
        {"name": "env", "value": [["nested"]]},
        {"name": "env", "value": [{"a": 1}]},
    ],
)
def test_validate_submission_record_rejects_bad_shapes(record):
    with pytest.raises(InvalidSubmissionError):
        validate_submission_record(record)
