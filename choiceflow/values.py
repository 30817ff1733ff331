"""Multi-value joining and submission record helpers."""

from __future__ import annotations

import csv
import io
from typing import Any, Mapping, Sequence

VALUE_SEPARATOR = ","
QUOTE_CHAR = "\""


class InvalidSubmissionError(TypeError):
    """Raised when a submission record does not have the expected shape."""


def stringify(value: Any) -> str:
    """Return the string form of a submitted scalar. Absent values become ""."""
    if value is None:
        return ""
    return str(value)


def is_multi_value(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _needs_quoting(text: str) -> bool:
    return VALUE_SEPARATOR in text or text.startswith(QUOTE_CHAR) or "\n" in text or "\r" in text


def _quote(text: str) -> str:
    if not _needs_quoting(text):
        return text
    return QUOTE_CHAR + text.replace(QUOTE_CHAR, QUOTE_CHAR * 2) + QUOTE_CHAR


def join_values(values: Sequence[Any]) -> str:
    """
    Join values with `,` in the given order.

    Elements holding the separator or a line break, or starting with a double
    quote, are wrapped in double quotes with inner quotes doubled, so
    `split_values` gets the original sequence back. Other elements are written
    as is.
    """
    items = [stringify(value) for value in values]
    if items == [""]:
        # A lone empty element must not collapse into "no elements".
        return QUOTE_CHAR * 2
    return VALUE_SEPARATOR.join(_quote(item) for item in items)


def split_values(text: str | None) -> list[str]:
    """Split a string produced by `join_values` back into its elements."""
    if not text:
        return []
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=VALUE_SEPARATOR, quotechar=QUOTE_CHAR)
    return [field for row in reader for field in row]


def value_to_text(value: Any) -> str:
    if is_multi_value(value):
        return join_values(value)
    return stringify(value)


def validate_submission_record(record: Mapping[str, Any] | None) -> None:
    if record is None:
        raise InvalidSubmissionError("Submission is None; expected a dict with 'name' and 'value'.")
    if not isinstance(record, Mapping):
        raise InvalidSubmissionError(
            f"Submission must be a dict with 'name' and 'value', got {type(record).__name__}."
        )
    if "name" not in record:
        keys = ", ".join(sorted(str(key) for key in record.keys()))
        raise InvalidSubmissionError(f"Submission is missing 'name'. Received keys: {keys}")
    value = record.get("value")
    if is_multi_value(value):
        for idx, item in enumerate(value, start=1):
            if is_multi_value(item) or isinstance(item, Mapping):
                raise InvalidSubmissionError(
                    f"Submission value #{idx} must be a scalar, got {type(item).__name__}."
                )
