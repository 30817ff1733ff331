"""Helpers for normalizing provider choices."""

from __future__ import annotations

from typing import Any, Mapping


def normalize_choices(raw_choices) -> dict[Any, Any]:
    """
    Return provider output as an insertion-ordered dict.

    Mappings are copied in order. Lists may hold plain scalars, keyed by
    position so repeated values stay separate choices, or `{"label", "value"}`
    option dicts, keyed by label so the submitted value stays the mapping
    value. A repeated label falls back to the position as key.
    """
    if raw_choices is None:
        return {}
    if isinstance(raw_choices, Mapping):
        return dict(raw_choices.items())
    if isinstance(raw_choices, (str, bytes)):
        raw_choices = [raw_choices]

    normalized: dict[Any, Any] = {}
    for idx, option in enumerate(raw_choices):
        if isinstance(option, Mapping):
            value = option.get("value")
            key = option.get("label", value)
            if key in normalized:
                key = idx
            normalized[key] = value
        else:
            normalized[idx] = option
    return normalized


def first_choice(choices: Mapping[Any, Any]) -> Any:
    """Return the value at the first insertion position, or "" when empty."""
    for value in choices.values():
        return value
    return ""


def count_choices(choices: Mapping[Any, Any] | None) -> int:
    if not choices:
        return 0
    return len(choices)
