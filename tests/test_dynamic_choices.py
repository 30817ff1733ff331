from __future__ import annotations

import pytest

from choiceflow.contracts import ChoiceProvider, InvalidWidgetKindError, WidgetKind
from choiceflow.param_options import count_choices, first_choice, normalize_choices
from choiceflow.providers import CallableChoiceProvider, StaticChoiceProvider


def test_normalize_choices_with_static_scalar_list():
    assert normalize_choices(["a", "b"]) == {0: "a", 1: "b"}


def test_normalize_choices_keeps_repeated_scalars():
    resolved = normalize_choices(["a", "a", "b"])
    assert list(resolved.values()) == ["a", "a", "b"]
    assert count_choices(resolved) == 3


def test_normalize_choices_repeated_label_keeps_both_options():
    resolved = normalize_choices([{"label": "Same", "value": "1"}, {"label": "Same", "value": "2"}])
    assert list(resolved.values()) == ["1", "2"]


def test_normalize_choices_with_option_dicts_keeps_value():
    resolved = normalize_choices(
        [
            {"label": "File A", "value": "a.crsd"},
            {"label": "File B", "value": "b.crsd"},
            {"value": "c.crsd"},
        ]
    )
    assert list(resolved.items()) == [
        ("File A", "a.crsd"),
        ("File B", "b.crsd"),
        ("c.crsd", "c.crsd"),
    ]


def test_normalize_choices_keeps_mapping_order():
    resolved = normalize_choices({"z": 1, "a": 2})
    assert list(resolved) == ["z", "a"]
    assert first_choice(resolved) == 1


def test_normalize_choices_of_none_and_single_string():
    assert normalize_choices(None) == {}
    assert normalize_choices("only") == {0: "only"}
    assert first_choice({}) == ""
    assert count_choices(None) == 0


def test_callable_provider_with_context_and_provider_arguments():
    seen = []

    def _choices(context, provider):
        seen.append(provider)
        directory = context.get("directory", "")
        if directory == "examples":
            return [
                {"label": "File A", "value": "a.crsd"},
                {"label": "File B", "value": "b.crsd"},
            ]
        return []

    provider = CallableChoiceProvider(_choices, widget_kind="PT_RADIO")

    assert provider.get_choices({"directory": "examples"}) == {"File A": "a.crsd", "File B": "b.crsd"}
    assert provider.get_choices({"directory": "empty"}) == {}
    assert seen == [provider, provider]
    assert provider.get_widget_kind() == WidgetKind("PT_RADIO", "ET_TEXT_BOX")


def test_callable_provider_with_context_only_is_called_once():
    calls = []

    def _choices(context):
        calls.append(context)
        raise TypeError("bad data in script")

    provider = CallableChoiceProvider(_choices)
    with pytest.raises(TypeError):
        provider.get_choices({})
    assert len(calls) == 1


def test_static_provider_returns_copies():
    provider = StaticChoiceProvider({"k": "v"})
    first = provider.get_choices({})
    first["other"] = "x"
    assert provider.get_choices({}) == {"k": "v"}


def test_providers_satisfy_protocol():
    assert isinstance(StaticChoiceProvider(), ChoiceProvider)
    assert isinstance(CallableChoiceProvider(lambda context: []), ChoiceProvider)
    assert not isinstance(object(), ChoiceProvider)


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, WidgetKind()),
        ("pt_multi_select", WidgetKind("PT_MULTI_SELECT", "ET_TEXT_BOX")),
        ("PT_CHECKBOX:ET_IMAGE_GALLERY", WidgetKind("PT_CHECKBOX", "ET_IMAGE_GALLERY")),
        ({"element_type": "ET_FORMATTED_HTML"}, WidgetKind("PT_SINGLE_SELECT", "ET_FORMATTED_HTML")),
    ],
)
def test_widget_kind_parse(raw, expected):
    assert WidgetKind.parse(raw) == expected


@pytest.mark.parametrize("raw", ["PT_DROPDOWN", "PT_RADIO:ET_TABLE", 7])
def test_widget_kind_parse_rejects_unknown(raw):
    with pytest.raises(InvalidWidgetKindError):
        WidgetKind.parse(raw)


def test_widget_kind_multi_valued():
    assert WidgetKind("PT_MULTI_SELECT").is_multi_valued
    assert WidgetKind("PT_CHECKBOX").is_multi_valued
    assert not WidgetKind("PT_RADIO").is_multi_valued
    assert not WidgetKind().is_multi_valued
