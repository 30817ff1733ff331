"""Build choice parameter definitions from loose config objects."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from typing import Any

from choiceflow.contracts import DEFAULT_MAX_VISIBLE_ITEM_COUNT, ChoiceParamSpec, ChoiceProvider, WidgetKind
from choiceflow.providers import CallableChoiceProvider, StaticChoiceProvider


def _widget_kind_from_mapping(raw: dict[str, Any]) -> WidgetKind:
    if raw.get("widget_kind") is not None:
        return WidgetKind.parse(raw["widget_kind"])
    return WidgetKind.parse({"choice_type": raw.get("choice_type"), "element_type": raw.get("element_type")})


def _provider_from_mapping(raw: dict[str, Any], name: str) -> ChoiceProvider:
    provider = raw.get("provider")
    widget_kind = _widget_kind_from_mapping(raw)
    if provider is not None:
        if isinstance(provider, ChoiceProvider):
            return provider
        if callable(provider):
            return CallableChoiceProvider(provider, widget_kind=widget_kind)
        raise TypeError(f"Parameter '{name}' provider must be callable or a ChoiceProvider, got {type(provider)}")
    choices = raw.get("choices", [])
    if callable(choices):
        return CallableChoiceProvider(choices, widget_kind=widget_kind)
    return StaticChoiceProvider(choices, widget_kind=widget_kind)


def _dict_to_param_spec(raw: dict[str, Any], name: str | None = None) -> ChoiceParamSpec:
    param_name = raw.get("name") or name
    if not param_name:
        raise TypeError("Dictionary parameter spec missing 'name'")
    max_visible = raw.get("max_visible_items")
    return ChoiceParamSpec(
        name=str(param_name),
        provider=_provider_from_mapping(raw, str(param_name)),
        # `help` is accepted as an alias for description.
        description=str(raw.get("description") or raw.get("help") or ""),
        max_visible_items=DEFAULT_MAX_VISIBLE_ITEM_COUNT if max_visible is None else int(max_visible),
    )


def coerce_to_param_spec(obj: Any, name: str | None = None) -> ChoiceParamSpec:
    if callable(obj) and not isinstance(obj, type) and not isinstance(obj, ChoiceProvider):
        obj = obj()
    if isinstance(obj, ChoiceParamSpec):
        return obj
    if isinstance(obj, ChoiceProvider):
        if not name:
            raise TypeError("A bare provider needs a parameter name")
        return ChoiceParamSpec(name=name, provider=obj)
    if is_dataclass(obj) and not isinstance(obj, type):
        return _dict_to_param_spec(asdict(obj), name=name)
    if isinstance(obj, dict):
        return _dict_to_param_spec(obj, name=name)
    raise TypeError(f"Unsupported parameter definition object for {name or 'parameter'}: {type(obj)}")
