"""Minimal choice providers."""

from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

from choiceflow.contracts import WidgetKind
from choiceflow.param_options import normalize_choices


class StaticChoiceProvider:
    """Serve a fixed set of choices, whatever the context."""

    def __init__(self, choices=None, widget_kind: WidgetKind | str | None = None):
        self._choices = normalize_choices(choices)
        self._widget_kind = WidgetKind.parse(widget_kind)

    def get_choices(self, context: Mapping[str, str]) -> dict[Any, Any]:
        return dict(self._choices)

    def get_widget_kind(self) -> WidgetKind:
        return self._widget_kind


class CallableChoiceProvider:
    """
    Compute choices with a function of the context.

    `func` is called as `func(context, provider)`; one-argument functions
    `func(context)` are accepted too.
    """

    def __init__(self, func: Callable[..., Any], widget_kind: WidgetKind | str | None = None):
        self.func = func
        self._widget_kind = WidgetKind.parse(widget_kind)

    def _accepts_provider(self) -> bool:
        try:
            params = inspect.signature(self.func).parameters.values()
        except (TypeError, ValueError):
            return False
        if any(param.kind == inspect.Parameter.VAR_POSITIONAL for param in params):
            return True
        positional = [
            param
            for param in params
            if param.kind in {inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD}
        ]
        return len(positional) >= 2

    def get_choices(self, context: Mapping[str, str]) -> dict[Any, Any]:
        if self._accepts_provider():
            choices = self.func(dict(context), self)
        else:
            # Backward-compatible callable shape: func(context)
            choices = self.func(dict(context))
        return normalize_choices(choices)

    def get_widget_kind(self) -> WidgetKind:
        return self._widget_kind
