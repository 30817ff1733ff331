"""Choiceflow core package."""

from choiceflow.contracts import CanonicalValue, ChoiceParamSpec, ChoiceProvider, WidgetKind
from choiceflow.providers import CallableChoiceProvider, StaticChoiceProvider
from choiceflow.resolver import ParameterResolver
from choiceflow.values import join_values, split_values

__all__ = [
    "CallableChoiceProvider",
    "CanonicalValue",
    "ChoiceParamSpec",
    "ChoiceProvider",
    "ParameterResolver",
    "StaticChoiceProvider",
    "WidgetKind",
    "join_values",
    "split_values",
]
