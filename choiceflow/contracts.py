"""Contracts shared by choice providers and the parameter resolver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable

PARAMETER_TYPE_SINGLE_SELECT = "PT_SINGLE_SELECT"  # default choice type
PARAMETER_TYPE_MULTI_SELECT = "PT_MULTI_SELECT"
PARAMETER_TYPE_CHECK_BOX = "PT_CHECKBOX"
PARAMETER_TYPE_RADIO = "PT_RADIO"

ELEMENT_TYPE_TEXT_BOX = "ET_TEXT_BOX"  # default element type
ELEMENT_TYPE_ORDERED_LIST = "ET_ORDERED_LIST"
ELEMENT_TYPE_UNORDERED_LIST = "ET_UNORDERED_LIST"
ELEMENT_TYPE_FORMATTED_HTML = "ET_FORMATTED_HTML"
ELEMENT_TYPE_FORMATTED_HIDDEN_HTML = "ET_FORMATTED_HIDDEN_HTML"
ELEMENT_TYPE_IMAGE_GALLERY = "ET_IMAGE_GALLERY"

VALID_CHOICE_TYPES = (
    PARAMETER_TYPE_SINGLE_SELECT,
    PARAMETER_TYPE_MULTI_SELECT,
    PARAMETER_TYPE_CHECK_BOX,
    PARAMETER_TYPE_RADIO,
)
VALID_ELEMENT_TYPES = (
    ELEMENT_TYPE_TEXT_BOX,
    ELEMENT_TYPE_ORDERED_LIST,
    ELEMENT_TYPE_UNORDERED_LIST,
    ELEMENT_TYPE_FORMATTED_HTML,
    ELEMENT_TYPE_FORMATTED_HIDDEN_HTML,
    ELEMENT_TYPE_IMAGE_GALLERY,
)

DEFAULT_MAX_VISIBLE_ITEM_COUNT = 10


class InvalidWidgetKindError(ValueError):
    """Raised when a choice or element type tag is unknown."""


@dataclass(frozen=True)
class WidgetKind:
    """UI rendering hint reported by a provider. Carries no resolution behavior."""

    choice_type: str = PARAMETER_TYPE_SINGLE_SELECT
    element_type: str = ELEMENT_TYPE_TEXT_BOX

    def __post_init__(self):
        if self.choice_type not in VALID_CHOICE_TYPES:
            raise InvalidWidgetKindError(
                f"Invalid choice type '{self.choice_type}'. Allowed: {', '.join(VALID_CHOICE_TYPES)}"
            )
        if self.element_type not in VALID_ELEMENT_TYPES:
            raise InvalidWidgetKindError(
                f"Invalid element type '{self.element_type}'. Allowed: {', '.join(VALID_ELEMENT_TYPES)}"
            )

    @property
    def is_multi_valued(self) -> bool:
        return self.choice_type in {PARAMETER_TYPE_MULTI_SELECT, PARAMETER_TYPE_CHECK_BOX}

    @property
    def tag(self) -> str:
        return f"{self.choice_type}:{self.element_type}"

    @classmethod
    def parse(cls, raw: Any) -> "WidgetKind":
        """
        Build a widget kind from a config value.

        Accepted shapes:
        - WidgetKind: returned as is
        - None: the default single-select text box
        - "PT_X" or "PT_X:ET_Y" strings (case-insensitive)
        - mapping with `choice_type` / `element_type` keys
        """
        if isinstance(raw, WidgetKind):
            return raw
        if raw is None:
            return cls()
        if isinstance(raw, str):
            choice_type, _, element_type = raw.strip().upper().partition(":")
            return cls(
                choice_type=choice_type or PARAMETER_TYPE_SINGLE_SELECT,
                element_type=element_type or ELEMENT_TYPE_TEXT_BOX,
            )
        if isinstance(raw, Mapping):
            return cls(
                choice_type=str(raw.get("choice_type") or PARAMETER_TYPE_SINGLE_SELECT).upper(),
                element_type=str(raw.get("element_type") or ELEMENT_TYPE_TEXT_BOX).upper(),
            )
        raise InvalidWidgetKindError(f"Unsupported widget kind value: {raw!r}")


@runtime_checkable
class ChoiceProvider(Protocol):
    """Capability set every concrete choice parameter supplies."""

    def get_choices(self, context: Mapping[str, str]) -> Any:
        """
        Return the ordered choices for the given context.

        `context` maps names of parameters resolved earlier in the same form
        to their canonical string values. It may be empty.
        """
        ...

    def get_widget_kind(self) -> WidgetKind:
        ...


@dataclass(frozen=True)
class CanonicalValue:
    """The single-string (name, value, description) form handed downstream."""

    name: str
    value: str
    description: str = ""

    def as_dict(self) -> dict[str, str]:
        return {"name": self.name, "value": self.value, "description": self.description}


@dataclass
class ChoiceParamSpec:
    """Declarative choice parameter definition."""

    name: str
    provider: ChoiceProvider
    description: str = ""
    max_visible_items: int = DEFAULT_MAX_VISIBLE_ITEM_COUNT

    def resolver(self, listener=None):
        from choiceflow.resolver import ParameterResolver

        return ParameterResolver(self.provider, max_visible_items=self.max_visible_items, listener=listener)
