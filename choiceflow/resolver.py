"""Resolution of submitted and default values for choice parameters."""

from __future__ import annotations

from typing import Any, Mapping

from choiceflow.contracts import DEFAULT_MAX_VISIBLE_ITEM_COUNT, CanonicalValue, ChoiceProvider, WidgetKind
from choiceflow.events import EventListener, call_with_events, emit_event
from choiceflow.param_options import count_choices, first_choice, normalize_choices
from choiceflow.values import stringify, value_to_text


class ParameterResolver:
    """
    Turn form submissions into canonical values for one choice provider.

    The resolver holds no choice state: every operation asks the provider
    again, once. Provider failures never leave this class; they are reported
    to `listener` as `failed` events and replaced with "" or 0.
    """

    def __init__(
        self,
        provider: ChoiceProvider,
        max_visible_items: int = DEFAULT_MAX_VISIBLE_ITEM_COUNT,
        listener: EventListener | None = None,
    ):
        self.provider = provider
        self.max_visible_items = max(0, int(max_visible_items))
        self.listener = listener

    def resolve_from_scalar(self, name: str, description: str, raw_value: str | None) -> CanonicalValue:
        return CanonicalValue(name=name, value=stringify(raw_value), description=description)

    def resolve_from_submission(self, name: str, description: str, submitted_value: Any) -> CanonicalValue:
        return CanonicalValue(name=name, value=value_to_text(submitted_value), description=description)

    def resolve_record(self, description: str, record: Any) -> CanonicalValue:
        """Resolve a `{"name": ..., "value": ...}` submission record. Anything else resolves empty."""
        if not isinstance(record, Mapping):
            return CanonicalValue(name="", value="", description=description)
        return self.resolve_from_submission(stringify(record.get("name")), description, record.get("value"))

    def _fetch_choices(self, context: Mapping[str, str] | None, step: str) -> dict[Any, Any] | None:
        snapshot = dict(context or {})
        choices, error = call_with_events(
            lambda: normalize_choices(self.provider.get_choices(snapshot)),
            step,
            f"{len(snapshot)} context value(s)",
            self.listener,
        )
        if error is not None:
            return None
        return choices

    def default_value(self, name: str, description: str = "") -> CanonicalValue:
        """
        Derive the value used when nothing was submitted.

        The provider is asked with an empty context, since no upstream values
        are known yet. The first choice in insertion order wins; no choices,
        or any provider failure, gives "".
        """
        choices = self._fetch_choices({}, "default_value")
        value = ""
        if choices:
            try:
                value = stringify(first_choice(choices))
            except Exception as exc:
                emit_event(
                    self.listener, "default_value", "failed", f"ERROR stringifying first choice: {exc}", error=exc
                )
                value = ""
        return CanonicalValue(name=name, value=value, description=description)

    def visible_item_count(self, context: Mapping[str, str] | None = None) -> int:
        """Number of rows a list widget shows: the choice count, capped."""
        choices = self._fetch_choices(context, "visible_item_count")
        return min(count_choices(choices), self.max_visible_items)

    def widget_kind(self) -> WidgetKind:
        return self.provider.get_widget_kind()
