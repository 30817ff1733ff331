"""Discovery helpers for choice parameter plugins."""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import entry_points

from choiceflow.autodefine import coerce_to_param_spec
from choiceflow.contracts import ChoiceParamSpec

PARAMETER_GROUP = "choiceflow.parameters"


def _select(name: str | None = None):
    eps = entry_points()
    if hasattr(eps, "select"):
        if name is None:
            return eps.select(group=PARAMETER_GROUP)  # type: ignore[attr-defined]
        return eps.select(group=PARAMETER_GROUP, name=name)  # type: ignore[attr-defined]
    selected = eps.get(PARAMETER_GROUP, [])  # type: ignore[call-arg]
    return [ep for ep in selected if name is None or ep.name == name]


def list_parameter_names() -> list[str]:
    """Return installed parameter names registered under choiceflow.parameters."""
    return sorted(ep.name for ep in _select())


def load_param_spec(parameter_name: str) -> ChoiceParamSpec:
    """
    Load a choice parameter definition by name.

    Resolution order:
    1) Entry-point group `choiceflow.parameters`
    2) Module import `<parameter_name>.choice_parameter:get_param_spec`
    """
    for ep in _select(parameter_name):
        obj = ep.load()
        return coerce_to_param_spec(obj, name=parameter_name)

    module_name = f"{parameter_name.replace('-', '_')}.choice_parameter"
    try:
        module = import_module(module_name)
    except ModuleNotFoundError as exc:
        if exc.name not in {module_name, module_name.rsplit(".", 1)[0]}:
            raise
        raise LookupError(f"No choice parameter named '{parameter_name}' is installed") from exc
    if not hasattr(module, "get_param_spec"):
        raise AttributeError(f"{module_name} is missing get_param_spec()")
    return coerce_to_param_spec(module.get_param_spec, name=parameter_name)
