"""CLI for inspecting and resolving installed choice parameters."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

import pandas as pd

from choiceflow.discovery import list_parameter_names, load_param_spec
from choiceflow.events import call_with_events
from choiceflow.param_options import normalize_choices
from choiceflow.values import InvalidSubmissionError, split_values, validate_submission_record


class InvalidContextError(ValueError):
    """Raised when a --context argument is not KEY=VALUE."""


def _parse_kv(values: list[str] | None) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for item in values or []:
        if "=" not in item:
            raise InvalidContextError(f"Expected key=value argument, got: {item}")
        key, value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise InvalidContextError(f"Invalid key in argument: {item}")
        parsed[key] = value
    return parsed


def _parse_submission(raw: str) -> dict[str, Any]:
    try:
        record = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidSubmissionError(f"--submission is not valid JSON: {exc}") from exc
    validate_submission_record(record)
    return record


def _report_failure(step, status, detail="", **fields):
    if status == "failed":
        print(detail, file=sys.stderr)


def _print_choices_terminal(choices: dict[Any, Any], visible: int):
    if not choices:
        print("No choices returned.")
    else:
        frame = pd.DataFrame({"key": [str(k) for k in choices.keys()], "value": [str(v) for v in choices.values()]})
        print(frame.to_string(index=False))
    print(f"\nVisible items: {visible}")


def _print_value(value, output: str):
    if output == "json":
        print(json.dumps(value.as_dict()))
    elif output == "terminal":
        print(f"{value.name}={value.value}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dynamic choice parameter tools")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("list-parameters", help="List installed choice parameters")

    choices = sub.add_parser("choices", help="Show the choices of a parameter")
    choices.add_argument("--parameter", required=True)
    choices.add_argument(
        "--context",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Value of an already-resolved parameter (repeatable).",
    )
    choices.add_argument("--output", choices=["terminal", "json", "none"], default="terminal")

    default = sub.add_parser("default", help="Show the default value of a parameter")
    default.add_argument("--parameter", required=True)
    default.add_argument("--output", choices=["terminal", "json", "none"], default="terminal")

    resolve = sub.add_parser("resolve", help="Resolve a submitted value to its canonical form")
    resolve.add_argument("--parameter", required=True)
    group = resolve.add_mutually_exclusive_group(required=True)
    group.add_argument("--value", help="Single submitted value.")
    group.add_argument("--values", nargs="+", metavar="VALUE", help="Multiple submitted values, in order.")
    group.add_argument("--submission", metavar="JSON", help='Submission record, e.g. {"name": "env", "value": ["a"]}')
    resolve.add_argument("--output", choices=["terminal", "json", "none"], default="terminal")

    split = sub.add_parser("split", help="Split a joined multi-value string")
    split.add_argument("--value", required=True)
    return parser


def _cmd_choices(args):
    spec = load_param_spec(args.parameter)
    context = _parse_kv(args.context)
    # One provider call serves both the listing and the visible count.
    choices, error = call_with_events(
        lambda: normalize_choices(spec.provider.get_choices(dict(context))),
        "choices",
        spec.name,
        _report_failure,
    )
    if error is not None:
        choices = {}
    visible = min(len(choices), spec.max_visible_items)
    if args.output == "terminal":
        _print_choices_terminal(choices, visible)
    elif args.output == "json":
        payload = {
            "choices": [{"key": key, "value": value} for key, value in choices.items()],
            "visible_item_count": visible,
            "widget_kind": spec.provider.get_widget_kind().tag,
        }
        print(json.dumps(payload, default=str))


def _cmd_default(args):
    spec = load_param_spec(args.parameter)
    value = spec.resolver().default_value(spec.name, spec.description)
    _print_value(value, args.output)


def _cmd_resolve(args):
    spec = load_param_spec(args.parameter)
    resolver = spec.resolver()
    if args.submission is not None:
        record = _parse_submission(args.submission)
        value = resolver.resolve_record(spec.description, record)
    elif args.values is not None:
        value = resolver.resolve_from_submission(spec.name, spec.description, list(args.values))
    else:
        value = resolver.resolve_from_scalar(spec.name, spec.description, args.value)
    _print_value(value, args.output)


def main(argv: Sequence[str] | None = None):
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "list-parameters":
            for name in list_parameter_names():
                print(name)
            return 0
        if args.command == "choices":
            _cmd_choices(args)
            return 0
        if args.command == "default":
            _cmd_default(args)
            return 0
        if args.command == "resolve":
            _cmd_resolve(args)
            return 0
        if args.command == "split":
            for item in split_values(args.value):
                print(item)
            return 0
        parser.print_help()
        return 0
    except (InvalidContextError, InvalidSubmissionError, LookupError) as exc:
        parser.error(str(exc))
