"""Structured event helpers for provider calls."""

from __future__ import annotations

import time
import traceback
from typing import Any, Callable

EventListener = Callable[..., None]


def emit_event(listener: EventListener | None, step: str, status: str, detail: str = "", **fields: Any) -> None:
    """Emit an event if a listener was passed in."""
    if callable(listener):
        listener(step=step, status=status, detail=detail, **fields)


def call_with_events(
    fn: Callable[[], Any],
    step: str,
    description: str,
    listener: EventListener | None,
) -> tuple[Any, BaseException | None]:
    """
    Run a provider call with timing and event reporting.

    The wrapper:
    - emits `running/done/failed` events
    - reports elapsed seconds as `timing`
    - returns `(result, None)` on success and `(None, exc)` on failure
    """
    emit_event(listener, step, "running", description)
    start_time = time.perf_counter()
    try:
        output = fn()
    except Exception as exc:
        elapsed_s = time.perf_counter() - start_time
        emit_event(
            listener,
            step,
            "failed",
            f"ERROR in {step}: {exc}",
            timing=elapsed_s,
            error=exc,
            traceback=traceback.format_exc(),
        )
        return None, exc
    elapsed_s = time.perf_counter() - start_time
    emit_event(listener, step, "done", description, timing=elapsed_s)
    return output, None
