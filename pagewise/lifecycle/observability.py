from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator

logger = logging.getLogger("pagewise")


@dataclass(frozen=True)
class NormalizationEvent:
    """Represents a single out-of-range argument that was corrected."""

    field: str
    requested: int | None
    resolved: int
    reason: str = ""
    info_class: str = ""


class _TracingState:
    """Whether tracing is on and who is listening."""

    def __init__(self) -> None:
        self.enabled: bool = False
        self.listeners: list[Callable[[NormalizationEvent], Any]] = []


_state = _TracingState()


def enable_tracing() -> None:
    """Start delivering normalization events to listeners."""
    _state.enabled = True


def disable_tracing() -> None:
    """Stop delivering events and drop every listener."""
    _state.enabled = False
    _state.listeners.clear()


def add_listener(callback: Callable[[NormalizationEvent], Any]) -> None:
    """Register a callback invoked for every correction while tracing is enabled."""
    _state.listeners.append(callback)


def remove_listener(callback: Callable[[NormalizationEvent], Any]) -> None:
    _state.listeners.remove(callback)


@contextmanager
def capture_normalizations() -> Iterator[list[NormalizationEvent]]:
    """Collect the corrections made inside the block.

    Tracing is switched on for the duration of the block and restored to its
    previous state afterwards::

        with capture_normalizations() as events:
            PaginationInfo(total, requested_page)
        if events:
            ...
    """
    events: list[NormalizationEvent] = []
    was_enabled = _state.enabled
    _state.enabled = True
    add_listener(events.append)
    try:
        yield events
    finally:
        remove_listener(events.append)
        _state.enabled = was_enabled


def emit_event(event: NormalizationEvent) -> None:
    """Log a normalization event and, while tracing, notify listeners."""
    logger.debug(
        "Normalized %s on %s: %r -> %r (%s)",
        event.field,
        event.info_class or "PaginationInfo",
        event.requested,
        event.resolved,
        event.reason,
    )

    if not _state.enabled:
        return

    for listener in list(_state.listeners):
        listener(event)
