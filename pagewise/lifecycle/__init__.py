from pagewise.lifecycle.observability import (
    enable_tracing,
    disable_tracing,
    NormalizationEvent,
    add_listener,
    remove_listener,
    capture_normalizations,
)

__all__ = [
    "enable_tracing",
    "disable_tracing",
    "NormalizationEvent",
    "add_listener",
    "remove_listener",
    "capture_normalizations",
]
