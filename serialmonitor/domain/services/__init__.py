"""Domain services - pure business logic operations."""

from .auto_scroll import AutoScrollPolicy
from .connection_lifecycle import ConnectionLifecycleController
from .timestamp_annotator import (
    TIMESTAMP_SEPARATOR,
    Clock,
    SystemClock,
    TimestampAnnotator,
    format_timestamp,
)

__all__ = [
    "AutoScrollPolicy",
    "Clock",
    "ConnectionLifecycleController",
    "SystemClock",
    "TIMESTAMP_SEPARATOR",
    "TimestampAnnotator",
    "format_timestamp",
]
