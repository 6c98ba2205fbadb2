"""Domain entities - objects with identity and mutable state."""

from .output_line_store import OutputLineStore
from .stream_line_buffer import StreamLineBuffer

__all__ = [
    "OutputLineStore",
    "StreamLineBuffer",
]
