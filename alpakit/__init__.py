"""Host-side helpers: version packing, scope logging, a callback thread, tag dictionaries, n-dimensional loops and stream benchmark reporting."""

__version__ = "0.1.0"
__all__ = [
    "version",
    "debug",
    "callback_thread",
    "tagdict",
    "meta",
    "stream_common",
    "stream_report",
]