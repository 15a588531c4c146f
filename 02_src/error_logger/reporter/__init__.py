"""Reporter sinks: console and remote."""

from .console import ConsoleSink, render_record
from .remote import CONTENT_TYPE, Delivery, RemoteSink, notify_callbacks

__all__ = [
    "ConsoleSink",
    "render_record",
    "RemoteSink",
    "notify_callbacks",
    "Delivery",
    "CONTENT_TYPE",
]
