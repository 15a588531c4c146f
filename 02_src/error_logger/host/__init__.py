"""Host integration: error event sources and viewport providers."""

from .sources import (
    ErrorEventSource,
    ErrorListener,
    ExceptHookSource,
    IErrorEventSource,
    LoopErrorSource,
)
from .viewport import IViewportProvider, StaticViewport, TerminalViewport, viewport_string

__all__ = [
    # Sources
    "IErrorEventSource",
    "ErrorEventSource",
    "ErrorListener",
    "ExceptHookSource",
    "LoopErrorSource",
    # Viewport
    "IViewportProvider",
    "TerminalViewport",
    "StaticViewport",
    "viewport_string",
]
