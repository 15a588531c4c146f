"""Viewport size providers."""

import os
import shutil
import sys
from typing import Protocol, TextIO

Size = tuple[int, int]


class IViewportProvider(Protocol):
    """Reports the visible area in two independent ways."""

    def document_size(self) -> Size:
        """Size reported by the output document (width, height)."""
        ...

    def window_size(self) -> Size:
        """Size reported by the surrounding window (width, height)."""
        ...


class TerminalViewport:
    """Viewport of the terminal attached to the diagnostic stream."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def document_size(self) -> Size:
        """Size of the terminal behind the stream, (0, 0) if it has none."""
        stream = self._stream or sys.stderr
        try:
            size = os.get_terminal_size(stream.fileno())
        except (AttributeError, OSError, ValueError):
            return (0, 0)
        return (size.columns, size.lines)

    def window_size(self) -> Size:
        """Size from COLUMNS/LINES or the controlling terminal."""
        size = shutil.get_terminal_size(fallback=(0, 0))
        return (size.columns, size.lines)


class StaticViewport:
    """Fixed sizes, for hosts without a terminal."""

    def __init__(self, document: Size = (0, 0), window: Size = (0, 0)):
        self._document = document
        self._window = window

    def document_size(self) -> Size:
        return self._document

    def window_size(self) -> Size:
        return self._window


def viewport_string(provider: IViewportProvider) -> str:
    """Return "<width>x<height>" using the larger value per axis."""
    doc_w, doc_h = provider.document_size()
    win_w, win_h = provider.window_size()
    width = max(doc_w or 0, win_w or 0, 0)
    height = max(doc_h or 0, win_h or 0, 0)
    return f"{width}x{height}"
