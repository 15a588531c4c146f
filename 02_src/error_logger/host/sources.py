"""Sources of uncaught error events."""

import asyncio
import sys
import threading
from typing import Any, Callable, Protocol

from ..logging_config import get_logger
from ..models import ErrorEvent

logger = get_logger(__name__)


ErrorListener = Callable[[ErrorEvent], Any]


class IErrorEventSource(Protocol):
    """Host channel notifying listeners of uncaught errors."""

    def add_listener(self, listener: ErrorListener) -> None:
        """Subscribe a listener."""
        ...

    def remove_listener(self, listener: ErrorListener) -> None:
        """Unsubscribe a listener; no-op if it is not subscribed."""
        ...


class ErrorEventSource:
    """
    In-process error event channel.

    Subclasses hook into the host in `_install()` when the first listener
    arrives and unhook in `_uninstall()` when the last one leaves.
    """

    def __init__(self) -> None:
        self._listeners: list[ErrorListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: ErrorListener) -> None:
        """Subscribe a listener."""
        self._listeners.append(listener)
        if len(self._listeners) == 1:
            self._install()

    def remove_listener(self, listener: ErrorListener) -> None:
        """Unsubscribe a listener; no-op if it is not subscribed."""
        if listener not in self._listeners:
            return
        self._listeners.remove(listener)
        if not self._listeners:
            self._uninstall()

    def emit(self, event: ErrorEvent) -> None:
        """Deliver an event to every listener, in subscription order."""
        for listener in list(self._listeners):
            listener(event)

    def _install(self) -> None:
        pass

    def _uninstall(self) -> None:
        pass


class ExceptHookSource(ErrorEventSource):
    """
    Uncaught exceptions from sys.excepthook and threading.excepthook.

    A hook is only unhooked while it is still the outermost one. If another
    hook was installed on top of it, it stays in the chain (emitting to no
    one while there are no listeners) and is reused on the next install.
    """

    def __init__(self) -> None:
        super().__init__()
        self._previous_excepthook = None
        self._previous_threading_excepthook = None
        self._sys_hooked = False
        self._threading_hooked = False

    @property
    def hooked(self) -> bool:
        """Whether any of this source's hooks is still in a hook chain."""
        return self._sys_hooked or self._threading_hooked

    def _install(self) -> None:
        if not self._sys_hooked:
            self._previous_excepthook = sys.excepthook
            sys.excepthook = self._excepthook
            self._sys_hooked = True
        if not self._threading_hooked:
            self._previous_threading_excepthook = threading.excepthook
            threading.excepthook = self._threading_excepthook
            self._threading_hooked = True
        logger.debug("Installed exception hooks")

    def _uninstall(self) -> None:
        if sys.excepthook == self._excepthook:
            sys.excepthook = self._previous_excepthook
            self._sys_hooked = False
        if threading.excepthook == self._threading_excepthook:
            threading.excepthook = self._previous_threading_excepthook
            self._threading_hooked = False
        if self.hooked:
            logger.debug("Exception hooks left chained under a later hook")
        else:
            logger.debug("Restored exception hooks")

    def _excepthook(self, exc_type, exc, tb) -> None:
        try:
            if exc is not None and issubclass(exc_type, Exception):
                if exc.__traceback__ is None:
                    exc = exc.with_traceback(tb)
                self.emit(ErrorEvent.from_exception(exc))
        finally:
            self._previous_excepthook(exc_type, exc, tb)

    def _threading_excepthook(self, args: threading.ExceptHookArgs) -> None:
        try:
            exc = args.exc_value
            if exc is not None and issubclass(args.exc_type, Exception):
                self.emit(ErrorEvent.from_exception(exc))
        finally:
            self._previous_threading_excepthook(args)


class LoopErrorSource(ErrorEventSource):
    """Errors reported to an asyncio event loop's exception handler."""

    def __init__(self, loop: asyncio.AbstractEventLoop):
        super().__init__()
        self._loop = loop
        self._previous_handler = None
        self._hooked = False

    def _install(self) -> None:
        if self._hooked:
            return
        self._previous_handler = self._loop.get_exception_handler()
        self._loop.set_exception_handler(self._handle_exception)
        self._hooked = True
        logger.debug("Installed loop exception handler")

    def _uninstall(self) -> None:
        if self._loop.get_exception_handler() == self._handle_exception:
            self._loop.set_exception_handler(self._previous_handler)
            self._hooked = False
            logger.debug("Restored loop exception handler")

    def _handle_exception(self, loop: asyncio.AbstractEventLoop, context: dict) -> None:
        exc = context.get("exception")
        if exc is not None:
            event = ErrorEvent.from_exception(exc)
        else:
            event = ErrorEvent(
                type="error",
                message=context.get("message", ""),
                filename="",
                lineno=0,
                colno=0,
            )

        try:
            self.emit(event)
        finally:
            if self._previous_handler is not None:
                self._previous_handler(loop, context)
            else:
                loop.default_exception_handler(context)
