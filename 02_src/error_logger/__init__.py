"""Error logger: capture uncaught errors, enrich them, and report them."""

from .app import ErrorLogger, IErrorLogger, create_error_logger
from .clock import ISessionClock, SessionClock
from .config import ConfigError, ErrorLoggerConfig, RemoteLoggingConfig, merge_config
from .duration import decompose_duration, format_duration
from .enricher import ErrorEnricher, IErrorEnricher
from .host import (
    ErrorEventSource,
    ExceptHookSource,
    IErrorEventSource,
    IViewportProvider,
    LoopErrorSource,
    StaticViewport,
    TerminalViewport,
)
from .models import DeliveryResult, ErrorEvent, ErrorRecord
from .reporter import ConsoleSink, RemoteSink

__all__ = [
    # Entry point
    "ErrorLogger",
    "IErrorLogger",
    "create_error_logger",
    # Configuration
    "ConfigError",
    "ErrorLoggerConfig",
    "RemoteLoggingConfig",
    "merge_config",
    # Models
    "ErrorEvent",
    "ErrorRecord",
    "DeliveryResult",
    # Components
    "ISessionClock",
    "SessionClock",
    "IErrorEnricher",
    "ErrorEnricher",
    "ConsoleSink",
    "RemoteSink",
    "decompose_duration",
    "format_duration",
    # Host
    "IErrorEventSource",
    "ErrorEventSource",
    "ExceptHookSource",
    "LoopErrorSource",
    "IViewportProvider",
    "TerminalViewport",
    "StaticViewport",
]
