"""Error logger bootstrap: wires the listener to enricher and sinks."""

from typing import Any, Mapping, Protocol

from .clock import ISessionClock, SessionClock
from .config import ErrorLoggerConfig, merge_config
from .enricher import ErrorEnricher, IErrorEnricher
from .host import ExceptHookSource, IErrorEventSource, IViewportProvider, TerminalViewport
from .logging_config import get_logger
from .models import ErrorEvent, ErrorRecord
from .reporter import ConsoleSink, Delivery, RemoteSink

logger = get_logger(__name__)

Options = ErrorLoggerConfig | Mapping[str, Any] | None


class IErrorLogger(Protocol):
    """Global error capture and reporting."""

    def init(self, options: Options = None) -> None:
        """Merge options, restart the session clock, (re)install the listener."""
        ...

    def close(self) -> None:
        """Remove the listener."""
        ...


class ErrorLogger:
    """Captures uncaught errors from a source and reports them."""

    def __init__(
        self,
        source: IErrorEventSource,
        *,
        config: ErrorLoggerConfig | None = None,
        clock: ISessionClock | None = None,
        viewport: IViewportProvider | None = None,
        enricher: IErrorEnricher | None = None,
        console: ConsoleSink | None = None,
        remote: RemoteSink | None = None,
    ):
        self._source = source
        self._config = config or ErrorLoggerConfig()
        self._clock = clock or SessionClock()
        self._enricher = enricher or ErrorEnricher(
            clock=self._clock,
            viewport=viewport or TerminalViewport(),
        )
        self._console = console or ConsoleSink()
        self._remote = remote or RemoteSink()

    @property
    def config(self) -> ErrorLoggerConfig:
        """Configuration in effect."""
        return self._config

    @property
    def clock(self) -> ISessionClock:
        return self._clock

    def init(self, options: Options = None) -> None:
        """
        Merge options, restart the session clock, (re)install the listener.

        Calling init() again never subscribes the listener twice.

        Args:
            options: ErrorLoggerConfig or mapping of top-level keys
                     (detailed_errors, remote_logging). Top-level keys
                     replace the current values wholesale.
        """
        self._config = merge_config(self._config, options)
        self._clock.init()

        self._source.remove_listener(self._error_listener)
        self._source.add_listener(self._error_listener)

        logger.info(
            "Error logger initialized (detailed_errors=%s, remote_logging=%s)",
            self._config.detailed_errors,
            self._config.remote_logging.enable,
        )

    def close(self) -> None:
        """Remove the listener."""
        self._source.remove_listener(self._error_listener)
        logger.info("Error logger closed")

    def _error_listener(self, event: ErrorEvent) -> Delivery | None:
        """Enrich one error event and dispatch it to the enabled sinks."""
        record = self._enricher.enrich(event)
        return self.dispatch(record)

    def dispatch(self, record: ErrorRecord) -> Delivery | None:
        """
        Send `record` to the sinks enabled by the current configuration.

        Returns:
            The remote delivery task or thread if one was started, else None.

        Raises:
            ConfigError: If remote logging is enabled without a URL.
        """
        config = self._config

        logger.debug(
            "Dispatching error record",
            extra={
                "context": {
                    "type": record.type,
                    "message": record.message,
                    "path": record.path,
                    "line": record.line,
                    "column": record.column,
                    "timeSpend": record.time_spend,
                }
            },
        )

        if config.detailed_errors:
            self._console.write(record)

        if config.remote_logging.enable:
            return self._remote.send(record, config.remote_logging)

        return None


def create_error_logger(
    options: Options = None,
    *,
    source: IErrorEventSource | None = None,
    config: ErrorLoggerConfig | None = None,
    **components: Any,
) -> ErrorLogger:
    """
    Create an ErrorLogger and initialize it.

    The base configuration is `config` overridden by ERROR_LOGGER_*
    environment variables; `options` are merged on top of it.

    Args:
        options: Passed to ErrorLogger.init().
        source: Error event source. Defaults to ExceptHookSource.
        config: Base configuration before environment overrides.
        **components: Extra ErrorLogger keyword arguments (clock, viewport, ...).

    Returns:
        Initialized ErrorLogger.
    """
    error_logger = ErrorLogger(
        source or ExceptHookSource(),
        config=ErrorLoggerConfig.from_env(config),
        **components,
    )
    error_logger.init(options)
    return error_logger
