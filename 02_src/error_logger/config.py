"""Configuration for error capture and reporting."""

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Callable, Mapping

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "error_logger.log"

ENV_PREFIX = "ERROR_LOGGER_"

Callback = Callable[[], None]


class ConfigError(ValueError):
    """Raised when required configuration is missing or invalid."""


@dataclass(frozen=True)
class RemoteLoggingConfig:
    """Settings for delivering error records to a remote URL."""

    enable: bool = False
    url: str | None = None
    success_callback: Callback | None = None
    error_callback: Callback | None = None
    timeout: float | None = None  # None waits forever

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "RemoteLoggingConfig":
        """Build remote settings from defaults plus the given keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(options) - known
        if unknown:
            raise ConfigError(f"Unknown remote_logging options: {sorted(unknown)}")
        return cls(**dict(options))


@dataclass(frozen=True)
class ErrorLoggerConfig:
    """Top-level error logger configuration."""

    detailed_errors: bool = True
    remote_logging: RemoteLoggingConfig = field(default_factory=RemoteLoggingConfig)

    @classmethod
    def from_env(cls, default: "ErrorLoggerConfig | None" = None) -> "ErrorLoggerConfig":
        """
        Create config from environment variables.

        Supported variables:
            ERROR_LOGGER_DETAILED_ERRORS: "1"/"0"
            ERROR_LOGGER_REMOTE_ENABLE: "1"/"0"
            ERROR_LOGGER_REMOTE_URL: collection endpoint
            ERROR_LOGGER_REMOTE_TIMEOUT: seconds (float)

        Callbacks cannot come from the environment and are kept from `default`.
        """
        base = default if default is not None else cls()
        remote = base.remote_logging

        detailed_errors = _env_flag(f"{ENV_PREFIX}DETAILED_ERRORS", base.detailed_errors)
        enable = _env_flag(f"{ENV_PREFIX}REMOTE_ENABLE", remote.enable)
        url = os.getenv(f"{ENV_PREFIX}REMOTE_URL", "").strip() or remote.url

        timeout = remote.timeout
        timeout_raw = os.getenv(f"{ENV_PREFIX}REMOTE_TIMEOUT", "").strip()
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError:
                raise ConfigError(f"Invalid {ENV_PREFIX}REMOTE_TIMEOUT: {timeout_raw!r}") from None

        return cls(
            detailed_errors=detailed_errors,
            remote_logging=replace(remote, enable=enable, url=url, timeout=timeout),
        )


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


def merge_config(
    current: ErrorLoggerConfig,
    options: ErrorLoggerConfig | Mapping[str, Any] | None,
) -> ErrorLoggerConfig:
    """
    Override top-level keys of `current` with those present in `options`.

    The merge is shallow: a `remote_logging` value replaces the whole
    previous remote config. A partial mapping such as ``{"enable": True}``
    starts from RemoteLoggingConfig defaults, so an earlier url and
    callbacks are dropped.

    Args:
        current: Configuration in effect.
        options: Full config, mapping of top-level keys, or None.

    Returns:
        New ErrorLoggerConfig.
    """
    if options is None:
        return current

    if isinstance(options, ErrorLoggerConfig):
        return options

    known = {f.name for f in fields(ErrorLoggerConfig)}
    unknown = set(options) - known
    if unknown:
        raise ConfigError(f"Unknown options: {sorted(unknown)}")

    overrides: dict[str, Any] = {}
    if "detailed_errors" in options:
        overrides["detailed_errors"] = bool(options["detailed_errors"])

    if "remote_logging" in options:
        remote = options["remote_logging"]
        if remote is None:
            remote = RemoteLoggingConfig()
        elif isinstance(remote, Mapping):
            remote = RemoteLoggingConfig.from_mapping(remote)
        elif not isinstance(remote, RemoteLoggingConfig):
            raise ConfigError(
                f"remote_logging must be a mapping or RemoteLoggingConfig, got {type(remote).__name__}"
            )
        overrides["remote_logging"] = remote

    return replace(current, **overrides)
