"""Error enricher module."""

from .enricher import ErrorEnricher, IErrorEnricher, format_datetime, format_stack

__all__ = ["ErrorEnricher", "IErrorEnricher", "format_datetime", "format_stack"]
