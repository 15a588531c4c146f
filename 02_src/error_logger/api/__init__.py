"""Error collection API."""

from .app import create_collector_app
from .store import ReportStore

__all__ = ["create_collector_app", "ReportStore"]
