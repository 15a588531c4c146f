"""API routes."""

from .collector import ErrorPayload, create_collector_router

__all__ = ["ErrorPayload", "create_collector_router"]
