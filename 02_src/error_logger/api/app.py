"""FastAPI application receiving error reports."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import collector
from .store import ReportStore


def create_collector_app(
    store: ReportStore | None = None,
    allow_origins: list[str] | None = None,
) -> FastAPI:
    """Create and configure the collection FastAPI application."""
    fastapi_app = FastAPI(
        title="Error Collector API",
        description="Receives error reports posted by error-logger",
        version="0.1.0",
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    fastapi_app.state.store = store if store is not None else ReportStore()
    fastapi_app.include_router(collector.create_collector_router(fastapi_app.state.store))

    return fastapi_app
