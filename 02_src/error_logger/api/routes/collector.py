"""Error collection API routes."""

from pydantic import BaseModel
from fastapi import APIRouter, Query

from ...logging_config import get_logger
from ..store import ReportStore

logger = get_logger(__name__)


class ErrorPayload(BaseModel):
    """Request model for a reported error."""

    type: str
    message: str
    path: str
    line: int
    column: int
    stackTrace: list[str]
    viewport: str
    timeSpend: int
    datetime: str


class AcceptedResponse(BaseModel):
    """Response model for an accepted report."""

    status: str
    count: int


def create_collector_router(store: ReportStore) -> APIRouter:
    """Create error collection router."""
    router = APIRouter(prefix="/api", tags=["errors"])

    @router.post("/errors", response_model=AcceptedResponse)
    async def receive_error(payload: ErrorPayload) -> dict:
        """Accept one error report."""
        count = store.add(payload.model_dump())
        logger.info(
            "Received error report",
            extra={"context": {"message": payload.message, "path": payload.path}},
        )
        return {"status": "accepted", "count": count}

    @router.get("/errors", response_model=list[ErrorPayload])
    async def list_errors(
        limit: int | None = Query(None, ge=1, le=1000),
    ) -> list[dict]:
        """Get received reports, oldest first."""
        return store.get_reports(limit=limit)

    @router.delete("/errors")
    async def clear_errors() -> dict:
        """Drop all received reports."""
        store.clear()
        return {"status": "cleared"}

    return router
