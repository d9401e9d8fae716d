"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status, version and store size.
"""

from fastapi import APIRouter, Depends, Request

from qa_service.domain.qa.ports import QAStore
from qa_service.interfaces.qa.dependencies import get_store
from qa_service.interfaces.qa.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and entity counts.",
)
async def health_check(
    request: Request, store: QAStore = Depends(get_store)
) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok",
        version=request.app.version,
        questions=len(await store.list_questions()),
        answers=await store.count_answers(),
    )
