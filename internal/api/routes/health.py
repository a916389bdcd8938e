"""Health check API routes."""

from fastapi import APIRouter, Response

router = APIRouter()


@router.get("/healthz")
async def health_check() -> Response:
    """Liveness probe, never touches storage."""
    return Response(status_code=200)
