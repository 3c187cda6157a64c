"""
Health check router.

Liveness endpoint reporting the application version and which
storage backend this process was configured with.
"""

from fastapi import APIRouter

from packit.core.config import settings
from packit.interfaces.packing.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=settings.version,
        storage_backend=settings.storage_backend,
    )
