"""Health check API endpoints."""

from fastapi import APIRouter

from app.config import settings
from app.models.response.response import HealthCheckResponse
from app.services.ontology import DEFAULT_ONTOLOGY

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    tags=["Health"],
    summary="Health check endpoint",
    description="Check if the service is running and healthy",
    operation_id="get_service_health_status",
)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint."""
    # The ontology is the only dependency; it must have its rules loaded
    healthy = bool(DEFAULT_ONTOLOGY.classification_rules)

    return HealthCheckResponse(
        status="healthy" if healthy else "degraded",
        version=settings.app_version,
        service=settings.app_name,
    )
