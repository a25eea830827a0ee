from fastapi import APIRouter, Request

from nova.schemas.responseSchema import APIResponse, HealthStatus


router = APIRouter(tags=["Health Check"])


@router.get(
    "/health",
    response_model=APIResponse[HealthStatus],
    response_model_exclude_none=True,
)
async def health_check(request: Request):
    """Liveness probe; does not touch the store."""
    settings = request.app.state.settings
    return APIResponse(
        success=True,
        message=f"{settings.APP_NAME} is running",
        data=HealthStatus(version=settings.APP_VERSION, status="healthy"),
    )
