from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_health_use_case
from app.api.schemas.pairs import HealthCacheResponse, HealthResponse
from app.application.use_cases.get_health import GetHealthUseCase


router = APIRouter()


@router.get("/api/health", response_model=HealthResponse)
def health(use_case: GetHealthUseCase = Depends(get_health_use_case)):
    output = use_case.execute()
    return HealthResponse(
        message=output.message,
        timestamp=output.timestamp,
        environment=output.environment,
        cache=HealthCacheResponse(
            assets_metadata_cached=output.assets_metadata_cached,
            last_metadata_update=output.last_metadata_update,
        ),
    )
