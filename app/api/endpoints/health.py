"""
Health Check Endpoint
"""
from fastapi import APIRouter, Depends

from app.api.schemas import HealthResponse
from app.config.settings import Settings, get_settings

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)):
    """헬스체크 엔드포인트 (K8s liveness/readiness probe용)"""
    return {"status": "healthy", "service": settings.APP_NAME}
