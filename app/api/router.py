"""
API Routes
중앙 라우터 - 모든 API 엔드포인트는 /api 아래에 위치
"""
from fastapi import APIRouter

from app.api.endpoints import health
from app.api.routes import admin_router, auth_router, diary_router, upload_router, user_router

api_router = APIRouter(prefix="/api")
api_router.include_router(auth_router)
api_router.include_router(user_router)
api_router.include_router(diary_router)
api_router.include_router(upload_router)
api_router.include_router(admin_router)

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(api_router)
