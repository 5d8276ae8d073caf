"""
관리자 API 라우터 - Admin-Key 헤더로 보호
"""
from fastapi import APIRouter, Depends

from app.api.dependencies import require_admin
from app.services.admin_service import AdminService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/dashboard")
async def dashboard(admin: AdminService = Depends(require_admin)):
    """대시보드 통계"""
    return {"success": True, "data": admin.dashboard_stats()}


@router.get("/users")
async def list_users(admin: AdminService = Depends(require_admin)):
    """전체 사용자 목록"""
    return {"success": True, "data": admin.list_users()}


@router.get("/diaries")
async def list_diaries(admin: AdminService = Depends(require_admin)):
    """최근 일기 100개 (삭제된 일기 포함)"""
    return {"success": True, "data": admin.list_diaries()}
