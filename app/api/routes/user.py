"""
사용자 API 라우터 - 프로필, 설정, 일기 비밀번호
"""
from fastapi import APIRouter, Depends

from app.api.dependencies import get_current_user, get_user_service
from app.api.schemas import DiaryPasswordRequest, SettingsUpdateRequest
from app.models.user import User
from app.services.user_service import UserService

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/profile")
async def get_profile(current_user: User = Depends(get_current_user)):
    """내 프로필 조회"""
    return {"success": True, "data": current_user.to_dict()}


@router.put("/settings")
async def update_settings(
    request: SettingsUpdateRequest,
    current_user: User = Depends(get_current_user),
    users: UserService = Depends(get_user_service),
):
    """설정 수정 (전달된 항목만 반영)"""
    user = users.update_settings(
        current_user.id,
        theme=request.theme,
        notifications=request.notifications.model_dump() if request.notifications else None,
        require_password=request.privacy.require_password if request.privacy else None,
    )
    return {"success": True, "data": user.to_dict()}


@router.put("/diary-password")
def set_diary_password(
    request: DiaryPasswordRequest,
    current_user: User = Depends(get_current_user),
    users: UserService = Depends(get_user_service),
):
    """일기 비밀번호 설정"""
    users.set_diary_password(current_user.id, request.password)
    return {"success": True, "message": "일기 비밀번호가 설정되었습니다"}


@router.post("/diary-password/verify")
def verify_diary_password(
    request: DiaryPasswordRequest,
    current_user: User = Depends(get_current_user),
    users: UserService = Depends(get_user_service),
):
    """일기 비밀번호 확인"""
    valid = users.verify_diary_password(current_user.id, request.password)
    return {"success": True, "data": {"valid": valid}}
