"""
일기 API 라우터 - 생성, 목록, 월별 조회, 단건 조회/수정/삭제
모든 엔드포인트는 Bearer 토큰이 필요합니다.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_current_user, get_diary_service
from app.api.schemas import DiaryCreateRequest, DiaryUpdateRequest
from app.models.user import User
from app.services.diary_service import DEFAULT_LIMIT, DiaryService

router = APIRouter(prefix="/diary", tags=["diary"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_diary(
    request: DiaryCreateRequest,
    current_user: User = Depends(get_current_user),
    diaries: DiaryService = Depends(get_diary_service),
):
    """일기 생성"""
    entry = diaries.create(current_user.id, request)
    return {"success": True, "message": "일기가 저장되었습니다", "data": entry.to_dict()}


@router.get("")
async def list_diaries(
    page: int = Query(1, description="페이지 번호 (1 이상)"),
    limit: int = Query(DEFAULT_LIMIT, description="페이지 크기 (1-100)"),
    type: Optional[str] = Query(None, description="memo | diary"),
    start_date: Optional[str] = Query(None, alias="startDate", description="시작 날짜 (ISO 8601, 포함)"),
    end_date: Optional[str] = Query(None, alias="endDate", description="종료 날짜 (ISO 8601, 포함)"),
    current_user: User = Depends(get_current_user),
    diaries: DiaryService = Depends(get_diary_service),
):
    """
    일기 목록 조회

    - date 내림차순
    - 삭제된 일기는 제외
    """
    entries, pagination = diaries.list(
        current_user.id,
        page=page,
        limit=limit,
        entry_type=type,
        start_date=start_date,
        end_date=end_date,
    )
    return {
        "success": True,
        "data": {
            "diaries": [entry.to_dict() for entry in entries],
            "pagination": pagination,
        },
    }


@router.get("/month/{year}/{month}")
async def list_month_diaries(
    year: int,
    month: int,
    current_user: User = Depends(get_current_user),
    diaries: DiaryService = Depends(get_diary_service),
):
    """특정 달의 일기 조회"""
    entries = diaries.list_by_month(current_user.id, year, month)
    return {"success": True, "data": [entry.to_dict() for entry in entries]}


@router.get("/{entry_id}")
async def get_diary(
    entry_id: int,
    current_user: User = Depends(get_current_user),
    diaries: DiaryService = Depends(get_diary_service),
):
    """일기 단건 조회"""
    entry = diaries.get(current_user.id, entry_id)
    return {"success": True, "data": entry.to_dict()}


@router.put("/{entry_id}")
async def update_diary(
    entry_id: int,
    request: DiaryUpdateRequest,
    current_user: User = Depends(get_current_user),
    diaries: DiaryService = Depends(get_diary_service),
):
    """일기 수정 (전달된 필드만)"""
    entry = diaries.update(current_user.id, entry_id, request)
    return {"success": True, "message": "일기가 수정되었습니다", "data": entry.to_dict()}


@router.delete("/{entry_id}")
async def delete_diary(
    entry_id: int,
    current_user: User = Depends(get_current_user),
    diaries: DiaryService = Depends(get_diary_service),
):
    """일기 삭제 (소프트 삭제)"""
    diaries.delete(current_user.id, entry_id)
    return {"success": True, "message": "일기가 삭제되었습니다"}
