"""
업로드 API 라우터 - 이미지 첨부
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from app.api.dependencies import get_current_user, get_upload_service
from app.core.exceptions import ValidationError
from app.models.user import User
from app.services.upload_service import UploadService

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post("/image")
async def upload_image(
    image: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    uploads: UploadService = Depends(get_upload_service),
):
    """
    이미지 업로드 (multipart 필드명: image)

    - jpeg, jpg, png, gif / 최대 10MB
    - 반환된 정보를 일기 생성/수정 시 images에 담아 연결
    """
    if image is None:
        raise ValidationError("파일이 없습니다")

    max_size = uploads.settings.MAX_UPLOAD_SIZE
    if image.size is not None and image.size > max_size:
        uploads.reject_oversized()

    # 최대 크기 + 1바이트까지만 읽는다
    data = await image.read(max_size + 1)
    stored = uploads.store_image(image.filename, image.content_type, data)
    return {"success": True, "data": stored}
