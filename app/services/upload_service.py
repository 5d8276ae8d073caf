"""
업로드 서비스 - 이미지 첨부 파일 검증 및 로컬 디스크 저장
"""
import logging
import os
import random
import re
import time
from typing import Any, Dict, Optional

from app.config.settings import Settings, get_settings
from app.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

# 확장자와 MIME 타입 모두 이 패턴에 맞아야 한다
ALLOWED_IMAGE_TYPES = re.compile(r"jpeg|jpg|png|gif")


class UploadService:
    """이미지 업로드 서비스"""

    FIELD_NAME = "image"

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.upload_dir = self.settings.UPLOAD_DIR

    def _generate_filename(self, original_name: str) -> str:
        """
        충돌하지 않는 파일명을 생성합니다.
        형식: image-{밀리초 타임스탬프}-{난수}{원본 확장자}
        """
        extension = os.path.splitext(original_name)[1].lower()
        unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10 ** 9)}"
        return f"{self.FIELD_NAME}-{unique_suffix}{extension}"

    def validate(self, original_name: Optional[str], content_type: Optional[str], size: int) -> None:
        """
        이미지 파일 여부와 크기를 검증합니다.

        Raises:
            ValidationError: 파일이 없거나, 이미지가 아니거나, 최대 크기를 넘는 경우
        """
        if not original_name or size == 0:
            raise ValidationError("파일이 없습니다")

        extension = os.path.splitext(original_name)[1].lower()
        if not (ALLOWED_IMAGE_TYPES.search(extension) and ALLOWED_IMAGE_TYPES.search(content_type or "")):
            raise ValidationError("이미지 파일만 업로드 가능합니다")

        if size > self.settings.MAX_UPLOAD_SIZE:
            self.reject_oversized()

    def reject_oversized(self) -> None:
        limit_mb = self.settings.MAX_UPLOAD_SIZE // (1024 * 1024)
        raise ValidationError(f"파일 크기는 {limit_mb}MB를 초과할 수 없습니다")

    def store_image(
        self,
        original_name: Optional[str],
        content_type: Optional[str],
        data: bytes,
    ) -> Dict[str, Any]:
        """
        이미지를 업로드 디렉터리에 저장합니다.

        일기와의 연결은 호출자가 일기 생성/수정 시 images 필드로 처리합니다.

        Args:
            original_name: 원본 파일명
            content_type: 요청에 선언된 MIME 타입
            data: 파일 내용

        Returns:
            {filename, originalName, path, size}
        """
        self.validate(original_name, content_type, len(data))

        filename = self._generate_filename(original_name)
        file_path = os.path.join(self.upload_dir, filename)
        os.makedirs(self.upload_dir, exist_ok=True)

        with open(file_path, "wb") as f:
            f.write(data)

        logger.info(f"이미지 업로드 완료: {file_path} ({len(data)} bytes)")
        return {
            "filename": filename,
            "originalName": original_name,
            "path": file_path,
            "size": len(data),
        }
