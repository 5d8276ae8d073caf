"""
서비스 계층 에러 정의

서비스는 HTTPException 대신 아래 에러를 발생시키고,
app.main의 예외 핸들러가 {success: false, message, errors?} 응답으로 변환합니다.
"""
from typing import Any, Dict, List, Optional


class AppError(Exception):
    """애플리케이션 에러 기본 클래스"""

    status_code: int = 500
    default_message: str = "서버 오류가 발생했습니다"
    headers: Optional[Dict[str, str]] = None

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Dict[str, Any]]] = None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"success": False, "message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(AppError):
    """입력값 검증 실패 (400)"""

    status_code = 400
    default_message = "입력값이 올바르지 않습니다"


class AuthError(AppError):
    """인증 실패 (401)"""

    status_code = 401
    default_message = "토큰 인증에 실패했습니다"
    headers = {"WWW-Authenticate": "Bearer"}


class ForbiddenError(AppError):
    """권한 없음 (403)"""

    status_code = 403
    default_message = "관리자 권한이 필요합니다"


class NotFoundError(AppError):
    """리소스 없음 (404)"""

    status_code = 404
    default_message = "요청한 리소스를 찾을 수 없습니다"


class ConflictError(AppError):
    """고유값 중복 (409)"""

    status_code = 409
    default_message = "이미 존재하는 이메일 또는 사용자명입니다"
