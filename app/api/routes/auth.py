"""
인증 API 라우터 - 회원가입, 로그인, 소셜 로그인
"""
from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_auth_service
from app.api.schemas import LoginRequest, RegisterRequest, SocialLoginRequest
from app.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    auth: AuthService = Depends(get_auth_service),
):
    """
    회원가입

    - 이메일 또는 사용자명이 이미 있으면 409
    """
    user, token = auth.register(request.username, request.email, request.password)
    return {
        "success": True,
        "message": "회원가입이 완료되었습니다",
        "data": {"user": user.to_dict(), "token": token},
    }


@router.post("/login")
def login(
    request: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
):
    """이메일/비밀번호 로그인"""
    user, token = auth.login(request.email, request.password)
    return {
        "success": True,
        "message": "로그인 성공",
        "data": {"user": user.to_dict(), "token": token},
    }


@router.post("/social-login")
def social_login(
    request: SocialLoginRequest,
    auth: AuthService = Depends(get_auth_service),
):
    """
    소셜 로그인 (google, kakao)

    - 기존 계정이 있으면 로그인, 없으면 가입
    """
    user, token = auth.social_login(
        provider=request.provider,
        social_id=request.social_id,
        email=request.email,
        username=request.username,
        avatar=request.avatar,
    )
    return {
        "success": True,
        "message": "소셜 로그인 성공",
        "data": {"user": user.to_dict(), "token": token},
    }
