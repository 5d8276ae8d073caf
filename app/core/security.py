"""
비밀번호 해싱과 JWT 토큰 발급/검증
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt


# ============ 비밀번호 해싱 ============

def hash_password(password: str, rounds: int = 12) -> str:
    """비밀번호를 bcrypt로 해싱"""
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(password: str, hashed: Optional[str]) -> bool:
    """비밀번호 검증 (해시가 없으면 항상 실패)"""
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # 저장된 값이 bcrypt 해시 형식이 아닌 경우
        return False


# ============ JWT 토큰 ============

class TokenError(Exception):
    """토큰 디코딩 실패"""

    def __init__(self, message: str, expired: bool = False):
        self.expired = expired
        super().__init__(message)


def create_access_token(
    user_id: int,
    secret: str,
    algorithm: str = "HS256",
    expires_days: int = 30,
) -> str:
    """{userId} 페이로드로 JWT 토큰 생성"""
    now = datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "iat": now,
        "exp": now + timedelta(days=expires_days),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """
    JWT 토큰을 검증하고 페이로드를 반환합니다.

    Raises:
        TokenError: 만료, 서명 불일치, 형식 오류 시
    """
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except ExpiredSignatureError:
        raise TokenError("토큰이 만료되었습니다", expired=True)
    except JWTError as e:
        raise TokenError(f"유효하지 않은 토큰: {e}")
