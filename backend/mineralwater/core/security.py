"""비밀번호 해시 (plain 저장 금지) 및 서명 토큰"""
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from mineralwater.config import Settings
from mineralwater.errors import Unauthorized

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=12)

INVALID_TOKEN = "Invalid token"


def hash_password(plain: str) -> str:
    """평문 비밀번호를 해시"""
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """비밀번호 검증"""
    return pwd_context.verify(plain, hashed)


def create_access_token(settings: Settings, user_id: int, role: str, email: str) -> str:
    """{id, role, email} 클레임을 담은 토큰 발급 (만료 token_expire_days)"""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "id": user_id,
        "role": role,
        "email": email,
        "iat": now,
        "exp": now + timedelta(days=settings.token_expire_days),
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(settings: Settings, token: str) -> dict:
    """서명/만료 검증 후 클레임 반환. 실패 시 Unauthorized("Invalid token")"""
    try:
        claims = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise Unauthorized(INVALID_TOKEN) from e
    if not isinstance(claims.get("id"), int) or not claims.get("role") or not claims.get("email"):
        raise Unauthorized(INVALID_TOKEN)
    return claims
