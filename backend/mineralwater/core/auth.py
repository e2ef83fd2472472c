"""토큰 기반 인증 - Bearer 헤더, 서버 세션 없음"""
from dataclasses import dataclass
from typing import Annotated

import structlog
from fastapi import Depends, Header, Request
from sqlalchemy import select
from sqlalchemy.orm import Session

from mineralwater.config import Settings
from mineralwater.core.security import (
    INVALID_TOKEN,
    create_access_token,
    decode_access_token,
    verify_password,
)
from mineralwater.errors import Forbidden, InvalidCredentials, Unauthorized
from mineralwater.models import User
from mineralwater.models.user import Role

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Identity:
    """검증된 토큰 클레임 - 요청 동안 신뢰 (DB 재조회 없음)"""

    id: int
    role: str
    email: str


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def authenticate(db: Session, email: str, password: str) -> User:
    """이메일/비밀번호 검증. 없는 이메일과 틀린 비밀번호는 같은 에러"""
    user = db.execute(select(User).where(User.email == email)).scalar_one_or_none()
    if user is None or not verify_password(password, user.password_hash):
        log.info("login_failed", email=email)
        raise InvalidCredentials()
    log.info("login_succeeded", user_id=user.id, role=user.role.value)
    return user


def issue_token(settings: Settings, user: User) -> str:
    return create_access_token(settings, user.id, user.role.value, user.email)


def get_identity(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> Identity:
    """Authorization: Bearer <token> 검증 후 Identity를 request.state에 부착"""
    if not authorization:
        raise Unauthorized()
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise Unauthorized(INVALID_TOKEN)
    claims = decode_access_token(settings, token.strip())
    identity = Identity(id=claims["id"], role=claims["role"], email=claims["email"])
    request.state.identity = identity
    return identity


def require_role(role: Role):
    """역할 기반 접근 - 지정 역할만 허용 (상하 관계 없음)"""

    def _check(identity: Annotated[Identity | None, Depends(get_identity)]) -> Identity:
        if identity is None:
            raise Unauthorized()
        if identity.role != role.value:
            raise Forbidden()
        return identity

    return _check


RequireAdmin = Depends(require_role(Role.ADMIN))
RequireDriver = Depends(require_role(Role.DRIVER))
RequireCustomer = Depends(require_role(Role.CUSTOMER))
