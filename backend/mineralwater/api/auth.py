"""인증 API - 로그인, 내 정보"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mineralwater.config import Settings
from mineralwater.core.auth import Identity, authenticate, get_app_settings, get_identity, issue_token
from mineralwater.database import get_db
from mineralwater.errors import NotFound
from mineralwater.models import User
from mineralwater.schemas.auth import LoginRequest, LoginResponse, UserProfile, UserResponse

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    data: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """로그인 - 성공 시 Bearer 토큰 발급 (서버 저장 없음)"""
    user = authenticate(db, data.email, data.password)
    return LoginResponse(token=issue_token(settings, user), user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserProfile)
def me(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_identity),
):
    """현재 토큰의 사용자 정보"""
    user = db.get(User, identity.id)
    if not user:
        raise NotFound("User not found")
    return user
