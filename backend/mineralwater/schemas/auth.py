"""인증/사용자 관련 스키마"""
from pydantic import BaseModel, Field, field_validator, model_validator


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None

    @model_validator(mode="after")
    def require_both(self) -> "LoginRequest":
        if not self.email or not self.password:
            raise ValueError("Email and password required")
        return self


class UserResponse(BaseModel):
    """공개 사용자 정보 (비밀번호 해시 제외)"""

    id: int
    name: str | None
    email: str
    role: str

    @field_validator("role", mode="before")
    @classmethod
    def role_to_str(cls, v: object) -> str:
        if hasattr(v, "value"):
            return str(v.value)
        return str(v)

    model_config = {"from_attributes": True}


class UserProfile(UserResponse):
    last_lat: float | None = None
    last_lng: float | None = None


class LoginResponse(BaseModel):
    token: str
    user: UserResponse


class DriverCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=4)


class DriverUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=128)
    email: str | None = Field(None, min_length=3, max_length=255)
    # 비어 있으면 비밀번호 유지
    password: str | None = None


class GpsUpdate(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
