"""애플리케이션 설정"""
import json
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    """환경 변수 기반 설정 (DATABASE_URL 필수)"""

    database_url: str = Field(..., description="SQLAlchemy 접속 URL, 없으면 기동 실패")
    secret_key: str = "change-this-secret-in-prod"
    jwt_algorithm: str = "HS256"
    token_expire_days: int = 7
    host: str = "0.0.0.0"
    port: int = 4000
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    cors_origin_regex: str | None = r"https://.*\.onrender\.com"
    auto_create_schema: bool = True
    auto_seed: bool = True
    log_level: str = "INFO"
    log_json: bool = False

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v: object) -> object:
        # "a,b" 또는 JSON 리스트 둘 다 허용
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("["):
                return json.loads(s)
            return [o.strip() for o in s.split(",") if o.strip()]
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
