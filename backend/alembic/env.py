"""mineralwater 스키마 마이그레이션

접속 URL은 앱과 같은 설정(DATABASE_URL / .env)을 우선 사용, 없으면 alembic.ini 값.
"""
from logging.config import fileConfig

from alembic import context
from pydantic import ValidationError
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

from mineralwater.config import Settings
from mineralwater.database import Base
import mineralwater.models  # noqa: F401 - 테이블 등록

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _database_url() -> str:
    try:
        return Settings().database_url
    except ValidationError:
        return context.config.get_main_option("sqlalchemy.url")


def _configure(**kwargs) -> None:
    url = _database_url()
    # SQLite는 ALTER 제약이 있어 batch 모드로 렌더링
    context.configure(
        target_metadata=Base.metadata,
        compare_type=True,
        render_as_batch=url.startswith("sqlite"),
        **kwargs,
    )


if context.is_offline_mode():
    _configure(url=_database_url(), literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()
else:
    with create_engine(_database_url(), poolclass=NullPool).connect() as connection:
        _configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()
