"""DB 연결 및 세션 관리

엔진은 모듈 전역이 아니라 `Database` 인스턴스가 소유하며, 앱 lifespan에서
생성/종료된다. 핸들러는 `get_db` 의존성으로 세션을 받는다.
"""
from collections.abc import Generator, Iterator
from contextlib import contextmanager

import structlog
from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

log = structlog.get_logger(__name__)

Base = declarative_base()


class Database:
    """엔진 + 세션 팩토리"""

    def __init__(self, url: str, echo: bool = False) -> None:
        kwargs: dict = {"echo": echo}
        if url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in url or url.rstrip("/") in ("sqlite:", "sqlite://"):
                # 인메모리 DB는 연결 하나를 공유해야 테이블이 유지됨
                kwargs["poolclass"] = StaticPool
        else:
            kwargs["pool_pre_ping"] = True
        self.url = url
        self.engine = create_engine(url, **kwargs)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def check_connection(self) -> None:
        """기동 시 접속 확인 - 실패하면 예외 그대로 전파 (치명적)"""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self) -> None:
        self.engine.dispose()
        log.info("database_disposed")


def get_db(request: Request) -> Generator[Session, None, None]:
    """의존성: DB 세션 제공"""
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """여러 테이블 변경을 한 번의 commit으로 묶음. 실패 시 전체 rollback"""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
