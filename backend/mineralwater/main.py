"""FastAPI 앱 진입점"""
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from mineralwater.api import admin, auth, customer, customers, driver, drivers, routes
from mineralwater.config import Settings, get_settings
from mineralwater.database import Database
from mineralwater.errors import AppError, Conflict, InternalError
from mineralwater.logging_config import configure_logging
from mineralwater.seed import seed_if_empty

log = structlog.get_logger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    msg = str(first.get("msg", "Invalid request"))
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    loc = [str(p) for p in first.get("loc", ()) if p != "body"]
    if loc and first.get("type") != "value_error":
        return f"{'.'.join(loc)}: {msg}"
    return msg


def register_exception_handlers(app: FastAPI) -> None:
    """모든 실패를 {"error": "..."}로 변환. 내부 상세는 서버 로그에만"""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error(400, _validation_message(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        log.warning("integrity_error", path=request.url.path, error=str(exc.orig))
        return _error(Conflict.status_code, "Conflicting data")

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        log.error("store_error", path=request.url.path, exc_info=exc)
        return _error(InternalError.status_code, InternalError.message)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        log.error("unhandled_error", path=request.url.path, exc_info=exc)
        return _error(InternalError.status_code, InternalError.message)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings.database_url)
        # 접속 실패는 치명적 - 기동 중단
        database.check_connection()
        if settings.auto_create_schema:
            database.create_all()
        if settings.auto_seed:
            with database.session() as db:
                seed_if_empty(db)
        app.state.database = database
        log.info("app_started", database=database.engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            database.dispose()
            log.info("app_stopped")

    app = FastAPI(
        title="Mineral Water Delivery",
        description="생수 배달 관리 - 관리자/기사/고객 대시보드",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(admin.router)
    app.include_router(routes.router)
    app.include_router(customers.router)
    app.include_router(drivers.router)
    app.include_router(driver.router)
    app.include_router(customer.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


def run() -> None:
    """uvicorn으로 HOST:PORT 서비스"""
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
