"""
FastAPI Application Entry Point
개인 일기/메모 서비스 백엔드
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api.router import router
from app.config.database import init_db
from app.config.settings import get_settings
from app.core.exceptions import AppError, ValidationError
from app.core.startup import configure_logging, startup_handler
from app.tracing import instrument_app, setup_tracing

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # Startup
    configure_logging(settings.LOG_LEVEL)
    if settings.TRACING_ENABLED:
        setup_tracing(settings)
    init_db()
    await startup_handler()
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="개인 일기 및 메모 서비스",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "Admin-Key"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """요청 검증 실패를 {field, message} 목록으로 변환"""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "header")]
        errors.append({"field": ".".join(loc), "message": error.get("msg", "")})
    body = ValidationError(errors=errors).to_dict()
    return JSONResponse(status_code=400, content=body)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"처리되지 않은 오류: {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=AppError().to_dict())


# 업로드된 이미지 정적 제공
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# Include routers
app.include_router(router)

instrument_app(app, settings)
