# foodlink/main.py

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession

# 핵심 설정 및 데이터베이스 모듈 임포트
from foodlink import API_PREFIX
from foodlink.core.config import settings
from foodlink.core.database import engine, get_session
from foodlink.core.exceptions import AppError, ConfigurationError, ErrorCode

# 각 도메인의 라우터들을 임포트합니다.
from foodlink.domains.banner.routers import router as banner_router
from foodlink.domains.company.routers import router as company_router
from foodlink.domains.content.routers import router as content_router
from foodlink.domains.inquiry.routers import router as inquiry_router
from foodlink.domains.shared.routers import router as shared_router

# -- 로깅 설정 --
# 애플리케이션 시작 시 한 번만 설정합니다. 각 모듈은 logging.getLogger(__name__)을 사용합니다.
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# 설정 오류 응답에 사용하는 고정 문구. 실제 원인은 로그에만 남깁니다.
GENERIC_SERVER_ERROR_MESSAGE = "Internal server error."


def check_master_password_configured() -> None:
    """
    마스터 패스워드 설정 여부를 확인합니다.
    production 환경에서는 누락 시 시작을 중단하고, 그 외 환경에서는 경고만 남깁니다.
    """
    if settings.MASTER_PASSWORD and settings.MASTER_PASSWORD.get_secret_value():
        return
    if settings.APP_ENV == "production":
        raise ConfigurationError("MASTER_PASSWORD is not set in environment variables")
    logger.warning("MASTER_PASSWORD is not set; every master-gated operation will fail.")


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 수명 주기 이벤트를 처리합니다.
    """
    logger.info("%s %s starting (env=%s)...", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV)
    check_master_password_configured()

    yield  # 애플리케이션 실행

    logger.info("Shutting down; disposing database connection pool.")
    await engine.dispose()


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# 업로드 파일 정적 서빙. 디렉토리가 없으면 생성합니다.
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# -- CORS 미들웨어 설정 --
# 비밀번호를 헤더로 전달하므로 X-Password / X-Master-Password 헤더를 허용해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -- 예외 핸들러 --
# 서비스 계층의 AppError를 {"detail": 메시지, "error": 코드} 형태의 응답으로 변환합니다.
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, ConfigurationError):
        # 설정 오류의 상세 내용은 로그에만 남깁니다
        logger.error("Configuration error on %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": GENERIC_SERVER_ERROR_MESSAGE, "error": exc.code},
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message, "error": exc.code})


def jsonable_errors(errors) -> list:
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")} for e in errors]


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 실패 시 첫 번째 실패 항목을 메시지로 반환합니다."""
    errors = exc.errors()
    message = "Invalid input."
    if errors:
        first = errors[0]
        field = ".".join(str(loc) for loc in first.get("loc", ()) if loc not in ("body", "query", "path", "header"))
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": message, "error": ErrorCode.VALIDATION_ERROR, "errors": jsonable_errors(errors)},
    )


# -- 도메인 라우터 포함 --
app.include_router(company_router, prefix=API_PREFIX)
app.include_router(banner_router, prefix=API_PREFIX)
app.include_router(content_router, prefix=API_PREFIX)
app.include_router(inquiry_router, prefix=API_PREFIX)
app.include_router(shared_router, prefix=API_PREFIX)


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """
    FoodLink API의 루트 엔드포인트입니다.
    """
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    데이터베이스 연결을 테스트하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        result = await session.execute(text("SELECT 1"))
        if result.scalar() == 1:
            return {"status": "ok", "database_connection": "successful"}
    except Exception as e:
        logger.exception("Database health check failed.")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Database connection error during health check: {e}",
        ) from e
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Database health check failed: No result from test query",
    )
