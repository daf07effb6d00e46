"""FastAPI 앱 팩토리"""
from contextlib import asynccontextmanager
from typing import IO, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from feedback_api.core.config import Settings, settings as default_settings
from feedback_api.core.exceptions import FeedbackApiException, status_code_for
from feedback_api.core.logging import logger, setup_access_logger
from feedback_api.repositories.catalog_repository import CatalogStore, default_catalog
from feedback_api.api import status_router, product_router, static_router, mount_static
from feedback_api.middleware import AccessLogMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info("Starting application...")
    logger.info(f"Catalog loaded: {len(app.state.catalog)} products")
    yield
    logger.info("Shutting down application...")


async def feedback_api_exception_handler(request: Request, exc: FeedbackApiException) -> JSONResponse:
    """커스텀 예외 → JSON 에러 응답"""
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"[API] {request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"[API] {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[CatalogStore] = None,
    access_log_stream: Optional[IO[str]] = None,
) -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Args:
        settings: 설정 (기본값: 환경 변수 기반 전역 설정)
        catalog: 카탈로그 (기본값: 초기 상품 6종)
        access_log_stream: 액세스 로그 출력 스트림 (기본값: stdout)

    Returns:
        FastAPI 앱 인스턴스
    """
    if settings is None:
        settings = default_settings

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    # 요청 간 공유되는 읽기 전용 상태
    app.state.settings = settings
    app.state.catalog = catalog if catalog is not None else default_catalog()

    # 액세스 로그
    if settings.access_log_enabled:
        app.add_middleware(AccessLogMiddleware, access_logger=setup_access_logger(access_log_stream))

    app.add_exception_handler(FeedbackApiException, feedback_api_exception_handler)

    # 라우터 등록
    app.include_router(static_router)
    app.include_router(status_router)
    app.include_router(product_router)
    mount_static(app, settings)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
