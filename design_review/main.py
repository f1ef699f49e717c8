"""
design-review HTTP API의 메인 진입점 파일입니다.
CLI와 같은 리뷰 파이프라인을 웹 서버로 노출합니다.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from design_review import __version__
from design_review.config import get_settings
from design_review.api.router import api_router
from design_review.exceptions import (
    DesignReviewError,
    InvalidProjectNameError,
    ProjectExistsError,
    ProjectNotFoundError,
)

logger = logging.getLogger(__name__)


def _status_code_for(exc: DesignReviewError) -> int:
    """예외 종류에 맞는 HTTP 상태 코드"""
    if isinstance(exc, ProjectNotFoundError):
        return 404
    if isinstance(exc, ProjectExistsError):
        return 409
    if isinstance(exc, InvalidProjectNameError):
        return 400
    return 500


@asynccontextmanager
async def lifespan(app: FastAPI):
    """서버 시작과 종료 시점에 로그를 남깁니다."""
    settings = get_settings()
    logger.info(f"design-review API가 다음 주소에서 시작됩니다: {settings.host}:{settings.port}")

    yield

    logger.info("design-review API가 종료됩니다")


def create_app() -> FastAPI:
    """
    FastAPI 웹 애플리케이션을 생성하고 설정하는 함수입니다.

    주요 기능:
    1. 기본 앱 정보 설정 (제목, 설명 등)
    2. CORS 설정
    3. 커스텀 예외를 JSON 에러 응답으로 변환
    4. API 라우터 연결 (/api/v1)
    """
    settings = get_settings()

    app = FastAPI(
        title="design-review",
        description="PRD와 Figma 링크로 디자인 리뷰 체크리스트와 코멘트를 생성합니다",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 글로벌 예외 핸들러: 커스텀 예외를 구조화된 JSON 응답으로 변환
    @app.exception_handler(DesignReviewError)
    async def design_review_error_handler(request: Request, exc: DesignReviewError):
        return JSONResponse(
            status_code=_status_code_for(exc),
            content={
                "error_code": exc.error_code,
                "message": exc.message,
                "details": exc.details,
                "timestamp": datetime.now().isoformat(),
            },
        )

    @app.exception_handler(Exception)
    async def general_error_handler(request: Request, exc: Exception):
        logger.error(f"처리되지 않은 예외: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error_code": "ERR_INTERNAL",
                "message": "내부 서버 오류가 발생했습니다",
                "details": None,
                "timestamp": datetime.now().isoformat(),
            },
        )

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """서버 기본 정보"""
        return {
            "name": "design-review",
            "version": __version__,
            "docs": "/docs",
            "api": "/api/v1",
        }

    return app


# 애플리케이션 인스턴스 생성
app = create_app()
