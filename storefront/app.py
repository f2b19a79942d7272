"""FastAPI 앱 팩토리"""
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from storefront.core.config import settings
from storefront.core.database import Database
from storefront.core.logging import logger
from storefront.api import health_router, product_router, payment_router, frontend_router
from storefront.api.errors import register_exception_handlers
from storefront.api.routes.payment_routes import shutdown_payment_gateway


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기

    DB 연결 실패 시 예외를 그대로 올려서 기동을 중단합니다 (fail fast).
    """
    logger.info("Starting application...")
    database: Database = app.state.database
    database.connect()
    logger.info("Application started")
    yield
    logger.info("Shutting down application...")
    await shutdown_payment_gateway()
    database.close()


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Args:
        database: 주입할 DB 핸들 (없으면 settings.database_url로 생성)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan
    )
    app.state.database = database or Database(settings.database_url)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(product_router)
    app.include_router(payment_router)
    app.include_router(frontend_router)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
