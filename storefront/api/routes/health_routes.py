"""헬스 체크 엔드포인트"""
from fastapi import APIRouter, Depends
from datetime import datetime

from storefront.schemas.health_schema import HealthResponse
from storefront.api.routes.payment_routes import get_order_registry
from storefront.core.config import settings
from storefront.core.database import Database, get_database
from storefront.core.exceptions import CacheConnectionException
from storefront.core.logging import logger
from storefront import __version__

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(database: Database = Depends(get_database)):
    """
    헬스 체크 엔드포인트

    - DB 연결 상태
    - Redis(주문 레지스트리) 연결 상태
    """
    db_ok = database.ping()

    # Redis 체크
    try:
        redis_ok = get_order_registry().health_check()
    except CacheConnectionException as e:
        logger.warning(f"Order registry unavailable: {e.error_code}")
        redis_ok = False

    status = "ok" if redis_ok and db_ok else ("degraded" if redis_ok or db_ok else "error")

    return HealthResponse(
        status=status,
        timestamp=datetime.now(),
        version=__version__,
        database=db_ok,
        order_registry=redis_ok,
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": settings.api_title,
        "version": __version__,
        "docs": "/docs"
    }
