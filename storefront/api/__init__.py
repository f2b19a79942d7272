"""API 엔드포인트 패키지 - export only."""

from .routes import (
    health_router,
    product_router,
    payment_router,
    frontend_router,
    get_order_registry,
    get_payment_gateway,
)

__all__ = [
    "health_router",
    "product_router",
    "payment_router",
    "frontend_router",
    "get_order_registry",
    "get_payment_gateway",
]
