"""API routes package."""

from .health_routes import router as health_router
from .product_routes import router as product_router
from .payment_routes import router as payment_router, get_order_registry, get_payment_gateway
from .frontend_routes import router as frontend_router

__all__ = [
    "health_router",
    "product_router",
    "payment_router",
    "frontend_router",
    "get_order_registry",
    "get_payment_gateway",
]
