"""Pydantic 스키마 패키지 - export only."""

from .product_schema import Currency, Price, ProductCreate, ProductOut, ProductResponse, ErrorResponse
from .health_schema import HealthResponse
from .payment_schema import (
    CreateOrderRequest,
    CreateOrderResponse,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
)

__all__ = [
    "Currency",
    "Price",
    "ProductCreate",
    "ProductOut",
    "ProductResponse",
    "ErrorResponse",
    "HealthResponse",
    "CreateOrderRequest",
    "CreateOrderResponse",
    "VerifyPaymentRequest",
    "VerifyPaymentResponse",
]
