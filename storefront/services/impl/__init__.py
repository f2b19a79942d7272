"""Services implementation package."""

from .order_registry import OrderRegistry
from .payment_gateway import GatewayOrder, PaymentGateway

__all__ = ["OrderRegistry", "GatewayOrder", "PaymentGateway"]
