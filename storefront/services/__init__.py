"""비즈니스 로직 서비스 - export only."""

from .impl import OrderRegistry, GatewayOrder, PaymentGateway

__all__ = ["OrderRegistry", "GatewayOrder", "PaymentGateway"]
