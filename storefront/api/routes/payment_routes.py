"""Payment Routes - 주문 생성 / 결제 서명 검증

create-order → verify 순서를 로컬에서 강제하지는 않지만,
verify는 이 서버가 만든 주문 ID(OrderRegistry)에 대해서만 서명을 검사합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from storefront.core.config import settings
from storefront.core.exceptions import CacheConnectionException
from storefront.core.logging import logger
from storefront.schemas.payment_schema import (
    CreateOrderRequest,
    CreateOrderResponse,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
)
from storefront.schemas.product_schema import ErrorResponse
from storefront.services.impl.order_registry import OrderRegistry
from storefront.services.impl.payment_gateway import PaymentGateway

router = APIRouter(prefix="/api/payments", tags=["payments"])

# 싱글톤 서비스
_payment_gateway: Optional[PaymentGateway] = None
_order_registry: Optional[OrderRegistry] = None


def get_payment_gateway() -> PaymentGateway:
    """PaymentGateway 싱글톤"""
    global _payment_gateway
    if _payment_gateway is None:
        _payment_gateway = PaymentGateway(
            settings.razorpay_key_id,
            settings.razorpay_key_secret,
            api_url=settings.razorpay_api_url,
            timeout_s=settings.gateway_timeout_s,
        )
    return _payment_gateway


def get_order_registry() -> OrderRegistry:
    """OrderRegistry 싱글톤"""
    global _order_registry
    if _order_registry is None:
        _order_registry = OrderRegistry()
    return _order_registry


async def shutdown_payment_gateway() -> None:
    global _payment_gateway
    if _payment_gateway is not None:
        await _payment_gateway.close()
        _payment_gateway = None


@router.post(
    "/create-order",
    response_model=CreateOrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={code: {"model": ErrorResponse} for code in (400, 502, 503, 504)},
)
async def create_order(
    request: CreateOrderRequest,
    gateway: PaymentGateway = Depends(get_payment_gateway),
    registry: OrderRegistry = Depends(get_order_registry),
):
    """결제 주문 생성 API

    Flow:
        1. 게이트웨이에 주문 생성 (재시도 없음)
        2. 주문 ID를 레지스트리에 TTL과 함께 기록
        3. 결제 위젯에 넘길 정보 반환
    """
    logger.info(f"[API] Create order: {request.amount} {request.currency.value}")
    order = await gateway.create_order(request.amount, request.currency.value, request.receipt)
    try:
        registry.remember(order.order_id)
    except CacheConnectionException:
        # 게이트웨이에는 주문이 생성됐지만 클라이언트는 orderId를 받지 못함
        logger.error(f"[API] Orphaned gateway order (not recorded): {order.order_id}")
        raise

    return CreateOrderResponse(
        message="Order created successfully",
        orderId=order.order_id,
        amount=order.amount,
        currency=order.currency,
        receipt=order.receipt,
        status=order.status,
        keyId=gateway.key_id,
    )


@router.post(
    "/verify",
    response_model=VerifyPaymentResponse,
    responses={code: {"model": ErrorResponse} for code in (400, 503)},
)
async def verify_payment(
    request: VerifyPaymentRequest,
    gateway: PaymentGateway = Depends(get_payment_gateway),
    registry: OrderRegistry = Depends(get_order_registry),
):
    """결제 서명 검증 API

    서명 불일치와 미확인 주문은 오류가 아니라 valid=false (200) 입니다.
    """
    if not registry.contains(request.orderId):
        logger.warning(f"[API] Verify for unknown order: {request.orderId}")
        return VerifyPaymentResponse(valid=False, message="Unknown order")

    valid = gateway.verify(request.orderId, request.paymentId, request.signature)
    if valid:
        return VerifyPaymentResponse(valid=True, message="Payment verified successfully")
    return VerifyPaymentResponse(valid=False, message="Invalid payment signature")
