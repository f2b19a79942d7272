"""Pydantic 스키마 정의 - 결제 (주문 생성 / 서명 검증)

필드명은 결제 위젯(FE)이 그대로 쓰는 camelCase를 유지합니다.
"""
from typing import Optional

from pydantic import BaseModel, Field

from storefront.schemas.product_schema import Currency


class CreateOrderRequest(BaseModel):
    """주문 생성 요청"""
    amount: int = Field(..., gt=0, description="결제 금액 (최소 통화 단위)")
    currency: Currency = Field(Currency.INR, description="통화")
    receipt: Optional[str] = Field(None, max_length=40, description="가맹점 영수증 번호")


class CreateOrderResponse(BaseModel):
    """주문 생성 응답 (결제 위젯에 그대로 전달)"""
    message: str
    orderId: str
    amount: int
    currency: str
    receipt: Optional[str] = None
    status: str
    keyId: str


class VerifyPaymentRequest(BaseModel):
    """결제 서명 검증 요청"""
    orderId: str = Field(..., min_length=1, max_length=64)
    paymentId: str = Field(..., min_length=1, max_length=64)
    signature: str = Field(..., min_length=1, max_length=256)


class VerifyPaymentResponse(BaseModel):
    """결제 서명 검증 결과"""
    valid: bool
    message: str
