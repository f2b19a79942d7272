"""Pydantic 스키마 정의 - 상품"""
import math
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator


class Currency(str, Enum):
    """지원 통화"""
    INR = "INR"
    USD = "USD"


class Price(BaseModel):
    """가격 (최소 통화 단위: paise / cent)"""
    amount: Union[int, float] = Field(..., description="가격 (0 이상)")
    currency: Currency = Field(Currency.INR, description="통화 (INR | USD)")

    @field_validator("amount", mode="before")
    @classmethod
    def reject_non_numeric(cls, v: Any) -> Any:
        # bool은 int의 서브클래스라 별도로 거름
        if isinstance(v, bool):
            raise ValueError("가격은 숫자여야 합니다")
        return v

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Union[int, float]) -> Union[int, float]:
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError("가격은 유한한 숫자여야 합니다")
        if v < 0:
            raise ValueError("Price cannot be negative")
        return v


class ProductCreate(BaseModel):
    """상품 생성 요청"""
    image: str = Field(..., min_length=1, max_length=2048, description="이미지 URL")
    title: str = Field(..., min_length=1, max_length=200, description="상품명")
    price: Price
    description: str = Field(..., min_length=1, description="상품 설명")

    @field_validator("image")
    @classmethod
    def validate_image(cls, v: str) -> str:
        """URL 검증"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("이미지 URL은 http:// 또는 https://로 시작해야 합니다")
        return v

    @field_validator("title", "description")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        # 검사만 하고 값은 입력 그대로 저장
        if not v.strip():
            raise ValueError("공백만으로 구성될 수 없습니다")
        return v


class ProductOut(BaseModel):
    """저장된 상품"""
    id: int
    image: str
    title: str
    price: Price
    description: str


class ProductResponse(BaseModel):
    """상품 생성/조회 응답"""
    message: str
    product: Optional[ProductOut] = None


class ErrorResponse(BaseModel):
    """오류 응답 (모든 엔드포인트 공통)"""
    message: str
    error: str
    error_code: Optional[str] = None
