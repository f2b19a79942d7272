"""데이터베이스 모델"""
from decimal import Decimal
from typing import Union

from sqlalchemy import BigInteger, CheckConstraint, Column, Integer, String, Text, TIMESTAMP, func
from storefront.core.database import Base

# BIGINT 상한 (signed 64-bit)
MAX_UNSCALED_AMOUNT = 2**63 - 1


def split_amount(amount: Union[int, float]) -> tuple[int, int]:
    """가격을 (정수 값, 소수 자릿수)로 분리 (1250.5 → (12505, 1), 50000 → (50000, 0))

    float를 거치지 않고 저장해서 2**53을 넘는 정수도 그대로 보존됩니다.
    """
    if isinstance(amount, int):
        return amount, 0
    value = Decimal(str(amount))
    exponent = value.as_tuple().exponent
    if exponent >= 0:
        return int(value), 0
    return int(value.scaleb(-exponent)), -exponent


def join_amount(unscaled: int, scale: int) -> Union[int, float]:
    if not scale:
        return int(unscaled)
    return float(Decimal(unscaled).scaleb(-scale))


class Product(Base):
    """상품 테이블 (단일 상품 데모)"""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    image = Column(String, nullable=False)
    title = Column(String, nullable=False)
    # 최소 통화 단위 (paise, cent) = price_amount / 10**price_scale
    price_amount = Column(BigInteger, nullable=False)
    price_scale = Column(Integer, nullable=False, default=0)
    price_currency = Column(String(3), nullable=False, default="INR")
    description = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP, server_default=func.now())

    __table_args__ = (
        CheckConstraint("price_amount >= 0", name="ck_products_price_amount_non_negative"),
        CheckConstraint("price_scale >= 0", name="ck_products_price_scale_non_negative"),
        CheckConstraint("price_currency IN ('INR', 'USD')", name="ck_products_price_currency"),
    )

    @property
    def amount(self) -> Union[int, float]:
        return join_amount(self.price_amount, self.price_scale or 0)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "image": self.image,
            "title": self.title,
            "price": {"amount": self.amount, "currency": self.price_currency},
            "description": self.description,
        }

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, title={self.title})>"
