"""상품 리포지토리 - DB 접근 로직"""
from typing import Any, Optional, Union

from pydantic import ValidationError
from sqlalchemy import func
from sqlalchemy.orm import Session

from storefront.repositories.models import MAX_UNSCALED_AMOUNT, Product, split_amount
from storefront.schemas.product_schema import ProductCreate
from storefront.core.logging import logger
from storefront.core.exceptions import DatabaseQueryException, InvalidPriceException, ValidationException


class ProductRepository:
    """상품 데이터 액세스 레이어"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, fields: Union[ProductCreate, dict[str, Any]]) -> Product:
        """상품 생성

        저장 전에 필수 필드/통화/가격(0 이상)을 검증하고,
        위반 시 ValidationException을 던집니다 (아무것도 저장되지 않음).
        """
        if isinstance(fields, ProductCreate):
            payload = fields
        else:
            try:
                payload = ProductCreate.model_validate(fields)
            except ValidationError as e:
                exc = ValidationException.from_errors(e.errors(), skip_prefix=())
                logger.warning(f"[DB] Product validation failed: {exc.field}")
                raise exc from e

        unscaled, scale = split_amount(payload.price.amount)
        if unscaled > MAX_UNSCALED_AMOUNT:
            raise InvalidPriceException(payload.price.amount, "amount exceeds storable precision")

        try:
            product = Product(
                image=payload.image,
                title=payload.title,
                price_amount=unscaled,
                price_scale=scale,
                price_currency=payload.price.currency.value,
                description=payload.description,
            )
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
            logger.info(f"[DB] Product created: {product.id}")
            return product
        except Exception as e:
            self.db.rollback()
            logger.error(f"[DB] Failed to create product: {e}")
            raise DatabaseQueryException("insert products", str(e)) from e

    def fetch_any(self) -> Optional[Product]:
        """첫 번째 상품 (가장 작은 id) 또는 None"""
        try:
            return self.db.query(Product).order_by(Product.id).first()
        except Exception as e:
            logger.error(f"[DB] Failed to fetch product: {e}")
            raise DatabaseQueryException("select products", str(e)) from e

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """ID로 상품 조회"""
        return self.db.query(Product).filter(Product.id == product_id).first()

    def count(self) -> int:
        """저장된 상품 수"""
        return self.db.query(func.count(Product.id)).scalar() or 0
