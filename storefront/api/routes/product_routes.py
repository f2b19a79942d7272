"""Product Routes

HTTP Layer는 리포지토리 결과를 응답으로 옮기는 역할만 합니다.
오류는 앱에 등록된 예외 핸들러가 상태 코드로 변환합니다 (storefront.api.errors).
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.core.database import get_db
from storefront.core.logging import logger
from storefront.repositories.impl.product_repository import ProductRepository
from storefront.schemas.product_schema import ErrorResponse, ProductCreate, ProductResponse

router = APIRouter(prefix="/api/products", tags=["products"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def create_product(request: ProductCreate, db: Session = Depends(get_db)):
    """상품 생성 API"""
    product = ProductRepository(db).create(request)
    logger.info(f"[API] Product created: id={product.id}")
    return ProductResponse(message="Product created successfully", product=product.to_dict())


@router.get("/getitem", response_model=ProductResponse, responses=_ERROR_RESPONSES)
async def get_item(db: Session = Depends(get_db)):
    """상품 조회 API

    저장된 상품 중 첫 번째(가장 작은 id)를 반환합니다. 없으면 product=null (200).
    """
    product = ProductRepository(db).fetch_any()
    if product is None:
        logger.info("[API] No product stored yet")
    return ProductResponse(
        message="Product fetched successfully",
        product=product.to_dict() if product is not None else None,
    )
