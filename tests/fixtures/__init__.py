"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/list/primitive)
- 네트워크/DB 의존 없음
"""

from .products import PRODUCTS, INVALID_PRODUCTS

__all__ = [
    "PRODUCTS",
    "INVALID_PRODUCTS",
]
