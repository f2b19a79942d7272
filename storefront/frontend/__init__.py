"""상품 카드 렌더링 - export only."""

from .display import fetch_product, format_price, render_page, render_product_card

__all__ = ["fetch_product", "format_price", "render_page", "render_product_card"]
