"""상품 카드 렌더링 (Frontend Display)

API(/api/products/getitem)에서 상품을 받아 HTML 카드로 렌더링합니다.
결제 버튼은 외부 결제 위젯(checkout.js)이 처리하므로 여기서는 마크업만 만듭니다.
"""

from __future__ import annotations

from html import escape
from typing import Any, Optional

import httpx

from storefront.core.logging import logger

CURRENCY_SYMBOLS = {"INR": "₹", "USD": "$"}
CHECKOUT_SCRIPT_URL = "https://checkout.razorpay.com/v1/checkout.js"


async def fetch_product(
    api_base_url: str,
    *,
    timeout_s: float = 5.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[dict[str, Any]]:
    """상품 API 호출 → product (없으면 None)

    JSON이 아니거나 {"product": {...}} 형태가 아닌 응답도 None으로 처리합니다.

    Raises:
        httpx.HTTPError: 네트워크 오류 또는 비 2xx 응답
    """
    async with httpx.AsyncClient(base_url=api_base_url, timeout=timeout_s, transport=transport) as client:
        resp = await client.get("/api/products/getitem")
        resp.raise_for_status()
        try:
            payload = resp.json()
        except ValueError:
            logger.warning("[DISPLAY] Product API returned a non-JSON body")
            return None

    product = payload.get("product") if isinstance(payload, dict) else None
    if product is not None and not isinstance(product, dict):
        logger.warning(f"[DISPLAY] Unexpected product payload: {type(product).__name__}")
        return None
    logger.debug(f"[DISPLAY] Product fetched: {product.get('id') if product else None}")
    return product


def format_price(price: dict[str, Any]) -> str:
    """최소 통화 단위 → 표시 금액 (50000 INR → ₹500)"""
    currency = price.get("currency", "INR")
    symbol = CURRENCY_SYMBOLS.get(currency, "$")
    major = float(price.get("amount", 0)) / 100
    if major.is_integer():
        return f"{symbol}{int(major)}"
    return f"{symbol}{major:.2f}"


def render_checkout_button(product: dict[str, Any], key_id: str = "") -> str:
    price = product.get("price", {})
    return (
        f'<button class="checkout-button" data-key="{escape(key_id)}" '
        f'data-amount="{escape(str(price.get("amount", "")))}" '
        f'data-currency="{escape(str(price.get("currency", "INR")))}" '
        f'data-title="{escape(str(product.get("title", "")))}">Pay Now</button>'
    )


def render_product_card(product: dict[str, Any], key_id: str = "") -> str:
    """상품 카드 HTML"""
    title = escape(str(product.get("title", "")))
    return (
        '<div class="product-card">'
        f'<img src="{escape(str(product.get("image", "")))}" alt="{title}" class="product-image" />'
        f'<h2 class="product-title">{title}</h2>'
        f'<p class="product-description">{escape(str(product.get("description", "")))}</p>'
        f'<p class="product-price">{escape(format_price(product.get("price", {})))}</p>'
        f"{render_checkout_button(product, key_id)}"
        "</div>"
    )


def render_page(product: Optional[dict[str, Any]], key_id: str = "", title: str = "Storefront") -> str:
    """전체 페이지 (상품이 없으면 Loading...)"""
    body = render_product_card(product, key_id) if product else "<p>Loading...</p>"
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8" />'
        f"<title>{escape(title)}</title>"
        f'<script src="{CHECKOUT_SCRIPT_URL}"></script>'
        "</head><body>"
        f'<div class="app-container">{body}</div>'
        "</body></html>"
    )
