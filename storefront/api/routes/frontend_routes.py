"""상품 페이지 (HTML)

상품 API를 HTTP로 다시 호출해서 렌더링합니다 (FE와 같은 경로).
"""

import httpx
from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from storefront.core.config import settings
from storefront.core.logging import logger
from storefront.frontend.display import fetch_product, render_page

router = APIRouter(tags=["frontend"])


@router.get("/shop", response_class=HTMLResponse)
async def shop_page():
    """상품 카드 페이지

    상품 API 호출이 실패하면 Loading 상태의 페이지를 그대로 반환합니다.
    """
    try:
        product = await fetch_product(settings.storefront_api_url)
    except httpx.HTTPError as e:
        logger.warning(f"[DISPLAY] Product fetch failed: {type(e).__name__}: {e}")
        product = None
    return HTMLResponse(render_page(product, key_id=settings.razorpay_key_id, title=settings.api_title))
