"""결제 게이트웨이 어댑터 (Razorpay REST API, httpx)

- 주문 생성: POST {api_url}/orders (Basic Auth: key_id / key_secret)
- 서명 검증: HMAC-SHA256("{order_id}|{payment_id}", key_secret) 를 로컬에서 재계산
- 재시도/멱등성 처리 없음. 네트워크/API 오류는 GatewayException 계열로 변환합니다.
- 요청마다 클라이언트를 만들지 않고 인스턴스 단위로 AsyncClient를 재사용합니다.
"""

from __future__ import annotations

import asyncio
import hashlib
import hmac
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from storefront.core.exceptions import (
    GatewayConfigurationException,
    GatewayException,
    GatewayResponseException,
    GatewayTimeoutException,
    InvalidCurrencyException,
    InvalidPriceException,
)
from storefront.core.logging import logger, mask_identifier, sanitize_for_log
from storefront.schemas.product_schema import Currency


@dataclass
class GatewayOrder:
    """게이트웨이가 발급한 주문 (로컬에 영속하지 않음)"""

    order_id: str
    amount: int
    currency: str
    receipt: Optional[str] = None
    status: str = "created"

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "GatewayOrder":
        try:
            return cls(
                order_id=str(payload["id"]),
                amount=int(payload["amount"]),
                currency=str(payload["currency"]),
                receipt=payload.get("receipt"),
                status=str(payload.get("status") or "created"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise GatewayResponseException(200, f"malformed order payload: {e}")


class PaymentGateway:
    def __init__(
        self,
        key_id: str,
        key_secret: str,
        *,
        api_url: str = "https://api.razorpay.com/v1",
        timeout_s: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.key_id = key_id
        self._key_secret = key_secret
        self.api_url = api_url.rstrip("/")
        self.timeout_s = timeout_s
        self._transport = transport
        self._lock = asyncio.Lock()
        self._client: Optional[httpx.AsyncClient] = None

    def _require_credentials(self) -> None:
        if not self.key_id or not self._key_secret:
            raise GatewayConfigurationException("razorpay_key_id / razorpay_key_secret are empty")

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._lock:
            if self._client is not None:
                return self._client
            self._client = httpx.AsyncClient(
                base_url=self.api_url,
                auth=(self.key_id, self._key_secret),
                timeout=self.timeout_s,
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
            return self._client

    async def create_order(
        self,
        amount: int,
        currency: str = Currency.INR.value,
        receipt: Optional[str] = None,
    ) -> GatewayOrder:
        """게이트웨이에 주문 생성

        Raises:
            ValidationException: 금액/통화가 잘못된 경우 (네트워크 호출 전)
            GatewayException: 네트워크/API 오류
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidPriceException(amount, "amount must be a positive integer in minor units")
        currency = currency.value if isinstance(currency, Currency) else str(currency)
        if currency not in {c.value for c in Currency}:
            raise InvalidCurrencyException(currency)
        self._require_credentials()

        body: dict[str, Any] = {"amount": amount, "currency": currency}
        if receipt:
            body["receipt"] = receipt

        client = await self._ensure_client()
        try:
            resp = await client.post("/orders", json=body)
        except httpx.TimeoutException as e:
            logger.error(f"[GATEWAY] create_order timed out: {type(e).__name__}")
            raise GatewayTimeoutException("create_order", self.timeout_s) from e
        except httpx.HTTPError as e:
            logger.error(f"[GATEWAY] create_order failed: {type(e).__name__}: {sanitize_for_log(repr(e))}")
            raise GatewayException(
                f"Payment gateway request failed: {e}",
                details={"operation": "create_order", "error": type(e).__name__},
            ) from e

        if resp.status_code >= 400:
            reason = _error_description(resp)
            logger.error(f"[GATEWAY] create_order rejected: status={resp.status_code} reason={reason}")
            raise GatewayResponseException(resp.status_code, reason)

        try:
            payload = resp.json()
        except ValueError as e:
            raise GatewayResponseException(resp.status_code, "response body is not JSON") from e
        if not isinstance(payload, dict):
            raise GatewayResponseException(resp.status_code, "response body is not an object")

        order = GatewayOrder.from_payload(payload)
        logger.info(f"[GATEWAY] Order created: {order.order_id} ({order.amount} {order.currency})")
        return order

    def expected_signature(self, order_id: str, payment_id: str) -> str:
        """주문/결제 ID로 기대 서명(hex) 계산"""
        self._require_credentials()
        message = f"{order_id}|{payment_id}".encode("utf-8")
        return hmac.new(self._key_secret.encode("utf-8"), message, hashlib.sha256).hexdigest()

    def verify(self, order_id: str, payment_id: str, signature: str) -> bool:
        """결제 서명 검증 (불일치는 오류가 아니라 False)"""
        expected = self.expected_signature(order_id, payment_id)
        valid = hmac.compare_digest(expected.encode("utf-8"), (signature or "").encode("utf-8"))
        logger.info(
            f"[GATEWAY] Signature check: order={order_id} payment={payment_id} "
            f"signature={mask_identifier(signature)} valid={valid}"
        )
        return valid

    async def close(self) -> None:
        async with self._lock:
            if self._client is None:
                return
            await self._client.aclose()
            self._client = None


def _error_description(resp: httpx.Response) -> str:
    """Razorpay 오류 본문 {"error": {"description": ...}} 에서 설명 추출"""
    try:
        payload = resp.json()
    except ValueError:
        return resp.text[:200] or resp.reason_phrase
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("description"):
            return str(error["description"])
    return resp.reason_phrase or "unknown error"
