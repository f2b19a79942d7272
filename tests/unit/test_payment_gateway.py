"""결제 게이트웨이 어댑터 단위 테스트 (httpx.MockTransport, 외부 호출 없음)"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json

import httpx
import pytest

from storefront.core.exceptions import (
    GatewayConfigurationException,
    GatewayException,
    GatewayResponseException,
    GatewayTimeoutException,
    ValidationException,
)
from storefront.services.impl.payment_gateway import GatewayOrder

SECRET = "test_secret"


def sign(order_id: str, payment_id: str, secret: str = SECRET) -> str:
    return hmac.new(secret.encode(), f"{order_id}|{payment_id}".encode(), hashlib.sha256).hexdigest()


class TestVerify:
    def test_valid_signature(self, make_gateway, gateway_stub):
        gateway = make_gateway(gateway_stub)
        assert gateway.verify("order_1", "pay_1", sign("order_1", "pay_1")) is True

    def test_mismatch_is_false_not_error(self, make_gateway, gateway_stub):
        gateway = make_gateway(gateway_stub)
        assert gateway.verify("order_1", "pay_1", sign("order_1", "pay_2")) is False
        assert gateway.verify("order_1", "pay_1", "deadbeef") is False
        assert gateway.verify("order_1", "pay_1", "") is False

    def test_signature_from_other_secret_is_false(self, make_gateway, gateway_stub):
        gateway = make_gateway(gateway_stub)
        assert gateway.verify("order_1", "pay_1", sign("order_1", "pay_1", "other")) is False

    def test_non_ascii_signature_is_false(self, make_gateway, gateway_stub):
        gateway = make_gateway(gateway_stub)
        assert gateway.verify("order_1", "pay_1", "서명") is False

    def test_deterministic(self, make_gateway, gateway_stub):
        gateway = make_gateway(gateway_stub)
        signature = sign("order_9", "pay_9")
        results = {gateway.verify("order_9", "pay_9", signature) for _ in range(5)}
        assert results == {True}
        assert gateway.expected_signature("order_9", "pay_9") == signature

    def test_missing_secret(self, make_gateway, gateway_stub):
        gateway = make_gateway(gateway_stub, key_secret="")
        with pytest.raises(GatewayConfigurationException):
            gateway.verify("order_1", "pay_1", "x")

    def test_verify_makes_no_network_call(self, make_gateway, gateway_stub):
        gateway = make_gateway(gateway_stub)
        gateway.verify("order_1", "pay_1", sign("order_1", "pay_1"))
        assert gateway_stub.requests == []


class TestCreateOrder:
    @pytest.mark.asyncio
    async def test_success(self, make_gateway, gateway_stub):
        gateway = make_gateway(gateway_stub)
        order = await gateway.create_order(50000, "INR", receipt="rcpt_1")
        await gateway.close()

        assert isinstance(order, GatewayOrder)
        assert order.order_id == "order_0001"
        assert order.amount == 50000
        assert order.currency == "INR"
        assert order.receipt == "rcpt_1"

        request = gateway_stub.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://gateway.test/v1/orders"
        assert json.loads(request.content) == {"amount": 50000, "currency": "INR", "receipt": "rcpt_1"}
        expected_auth = base64.b64encode(b"rzp_test_key:test_secret").decode()
        assert request.headers["Authorization"] == f"Basic {expected_auth}"

    @pytest.mark.asyncio
    async def test_unreachable_gateway(self, make_gateway, gateway_stub):
        gateway_stub.error = httpx.ConnectError("connection refused")
        gateway = make_gateway(gateway_stub)

        with pytest.raises(GatewayException) as exc_info:
            await gateway.create_order(50000, "INR")
        assert exc_info.value.http_status == 502

    @pytest.mark.asyncio
    async def test_timeout(self, make_gateway, gateway_stub):
        gateway_stub.error = httpx.ReadTimeout("read timed out")
        gateway = make_gateway(gateway_stub, timeout_s=1.5)

        with pytest.raises(GatewayTimeoutException) as exc_info:
            await gateway.create_order(50000, "INR")
        assert exc_info.value.details["timeout_s"] == 1.5

    @pytest.mark.asyncio
    async def test_error_response(self, make_gateway, gateway_stub):
        gateway_stub.status_code = 400
        gateway_stub.body = {"error": {"code": "BAD_REQUEST_ERROR", "description": "amount too small"}}
        gateway = make_gateway(gateway_stub)

        with pytest.raises(GatewayResponseException) as exc_info:
            await gateway.create_order(50000, "INR")
        assert exc_info.value.status_code == 400
        assert "amount too small" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_malformed_body(self, make_gateway, gateway_stub):
        gateway_stub.body = {"entity": "order"}
        gateway = make_gateway(gateway_stub)

        with pytest.raises(GatewayResponseException):
            await gateway.create_order(50000, "INR")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "amount,currency",
        [(0, "INR"), (-1, "INR"), (10.5, "INR"), (True, "INR"), (100, "EUR")],
    )
    async def test_invalid_input_skips_network(self, make_gateway, gateway_stub, amount, currency):
        gateway = make_gateway(gateway_stub)

        with pytest.raises(ValidationException):
            await gateway.create_order(amount, currency)
        assert gateway_stub.requests == []

    @pytest.mark.asyncio
    async def test_missing_credentials(self, make_gateway, gateway_stub):
        gateway = make_gateway(gateway_stub, key_id="")

        with pytest.raises(GatewayConfigurationException):
            await gateway.create_order(50000, "INR")
        assert gateway_stub.requests == []
