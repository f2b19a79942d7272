"""Pydantic 스키마 테스트."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from storefront.schemas import (
    CreateOrderRequest,
    Currency,
    Price,
    ProductCreate,
    ProductResponse,
    VerifyPaymentRequest,
)
from tests.fixtures import PRODUCTS


def test_price_defaults_to_inr():
    price = Price(amount=100)
    assert price.currency == Currency.INR


def test_price_keeps_int_and_float():
    assert isinstance(Price(amount=50000).amount, int)
    assert Price(amount=499.5).amount == 499.5


@pytest.mark.parametrize("amount", [-1, -0.01, float("inf"), float("nan"), True, "abc"])
def test_price_rejects_bad_amount(amount):
    with pytest.raises(ValidationError):
        Price(amount=amount)


def test_product_create_keeps_surrounding_whitespace():
    payload = dict(PRODUCTS["mug"], title="  Mug  ", description="A mug\n")
    product = ProductCreate.model_validate(payload)
    assert product.title == "  Mug  "
    assert product.description == "A mug\n"


def test_product_response_serializes_currency_as_string():
    response = ProductResponse(
        message="Product fetched successfully",
        product={"id": 1, **PRODUCTS["mug"]},
    )
    data = response.model_dump(mode="json")
    assert data["product"]["price"] == {"amount": 50000, "currency": "INR"}


def test_product_response_allows_null_product():
    response = ProductResponse(message="Product fetched successfully", product=None)
    assert response.model_dump()["product"] is None


def test_create_order_request():
    request = CreateOrderRequest(amount=50000)
    assert request.currency == Currency.INR

    with pytest.raises(ValidationError):
        CreateOrderRequest(amount=0)
    with pytest.raises(ValidationError):
        CreateOrderRequest(amount=100, currency="GBP")
    with pytest.raises(ValidationError):
        CreateOrderRequest(amount=100, receipt="r" * 41)


def test_verify_request_requires_all_fields():
    with pytest.raises(ValidationError):
        VerifyPaymentRequest(orderId="order_1", paymentId="pay_1")
    with pytest.raises(ValidationError):
        VerifyPaymentRequest(orderId="", paymentId="pay_1", signature="sig")
