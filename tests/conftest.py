"""전역 테스트 설정

역할:
- 테스트 환경 변수 (storefront import 전에 설정해야 Settings에 반영됨)
- 공통 Fake 주입 (주문 레지스트리, 게이트웨이 MockTransport)
- 인메모리 SQLite DB 핸들
"""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator

import httpx
import pytest

os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "INFO"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RAZORPAY_KEY_ID"] = "rzp_test_key"
os.environ["RAZORPAY_KEY_SECRET"] = "test_secret"
os.environ["RAZORPAY_API_URL"] = "https://gateway.test/v1"

# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fastapi.testclient import TestClient  # noqa: E402

from storefront.api.routes.payment_routes import get_order_registry, get_payment_gateway  # noqa: E402
from storefront.app import create_app  # noqa: E402
from storefront.core.database import Database  # noqa: E402
from storefront.services.impl.payment_gateway import PaymentGateway  # noqa: E402

KEY_ID = "rzp_test_key"
KEY_SECRET = "test_secret"
GATEWAY_URL = "https://gateway.test/v1"


@dataclass
class FakeOrderRegistry:
    """API 테스트용 주문 레지스트리 (Redis 없이 메모리에 보관)"""

    order_ids: set[str] = field(default_factory=set)
    healthy: bool = True

    def remember(self, order_id: str) -> None:
        self.order_ids.add(order_id)

    def contains(self, order_id: str) -> bool:
        return order_id in self.order_ids

    def health_check(self) -> bool:
        return self.healthy


@dataclass
class GatewayStub:
    """MockTransport 핸들러: 요청을 기록하고 Razorpay 형식 주문을 돌려줌"""

    requests: list[httpx.Request] = field(default_factory=list)
    error: Exception | None = None
    status_code: int = 200
    body: dict | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.body is not None:
            return httpx.Response(self.status_code, json=self.body)
        sent = json.loads(request.content)
        return httpx.Response(
            self.status_code,
            json={
                "id": f"order_{len(self.requests):04d}",
                "entity": "order",
                "amount": sent["amount"],
                "currency": sent["currency"],
                "receipt": sent.get("receipt"),
                "status": "created",
            },
        )


@pytest.fixture
def gateway_stub() -> GatewayStub:
    return GatewayStub()


@pytest.fixture
def make_gateway() -> Callable[..., PaymentGateway]:
    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> PaymentGateway:
        return PaymentGateway(
            kwargs.pop("key_id", KEY_ID),
            kwargs.pop("key_secret", KEY_SECRET),
            api_url=GATEWAY_URL,
            transport=httpx.MockTransport(handler),
            **kwargs,
        )

    return _make


@pytest.fixture
def database() -> Iterator[Database]:
    db = Database("sqlite://")
    db.connect()
    yield db
    db.close()


@pytest.fixture
def db_session(database: Database):
    session = database.new_session()
    yield session
    session.close()


@pytest.fixture
def order_registry() -> FakeOrderRegistry:
    return FakeOrderRegistry()


@pytest.fixture
def app(gateway_stub, make_gateway, order_registry):
    application = create_app(database=Database("sqlite://"))
    gateway = make_gateway(gateway_stub)
    application.dependency_overrides[get_payment_gateway] = lambda: gateway
    application.dependency_overrides[get_order_registry] = lambda: order_registry
    return application


@pytest.fixture
def client(app) -> Iterator[TestClient]:
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
