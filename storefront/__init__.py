"""단일 상품 + 결제 게이트웨이 데모 백엔드."""

__version__ = "1.0.0"
