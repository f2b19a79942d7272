"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 데이터베이스
    database_url: str = "sqlite:///./storefront.db"

    # Redis (주문 레지스트리)
    redis_url: str = "redis://localhost:6379/0"
    order_ttl_seconds: int = 3600  # 1시간

    # 결제 게이트웨이 (Razorpay)
    # NOTE: 키가 비어 있으면 첫 게이트웨이 호출 시점에 GatewayConfigurationException
    razorpay_key_id: str = ""
    razorpay_key_secret: str = ""
    razorpay_api_url: str = "https://api.razorpay.com/v1"
    gateway_timeout_s: float = 10.0

    # 프론트엔드(상품 카드)가 상품을 가져올 API 주소
    storefront_api_url: str = "http://localhost:8000"

    # API
    api_title: str = "Storefront"
    api_version: str = "1.0.0"
    api_description: str = "단일 상품 조회와 결제 게이트웨이 주문/검증 API"

    # 로깅
    log_level: str = "INFO"

    @field_validator("order_ttl_seconds")
    @classmethod
    def validate_order_ttl(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("order_ttl_seconds must be positive")
        return v

    @field_validator("gateway_timeout_s")
    @classmethod
    def validate_gateway_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("gateway_timeout_s must be positive")
        return v

    @field_validator("database_url", "redis_url")
    @classmethod
    def validate_required_urls(cls, v: str) -> str:
        if not v:
            raise ValueError("database_url and redis_url must not be empty")
        return v

    @field_validator("razorpay_api_url", "storefront_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
