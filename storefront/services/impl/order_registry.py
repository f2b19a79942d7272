"""Redis 주문 레지스트리 - 이 서버가 생성한 주문 ID만 기억

검증 요청의 orderId가 실제로 우리가 만든 주문인지 확인하는 용도입니다.
주문 자체는 게이트웨이가 소유하며, 여기에는 TTL이 걸린 키만 남깁니다.
"""
from typing import Optional
from redis import Redis

from storefront.core.config import settings
from storefront.core.logging import logger, sanitize_for_log
from storefront.core.exceptions import CacheConnectionException


ORDER_KEY_PREFIX = "storefront:order:"


def order_key(order_id: str) -> str:
    return f"{ORDER_KEY_PREFIX}{order_id}"


class OrderRegistry:
    """생성된 주문 ID 집합 (Redis SETEX)"""

    def __init__(self, redis_url: Optional[str] = None, ttl_seconds: Optional[int] = None):
        """Redis 클라이언트 초기화"""
        self.ttl_seconds = ttl_seconds or settings.order_ttl_seconds
        url = redis_url or settings.redis_url
        try:
            self.redis_client = Redis.from_url(
                url,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5
            )
            # 연결 테스트
            self.redis_client.ping()
            logger.info("[REGISTRY] Redis connection established")
        except Exception as e:
            reason = sanitize_for_log(str(e), max_length=300)
            logger.error(f"[REGISTRY] Failed to connect to Redis {sanitize_for_log(url)}: {reason}")
            raise CacheConnectionException(reason)

    def remember(self, order_id: str) -> None:
        """주문 ID 기록 (TTL 만료 시 자동 삭제)"""
        try:
            self.redis_client.setex(order_key(order_id), self.ttl_seconds, "1")
            logger.info(f"[REGISTRY] Order remembered: {order_id}, TTL: {self.ttl_seconds}s")
        except Exception as e:
            logger.error(f"[REGISTRY] Write error: {e}")
            raise CacheConnectionException(f"write failed: {e}")

    def contains(self, order_id: str) -> bool:
        """이 서버가 만든 (만료되지 않은) 주문인지"""
        try:
            return bool(self.redis_client.exists(order_key(order_id)))
        except Exception as e:
            logger.error(f"[REGISTRY] Read error: {e}")
            raise CacheConnectionException(f"read failed: {e}")

    def health_check(self) -> bool:
        try:
            return bool(self.redis_client.ping())
        except Exception:
            return False
