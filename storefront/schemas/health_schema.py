"""Pydantic 스키마 정의 - 헬스 체크"""
from datetime import datetime
from pydantic import BaseModel


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    database: bool
    order_registry: bool
