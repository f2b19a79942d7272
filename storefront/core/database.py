"""데이터베이스 연결 및 세션 관리

모듈 전역 엔진 대신 명시적으로 생성해서 앱에 주입하는 핸들(Database)을 사용합니다.
생명주기: DISCONNECTED → READY → CLOSED
"""
from __future__ import annotations

from contextlib import contextmanager
from enum import Enum
from typing import Generator, Optional

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from storefront.core.exceptions import DatabaseConnectionException
from storefront.core.logging import logger, sanitize_for_log

# SQLAlchemy Base
Base = declarative_base()


class DatabaseState(str, Enum):
    DISCONNECTED = "disconnected"
    READY = "ready"
    CLOSED = "closed"


def _engine_options(database_url: str) -> dict:
    """URL 종류별 엔진 옵션 (SQLite는 풀 설정 대신 스레드 체크 해제)"""
    if database_url.startswith("sqlite"):
        options: dict = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # 인메모리 DB는 커넥션이 바뀌면 내용이 사라지므로 단일 커넥션 유지
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_pre_ping": True,
        "pool_recycle": 300,
        "pool_size": 5,
        "max_overflow": 10,
    }


class Database:
    """프로세스 단위 DB 핸들"""

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.state = DatabaseState.DISCONNECTED
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise DatabaseConnectionException("engine not created (call connect() first)")
        return self._engine

    @property
    def is_ready(self) -> bool:
        return self.state == DatabaseState.READY

    def connect(self) -> None:
        """엔진 생성 → 테이블 생성 → SELECT 1 헬스 체크

        실패 시 DatabaseConnectionException을 던집니다 (재시도 없음, fail fast).
        """
        if self.state == DatabaseState.READY:
            return
        if self.state == DatabaseState.CLOSED:
            raise DatabaseConnectionException("database handle already closed")

        # 모델 모듈을 import해야 Base.metadata에 테이블이 등록됨
        from storefront.repositories import models  # noqa: F401

        try:
            self._engine = create_engine(self.database_url, **_engine_options(self.database_url))
            Base.metadata.create_all(bind=self._engine)
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except Exception as e:
            reason = sanitize_for_log(str(e), max_length=300)
            logger.error(f"[DB] Failed to connect to {sanitize_for_log(self.database_url)}: {reason}")
            if self._engine is not None:
                self._engine.dispose()
                self._engine = None
            raise DatabaseConnectionException(reason) from e

        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self._engine)
        self.state = DatabaseState.READY
        logger.info("[DB] Database connected and tables initialized")

    def ping(self) -> bool:
        """헬스 체크 (연결되어 있고 SELECT 1이 성공하면 True)"""
        if not self.is_ready:
            return False
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"[DB] Health check failed: {e}")
            return False

    def new_session(self) -> Session:
        if not self.is_ready or self._session_factory is None:
            raise DatabaseConnectionException(f"database is {self.state.value}")
        return self._session_factory()

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Context Manager: 커밋/롤백까지 처리하는 세션"""
        db = self.new_session()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
        self._session_factory = None
        self.state = DatabaseState.CLOSED
        logger.info("[DB] Database closed")


def get_database(request: Request) -> Database:
    """FastAPI Dependency: 앱에 주입된 DB 핸들"""
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """FastAPI Dependency: DB 세션 제공"""
    db = get_database(request).new_session()
    try:
        yield db
    finally:
        db.close()
