"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session wiring for the codebook schema store.
The engine is built on first use from ``settings.DATABASE_URL``, so
importing the models (for Alembic or tests) never opens a connection
pool. ``get_db`` yields one session per unit of work; the host
application owns the commit.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from codebook_schema.config import settings


class Base(DeclarativeBase):
    """코드북 스키마 ORM 모델의 선언적 베이스 클래스.

    Declarative base shared by Project, Codebook and CodebookFeature.
    """

    pass


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def build_engine(database_url: str | None = None) -> AsyncEngine:
    """데이터베이스 URL로 비동기 엔진을 생성합니다.

    Create an async engine for ``database_url`` (default: settings).
    Pool sizing only applies to server databases; SQLite's pools reject it.

    Args:
        database_url: 접속 URL, 생략 시 설정값 (Connection URL, settings when omitted)

    Returns:
        AsyncEngine: 새 엔진 (A new engine, owned by the caller)
    """
    url: str = database_url or settings.DATABASE_URL
    options: dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if not url.startswith("sqlite"):
        options.update(pool_size=5, max_overflow=10)
    return create_async_engine(url, **options)


def get_engine() -> AsyncEngine:
    """공유 엔진을 반환합니다 (최초 호출 시 생성).

    Return the shared engine, building it on first call.
    """
    global _engine
    if _engine is None:
        _engine = build_engine()
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """공유 세션 팩토리를 반환합니다.

    Return the shared session factory bound to ``get_engine()``.
    expire_on_commit=False keeps attributes readable after the caller commits.
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _session_factory


async def dispose_engine() -> None:
    """공유 엔진을 닫고 다음 사용 시 다시 생성되도록 초기화합니다.

    Dispose the shared engine; the next ``get_engine()`` builds a new one.
    """
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """작업 단위 하나에 사용할 비동기 세션을 제공합니다.

    Yield a session for one unit of work. Anything the caller has not
    committed when the generator closes is discarded with the session.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with get_session_factory()() as session:
        yield session
