"""데이터베이스 연결 설정 테스트.

Database wiring tests — Lazy engine construction and per-unit-of-work sessions.
"""

import pytest
from sqlalchemy import text

from codebook_schema import database
from codebook_schema.config import settings
from tests.conftest import TEST_DATABASE_URL


@pytest.fixture
def sqlite_settings(monkeypatch):
    """설정 URL을 인메모리 SQLite로 바꾸고 공유 엔진을 초기화."""
    monkeypatch.setattr(settings, "DATABASE_URL", TEST_DATABASE_URL)
    monkeypatch.setattr(database, "_engine", None)
    monkeypatch.setattr(database, "_session_factory", None)


class TestEngine:
    """엔진 생성 테스트."""

    async def test_build_sqlite_engine(self):
        """SQLite URL에는 풀 크기 옵션 없이 엔진 생성."""
        engine = database.build_engine(TEST_DATABASE_URL)

        assert engine.url.drivername == "sqlite+aiosqlite"
        await engine.dispose()

    async def test_engine_built_once(self, sqlite_settings):
        """공유 엔진은 최초 사용 시 한 번만 생성."""
        engine = database.get_engine()

        assert database.get_engine() is engine
        assert engine.url.drivername == "sqlite+aiosqlite"
        await database.dispose_engine()
        assert database._engine is None


class TestGetDb:
    """세션 제공 테스트."""

    async def test_yields_working_session(self, sqlite_settings):
        async for session in database.get_db():
            result = await session.execute(text("SELECT 1"))
            assert result.scalar() == 1

        await database.dispose_engine()
