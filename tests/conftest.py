"""테스트 인프라 — 인메모리 SQLite DB, 세션, 피처 지원 픽스처.

Test infrastructure — In-memory SQLite DB, session, and feature support fixtures.
Each test gets a fresh schema on a single shared aiosqlite connection with
foreign keys enforced, so referential errors surface like on PostgreSQL.
The connection emits its own BEGIN so that SAVEPOINTs nest correctly.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from codebook_schema.database import Base
from codebook_schema.feature_supports.base import FeatureSupport
from codebook_schema.models import *  # noqa: F401,F403 — register all models with metadata
from codebook_schema.models.codebook import Codebook, CodebookFeature
from codebook_schema.models.project import Project
from codebook_schema.schemas.feature_type import FeatureType
from codebook_schema.services.codebook_schema_service import CodebookSchemaService
from codebook_schema.services.feature_support_registry import FeatureSupportRegistry

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# 테스트용 피처 지원
# ---------------------------------------------------------------------------
class RecordingFeatureSupport(FeatureSupport):
    """호출 횟수와 생성된 피처를 기록하는 피처 지원."""

    id = "recording"

    def __init__(self, order: int | None = None, types: tuple[str, ...] = ("uima.cas.String",)) -> None:
        self.order = order
        self.types = types
        self.classify_calls = 0
        self.generated: list[str] = []

    def supported_feature_types(self) -> list[FeatureType]:
        return [FeatureType(name=t, ui_name=t, feature_support_id=self.id) for t in self.types]

    def classify(self, feature: CodebookFeature) -> FeatureType | None:
        self.classify_calls += 1
        return super().classify(feature)

    def generate(self, type_system, type_description, feature: CodebookFeature) -> None:
        self.generated.append(feature.name)
        type_description.add_feature(feature.name, feature.description or "", feature.type or "uima.cas.String")


def make_codebook(project: Project, name: str, order: int, ui_name: str | None = None) -> Codebook:
    """저장되지 않은 코드북을 생성합니다."""
    return Codebook(
        project_id=project.id,
        name=name,
        ui_name=ui_name or name,
        codebook_order=order,
    )


def make_feature(codebook: Codebook, name: str, feature_type: str | None = "uima.cas.String", ui_name: str | None = None) -> CodebookFeature:
    """저장되지 않은 코드북 피처를 생성합니다."""
    return CodebookFeature(
        codebook_id=codebook.id,
        project_id=codebook.project_id,
        name=name,
        ui_name=ui_name or name,
        type=feature_type,
    )


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)

    # 드라이버 자체 트랜잭션 처리를 끄고 BEGIN을 직접 발행 (SAVEPOINT 지원)
    @event.listens_for(eng.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(eng.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 및 서비스
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def project(db: AsyncSession) -> Project:
    """테스트 프로젝트를 생성합니다."""
    p = Project(name="Test Project")
    db.add(p)
    await db.flush()
    await db.refresh(p)
    return p


@pytest_asyncio.fixture
async def other_project(db: AsyncSession) -> Project:
    """두 번째 테스트 프로젝트를 생성합니다."""
    p = Project(name="Other Project")
    db.add(p)
    await db.flush()
    await db.refresh(p)
    return p


@pytest.fixture
def support() -> RecordingFeatureSupport:
    return RecordingFeatureSupport(order=1)


@pytest.fixture
def registry(support: RecordingFeatureSupport) -> FeatureSupportRegistry:
    """기록용 피처 지원 하나로 초기화된 레지스트리."""
    r = FeatureSupportRegistry()
    r.initialize([support])
    return r


@pytest.fixture
def service(registry: FeatureSupportRegistry) -> CodebookSchemaService:
    return CodebookSchemaService(registry)
