"""코드북 피처 레포지토리 — 코드북 피처 CRUD 쿼리.

Codebook Feature Repository — CRUD queries for codebook features.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from codebook_schema.models.codebook import Codebook, CodebookFeature
from codebook_schema.repositories.base import BaseRepository


class CodebookFeatureRepository(BaseRepository[CodebookFeature]):
    """코드북 피처 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the codebook_features table.
    """

    def __init__(self) -> None:
        super().__init__(CodebookFeature)

    async def get_by_codebook(
        self,
        db: AsyncSession,
        codebook_id: UUID,
    ) -> list[CodebookFeature]:
        """코드북에 속한 피처를 표시 이름 순으로 조회합니다.

        Retrieve the features of a codebook ordered by display name.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            codebook_id: 코드북 ID (Codebook UUID)

        Returns:
            list[CodebookFeature]: 피처 목록 (Features ordered by ui_name)
        """
        query: Select = (
            select(CodebookFeature)
            .where(CodebookFeature.codebook_id == codebook_id)
            .order_by(CodebookFeature.ui_name, CodebookFeature.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_by_project(
        self,
        db: AsyncSession,
        project_id: UUID,
    ) -> list[CodebookFeature]:
        """프로젝트의 모든 피처를 (코드북 표시 이름, 피처 표시 이름) 순으로 조회합니다.

        Retrieve every feature of a project ordered by
        (codebook display name, feature display name).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            project_id: 프로젝트 ID (Project UUID)

        Returns:
            list[CodebookFeature]: 피처 목록 (Features across all codebooks)
        """
        query: Select = (
            select(CodebookFeature)
            .join(Codebook, CodebookFeature.codebook_id == Codebook.id)
            .where(Codebook.project_id == project_id)
            .order_by(Codebook.ui_name, CodebookFeature.ui_name, CodebookFeature.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
codebook_feature_repository: CodebookFeatureRepository = CodebookFeatureRepository()
