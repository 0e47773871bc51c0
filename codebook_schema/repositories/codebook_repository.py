"""코드북 레포지토리 — 코드북 CRUD 쿼리.

Codebook Repository — CRUD queries for codebooks.
Extends BaseRepository with project-scoped, order-aware retrieval.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from codebook_schema.models.codebook import Codebook
from codebook_schema.repositories.base import BaseRepository


class CodebookRepository(BaseRepository[Codebook]):
    """코드북 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the codebooks table.
    """

    def __init__(self) -> None:
        super().__init__(Codebook)

    async def get_by_project(
        self,
        db: AsyncSession,
        project_id: UUID,
    ) -> list[Codebook]:
        """프로젝트에 속한 모든 코드북을 표시 순서로 조회합니다.

        Retrieve all codebooks of a project, ascending by display order.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            project_id: 프로젝트 ID (Project UUID)

        Returns:
            list[Codebook]: 코드북 목록 (Codebooks ordered by codebook_order)
        """
        query: Select = (
            select(Codebook)
            .where(Codebook.project_id == project_id)
            .order_by(Codebook.codebook_order.asc())
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
codebook_repository: CodebookRepository = CodebookRepository()
