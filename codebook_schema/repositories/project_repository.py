"""프로젝트 레포지토리 — 프로젝트 조회 쿼리.

Project Repository — Read access to host-owned projects.
"""

from codebook_schema.models.project import Project
from codebook_schema.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """프로젝트 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the projects table.
    """

    def __init__(self) -> None:
        super().__init__(Project)


# 싱글턴 인스턴스 — Singleton instance
project_repository: ProjectRepository = ProjectRepository()
