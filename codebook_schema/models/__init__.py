"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    project: 프로젝트 (Project)
    codebook: 코드북 및 코드북 피처 (Codebook and CodebookFeature)
"""

from codebook_schema.models.project import Project
from codebook_schema.models.codebook import Codebook, CodebookFeature, is_persisted

__all__ = [
    "Project",
    "Codebook", "CodebookFeature",
    "is_persisted",
]
