"""코드북 관련 SQLAlchemy ORM 모델 정의.

Codebook-related SQLAlchemy ORM model definitions.
A codebook is an ordered coding scheme inside a project; codebook features
are the typed attributes attached to it. Deleting a codebook never cascades
in the database: the schema service removes features first.

Tables:
    - codebooks: 프로젝트 내 코딩 체계 (Coding scheme within a project)
    - codebook_features: 코드북의 타입 지정 속성 (Typed attribute of a codebook)
"""

import uuid
from datetime import datetime, timezone
from typing import Any
from sqlalchemy import String, DateTime, Integer, Text, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from codebook_schema.database import Base


def is_persisted(record: Any) -> bool:
    """레코드가 저장소에서 식별자를 부여받았는지 확인합니다.

    Whether the store has assigned an identity to this record.
    Identities are generated on flush, so a freshly constructed object is
    not persisted until it has been added and flushed.
    """
    return record is not None and record.id is not None


class Codebook(Base):
    """코드북 모델 — 프로젝트 내 정렬된 코딩 체계.

    Codebook model — Named, ordered coding scheme belonging to a project.

    Attributes:
        id: 고유 식별자 UUID, 플러시 전에는 None (Unique identifier, None until flushed)
        project_id: 소속 프로젝트 FK (Owning project foreign key)
        name: 코드북 이름, 프로젝트 내 고유 (Name, unique within project)
        ui_name: 표시 이름 (Display name)
        description: 설명 (Description, optional)
        codebook_order: 표시 순서, 프로젝트 내 고유 (Display order index, unique within project)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        project: 소속 프로젝트 (Owning project)
    """

    __tablename__ = "codebooks"
    __table_args__ = (
        UniqueConstraint("project_id", "name", name="uq_codebooks_project_name"),
        UniqueConstraint("project_id", "codebook_order", name="uq_codebooks_project_order"),
    )

    # 코드북 고유 식별자 — Codebook unique identifier (UUID v4, assigned on flush)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소속 프로젝트 FK — Owning project
    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("projects.id"), nullable=False)
    # 코드북 이름 — Internal name, unique per project
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 표시 이름 — Display name shown to annotators
    ui_name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 설명 — Free text description (optional)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # 표시 순서 — Display order index among sibling codebooks
    codebook_order: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    project = relationship("Project", foreign_keys=[project_id])


class CodebookFeature(Base):
    """코드북 피처 모델 — 코드북에 연결된 타입 지정 속성.

    Codebook feature model — Typed attribute attached to exactly one codebook.
    The declared ``type`` decides which feature support classifies and
    generates it.

    Attributes:
        id: 고유 식별자 UUID, 플러시 전에는 None (Unique identifier, None until flushed)
        codebook_id: 소속 코드북 FK (Owning codebook foreign key)
        project_id: 소속 프로젝트 FK (Project of the owning codebook)
        name: 피처 이름, 코드북 내 고유 (Name, unique within codebook)
        ui_name: 표시 이름 (Display name)
        description: 설명 (Description, optional)
        type: 선언된 타입 문자열 (Declared type string, e.g. "uima.cas.String")
    """

    __tablename__ = "codebook_features"
    __table_args__ = (
        UniqueConstraint("codebook_id", "name", name="uq_codebook_features_codebook_name"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소속 코드북 FK — DB 캐스케이드 없음 (No DB cascade: features are removed by the service)
    codebook_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("codebooks.id"), nullable=False)
    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("projects.id"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    ui_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # 선언된 타입 — None이면 분류 불가 (Unset type means "no opinion" on classification)
    type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    codebook = relationship("Codebook", foreign_keys=[codebook_id])
