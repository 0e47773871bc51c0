"""프로젝트 SQLAlchemy ORM 모델 정의.

Project SQLAlchemy ORM model definition.
Projects are owned by the host application; only the columns codebooks
need to reference and scope by are mapped here.

Tables:
    - projects: 코드북이 소속되는 어노테이션 프로젝트 (Annotation project owning codebooks)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from codebook_schema.database import Base


class Project(Base):
    """프로젝트 모델 — 코드북의 최상위 범위.

    Project model — Top-level scope for codebooks and their features.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 프로젝트 이름 (Project name)
        created_at: 생성 일시 UTC (Creation timestamp in UTC)
    """

    __tablename__ = "projects"

    # 프로젝트 고유 식별자 — Project unique identifier (UUID v4, assigned on flush)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 프로젝트 이름 — Project display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
