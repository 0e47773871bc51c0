"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic read, upsert, delete and existence operations over ORM
objects. Repositories flush but never commit; the session owner decides.

Usage:
    class CodebookRepository(BaseRepository[Codebook]):
        def __init__(self) -> None:
            super().__init__(Codebook)
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from codebook_schema.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: UUID,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its UUID.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 UUID (UUID of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_one(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> ModelType | None:
        """조건에 맞는 단일 레코드를 조회합니다.

        Retrieve the single record matching all filters.
        More than one match raises ``MultipleResultsFound`` unchanged; it means
        a uniqueness invariant is broken upstream.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 검색 조건 딕셔너리 {'컬럼명': 값}
                     (Filter criteria dict {'column_name': value})

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model)
        for column_name, value in filters.items():
            query = query.where(getattr(self.model, column_name) == value)

        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def save(
        self,
        db: AsyncSession,
        db_obj: ModelType,
    ) -> ModelType:
        """레코드를 식별자 기준으로 삽입 또는 갱신합니다.

        Insert the record when it has no identity yet, otherwise merge it
        into the session as an update (upsert by identity).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            db_obj: 저장할 ORM 객체 (ORM object to save)

        Returns:
            ModelType: 세션에 연결된 저장된 레코드 (The saved, session-bound record)
        """
        if db_obj.id is None:
            db.add(db_obj)
        else:
            db_obj = await db.merge(db_obj)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def remove(
        self,
        db: AsyncSession,
        db_obj: ModelType,
    ) -> None:
        """레코드를 삭제합니다.

        Delete the row behind an ORM object, merging detached objects first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            db_obj: 삭제할 ORM 객체 (ORM object to delete)
        """
        if db_obj not in db:
            db_obj = await db.merge(db_obj)

        await db.delete(db_obj)
        await db.flush()

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching the given filters exists.
        No match is a valid answer (False), not an error.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 검색 조건 딕셔너리 (Filter criteria dictionary)

        Returns:
            bool: 레코드 존재 여부 (Whether a matching record exists)
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
