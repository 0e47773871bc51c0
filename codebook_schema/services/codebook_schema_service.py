"""코드북 스키마 서비스 — 코드북/피처 CRUD 및 타입 시스템 생성.

Codebook Schema Service — CRUD orchestration for codebooks and codebook
features, and generation of feature declarations into a type system.

Every operation flushes through the session it is given and leaves the
commit to the caller. Removing a codebook is additionally wrapped in a
SAVEPOINT so a failure part way through never leaves it half deleted.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from codebook_schema.models.codebook import Codebook, CodebookFeature, is_persisted
from codebook_schema.models.project import Project
from codebook_schema.repositories.codebook_feature_repository import codebook_feature_repository
from codebook_schema.repositories.codebook_repository import codebook_repository
from codebook_schema.repositories.project_repository import project_repository
from codebook_schema.schemas.codebook import CodebookEditorModel, CodebookResponse
from codebook_schema.schemas.type_system import TypeDescription, TypeSystemDescription
from codebook_schema.services.feature_support_registry import (
    FeatureSupportRegistry,
    feature_support_registry,
)
from codebook_schema.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)

# 생성되는 코드북 타입 이름 접두사 — Prefix of generated codebook type names
CODEBOOK_TYPE_PREFIX: str = "webanno.custom."


class CodebookSchemaService:
    """코드북 및 코드북 피처 관련 비즈니스 로직을 처리하는 서비스.

    Service handling codebook and codebook feature business logic.

    Args:
        registry: 피처 지원 레지스트리 (Feature support registry used for generation)
    """

    def __init__(self, registry: FeatureSupportRegistry) -> None:
        self.registry: FeatureSupportRegistry = registry

    def _to_response(self, codebook: Codebook) -> CodebookResponse:
        """코드북 모델을 응답 스키마로 변환합니다.

        Convert a Codebook model instance to a CodebookResponse schema.
        """
        return CodebookResponse(
            id=str(codebook.id),
            project_id=str(codebook.project_id),
            name=codebook.name,
            ui_name=codebook.ui_name,
            description=codebook.description,
            codebook_order=codebook.codebook_order,
        )

    # --- 코드북 (Codebook) ---

    async def create_codebook(
        self,
        db: AsyncSession,
        codebook: Codebook,
    ) -> Codebook:
        """코드북을 저장합니다 (식별자 기준 삽입/갱신).

        Save a codebook: insert when unpersisted, update otherwise.
        Emits one log record scoped to the owning project.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            codebook: 저장할 코드북 (Codebook to save)

        Returns:
            Codebook: 저장된 코드북 (The saved codebook)

        Raises:
            IntegrityError: 이름/순서 중복 시 저장소가 거부 (Duplicate name or order index)
        """
        saved: Codebook = await codebook_repository.save(db, codebook)
        project: Project | None = await project_repository.get_by_id(db, saved.project_id)
        logger.info(
            "Created codebook [%s](%s) in project [%s](%s)",
            saved.name,
            saved.id,
            project.name if project is not None else None,
            saved.project_id,
            extra={"project_id": str(saved.project_id)},
        )
        return saved

    async def exists_codebook(
        self,
        db: AsyncSession,
        name: str,
        project_id: UUID,
    ) -> bool:
        """프로젝트에 같은 이름의 코드북이 있는지 확인합니다.

        Whether the project has a codebook with this name.
        """
        return await codebook_repository.exists(
            db, {"name": name, "project_id": project_id}
        )

    async def get_codebook(
        self,
        db: AsyncSession,
        codebook_id: UUID,
    ) -> Codebook:
        """ID로 코드북을 조회합니다.

        Retrieve a codebook by its UUID.

        Raises:
            NotFoundError: 코드북을 찾을 수 없을 때 (Codebook not found)
        """
        codebook: Codebook | None = await codebook_repository.get_by_id(db, codebook_id)
        if codebook is None:
            raise NotFoundError("Codebook not found")
        return codebook

    async def get_codebook_by_order(
        self,
        db: AsyncSession,
        codebook_order: int,
        project_id: UUID,
    ) -> Codebook:
        """표시 순서로 코드북을 조회합니다.

        Retrieve the codebook at a display order index within a project.

        Raises:
            NotFoundError: 해당 순서의 코드북이 없을 때 (No codebook at this index)
        """
        codebook: Codebook | None = await codebook_repository.get_one(
            db, {"codebook_order": codebook_order, "project_id": project_id}
        )
        if codebook is None:
            raise NotFoundError(f"No codebook at order {codebook_order}")
        return codebook

    async def get_codebook_by_name(
        self,
        db: AsyncSession,
        name: str,
        project_id: UUID,
    ) -> Codebook:
        """이름으로 코드북을 조회합니다.

        Retrieve a codebook by name within a project.

        Raises:
            NotFoundError: 코드북을 찾을 수 없을 때 (Codebook not found)
        """
        codebook: Codebook | None = await codebook_repository.get_one(
            db, {"name": name, "project_id": project_id}
        )
        if codebook is None:
            raise NotFoundError(f"Codebook [{name}] not found")
        return codebook

    async def list_codebooks(
        self,
        db: AsyncSession,
        project_id: UUID,
    ) -> list[Codebook]:
        """프로젝트의 코드북을 표시 순서로 조회합니다.

        List the codebooks of a project, ascending by display order index.
        """
        return await codebook_repository.get_by_project(db, project_id)

    async def remove_codebook(
        self,
        db: AsyncSession,
        codebook: Codebook,
    ) -> None:
        """코드북과 그 피처를 모두 삭제합니다.

        Remove every feature of the codebook, one at a time in listing
        order, then the codebook itself. The codebook row is never deleted
        while a feature still references it. All removals run inside one
        SAVEPOINT: if any of them fails, every delete already made is
        rolled back before the error propagates, and the outer transaction
        stays usable.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            codebook: 삭제할 코드북 (Codebook to remove)
        """
        # 세이브포인트 — 실패 시 이 코드북의 삭제만 되돌림 (Undo only this removal on failure)
        async with db.begin_nested():
            for feature in await self.list_codebook_features(db, codebook):
                await self.remove_codebook_feature(db, feature)

            await codebook_repository.remove(db, codebook)

    async def get_editor_model(
        self,
        db: AsyncSession,
        codebook_id: UUID,
    ) -> CodebookEditorModel:
        """편집기 모델을 생성합니다 — 선택된 코드 없음.

        Build the editor model for a codebook, with no code selected yet.
        """
        codebook: Codebook = await self.get_codebook(db, codebook_id)
        return CodebookEditorModel(codebook=self._to_response(codebook))

    # --- 코드북 피처 (Codebook feature) ---

    async def create_codebook_feature(
        self,
        db: AsyncSession,
        feature: CodebookFeature,
    ) -> CodebookFeature:
        """코드북 피처를 저장합니다 (식별자 기준 삽입/갱신).

        Save a codebook feature: insert when unpersisted, update otherwise.
        The feature's project is always taken from its owning codebook.

        Raises:
            NotFoundError: 소속 코드북이 없을 때 (Owning codebook not found)
            IntegrityError: 코드북 내 이름 중복 시 (Duplicate name within the codebook)
        """
        codebook: Codebook = await self.get_codebook(db, feature.codebook_id)
        feature.project_id = codebook.project_id
        return await codebook_feature_repository.save(db, feature)

    async def exists_feature(
        self,
        db: AsyncSession,
        name: str,
        codebook: Codebook,
    ) -> bool:
        """코드북에 같은 이름의 피처가 있는지 확인합니다.

        Whether the codebook has a feature with this name.
        """
        return await codebook_feature_repository.exists(
            db, {"name": name, "codebook_id": codebook.id}
        )

    async def get_codebook_feature(
        self,
        db: AsyncSession,
        name: str,
        codebook: Codebook,
    ) -> CodebookFeature:
        """이름으로 코드북 피처를 조회합니다.

        Retrieve a feature of a codebook by name.

        Raises:
            NotFoundError: 피처를 찾을 수 없을 때 (Feature not found)
        """
        feature: CodebookFeature | None = await codebook_feature_repository.get_one(
            db, {"name": name, "codebook_id": codebook.id}
        )
        if feature is None:
            raise NotFoundError(f"Codebook feature [{name}] not found")
        return feature

    async def list_codebook_features(
        self,
        db: AsyncSession,
        codebook: Codebook | None,
    ) -> list[CodebookFeature]:
        """코드북의 피처를 표시 이름 순으로 조회합니다.

        List the features of a codebook ordered by display name. A missing
        or not yet persisted codebook simply has no features.
        """
        if not is_persisted(codebook):
            return []
        return await codebook_feature_repository.get_by_codebook(db, codebook.id)

    async def list_project_features(
        self,
        db: AsyncSession,
        project_id: UUID,
    ) -> list[CodebookFeature]:
        """프로젝트의 모든 코드북 피처를 조회합니다.

        List every feature of a project ordered by
        (codebook display name, feature display name).
        """
        return await codebook_feature_repository.get_by_project(db, project_id)

    async def remove_codebook_feature(
        self,
        db: AsyncSession,
        feature: CodebookFeature,
    ) -> None:
        await codebook_feature_repository.remove(db, feature)

    # --- 타입 시스템 생성 (Type system generation) ---

    async def generate_features(
        self,
        db: AsyncSession,
        type_system: TypeSystemDescription,
        type_description: TypeDescription,
        codebook: Codebook,
    ) -> None:
        """코드북의 모든 피처를 타입 기술자에 선언합니다.

        Declare every feature of the codebook on the type description, in
        the order of ``list_codebook_features``, each through the feature
        support the registry resolves for it.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            type_system: 대상 타입 시스템 (Target type system)
            type_description: 코드북 타입 기술자 (Type description of the codebook)
            codebook: 대상 코드북 (Codebook whose features are generated)

        Raises:
            UnsupportedFeatureError: 피처 지원이 등록되지 않았을 때 (No supports registered)
        """
        for feature in await self.list_codebook_features(db, codebook):
            support = self.registry.resolve_provider(feature)
            support.generate(type_system, type_description, feature)

    async def generate_type_system(
        self,
        db: AsyncSession,
        project_id: UUID,
    ) -> TypeSystemDescription:
        """프로젝트의 코드북 타입 시스템을 생성합니다.

        Build a fresh type system with one type per codebook, in display
        order, each carrying the codebook's generated features.
        """
        type_system = TypeSystemDescription()
        for codebook in await self.list_codebooks(db, project_id):
            type_description: TypeDescription = type_system.add_type(
                CODEBOOK_TYPE_PREFIX + codebook.name,
                codebook.description or "",
            )
            await self.generate_features(db, type_system, type_description, codebook)
        return type_system


# 싱글턴 인스턴스 — 레지스트리 싱글턴을 참조로 전달
# Singleton instance, wired to the registry singleton by reference
codebook_schema_service: CodebookSchemaService = CodebookSchemaService(feature_support_registry)
