"""피처 지원 레지스트리 — 피처 타입 분류 및 담당 지원 조회.

Feature Support Registry — Owns the ordered set of feature supports and
answers "what is the type of this feature?" and "which support owns this
feature?".

The active set is an immutable tuple published by a single assignment, so
a reader holding the previous tuple keeps a consistent view during
re-initialization. Provider resolutions for persisted features are cached
by feature id for the life of the registry; entries are never removed.
"""

import logging
from collections.abc import Iterable
from uuid import UUID

from codebook_schema.feature_supports.base import FeatureSupport
from codebook_schema.models.codebook import CodebookFeature, is_persisted
from codebook_schema.schemas.feature_type import FeatureType
from codebook_schema.utils.exceptions import UnsupportedFeatureError

logger = logging.getLogger(__name__)


def _priority(support: FeatureSupport) -> tuple[bool, int]:
    """정렬 키 — 순서 힌트가 없는 지원은 뒤로 (Unordered supports sort last)."""
    return (support.order is None, support.order or 0)


class FeatureSupportRegistry:
    """피처 지원 레지스트리.

    Registry of feature supports in deterministic priority order.
    """

    def __init__(self) -> None:
        self._supports: tuple[FeatureSupport, ...] = ()
        self._cache: dict[UUID, FeatureSupport] = {}

    def initialize(self, supports: Iterable[FeatureSupport] | None) -> None:
        """피처 지원 목록을 정렬하여 활성 집합으로 게시합니다.

        Sort the given supports by priority and publish them as the active
        set, replacing any previous set. Ties and unordered supports keep
        their discovery order (stable sort). The resolution cache is kept.

        Args:
            supports: 피처 지원 목록, None이면 빈 집합 (Supports; None gives an empty set)
        """
        ordered: list[FeatureSupport] = sorted(supports or (), key=_priority)

        for support in ordered:
            logger.info("Found feature support: %s", type(support).__name__)

        self._supports = tuple(ordered)

    def list_providers(self) -> tuple[FeatureSupport, ...]:
        """활성 피처 지원 목록을 우선순위 순으로 반환합니다.

        Return the active supports in priority order.
        """
        return self._supports

    def classify(self, feature: CodebookFeature) -> FeatureType | None:
        """피처의 선언된 타입을 분류합니다.

        Ask each support in priority order to classify the feature and
        return the first answer. An unset declared type, or a type nobody
        claims, yields None.

        Args:
            feature: 분류할 피처 (Feature to classify)

        Returns:
            FeatureType | None: 피처 타입 또는 None (Feature type, or None)
        """
        if feature.type is None:
            return None

        for support in self.list_providers():
            feature_type: FeatureType | None = support.classify(feature)
            if feature_type is not None:
                return feature_type
        return None

    def resolve_provider(self, feature: CodebookFeature) -> FeatureSupport:
        """피처를 담당하는 피처 지원을 반환합니다.

        Return the support responsible for the feature. Persisted features
        are looked up in the cache first and a hit returns without looking
        at the active set. On a miss the head of the active set is taken;
        it is cached under the feature id only when the feature has one.

        Args:
            feature: 대상 피처 (Feature to resolve)

        Returns:
            FeatureSupport: 담당 피처 지원 (Responsible feature support)

        Raises:
            UnsupportedFeatureError: 등록된 피처 지원이 없을 때 (No supports registered)
        """
        persisted: bool = is_persisted(feature)
        if persisted:
            cached: FeatureSupport | None = self._cache.get(feature.id)
            if cached is not None:
                return cached

        # 선언된 타입과 무관하게 첫 번째 지원을 선택
        # Takes the first active support regardless of the declared type
        support: FeatureSupport | None = next(iter(self.list_providers()), None)
        if support is None:
            raise UnsupportedFeatureError(feature)

        if persisted:
            self._cache[feature.id] = support
        return support


# 싱글턴 인스턴스 — 컴포지션 루트(bootstrap)에서 초기화
# Singleton instance, initialized by the composition root (bootstrap)
feature_support_registry: FeatureSupportRegistry = FeatureSupportRegistry()
