"""컴포지션 루트 테스트.

Composition root tests — Registry wiring from built-ins, settings and extras.
"""

import pytest

from codebook_schema.bootstrap import build_registry, load_feature_support
from codebook_schema.config import settings
from codebook_schema.feature_supports import PrimitiveFeatureSupport, StringArrayFeatureSupport
from codebook_schema.services.codebook_schema_service import codebook_schema_service
from codebook_schema.services.feature_support_registry import (
    FeatureSupportRegistry,
    feature_support_registry,
)
from tests.conftest import RecordingFeatureSupport


class TestBuildRegistry:
    """레지스트리 구성 테스트."""

    def test_builtins(self, monkeypatch):
        monkeypatch.setattr(settings, "FEATURE_SUPPORTS", [])
        registry = build_registry(registry=FeatureSupportRegistry())

        assert [type(s) for s in registry.list_providers()] == [
            PrimitiveFeatureSupport,
            StringArrayFeatureSupport,
        ]

    def test_extra_unordered_support_sorts_last(self, monkeypatch):
        monkeypatch.setattr(settings, "FEATURE_SUPPORTS", [])
        extra = RecordingFeatureSupport()
        registry = build_registry([extra], registry=FeatureSupportRegistry())

        assert registry.list_providers()[-1] is extra

    def test_settings_supports_loaded(self, monkeypatch):
        """설정에 지정된 경로의 지원을 생성하여 등록."""
        monkeypatch.setattr(
            settings,
            "FEATURE_SUPPORTS",
            ["codebook_schema.feature_supports.string_array:StringArrayFeatureSupport"],
        )
        registry = build_registry(registry=FeatureSupportRegistry())

        ids = [s.id for s in registry.list_providers()]
        assert ids == ["primitive", "string-array", "string-array"]

    def test_service_shares_registry_singleton(self):
        """서비스 싱글턴은 레지스트리 싱글턴을 참조."""
        assert codebook_schema_service.registry is feature_support_registry


class TestLoadFeatureSupport:
    """피처 지원 경로 로딩 테스트."""

    def test_load(self):
        support = load_feature_support("codebook_schema.feature_supports.primitive:PrimitiveFeatureSupport")
        assert isinstance(support, PrimitiveFeatureSupport)

    def test_malformed_path(self):
        with pytest.raises(ValueError):
            load_feature_support("codebook_schema.feature_supports.primitive")

    def test_not_a_feature_support(self):
        with pytest.raises(ValueError):
            load_feature_support("codebook_schema.schemas.type_system:TypeSystemDescription")
