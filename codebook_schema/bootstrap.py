"""컴포지션 루트 — 로깅 구성 및 피처 지원 레지스트리 초기화.

Composition root — Configures logging and initializes the feature support
registry with the built-in supports plus those named in settings.

Usage:
    from codebook_schema.bootstrap import startup
    startup()
"""

import importlib
from collections.abc import Iterable

from codebook_schema.config import settings
from codebook_schema.feature_supports import (
    FeatureSupport,
    PrimitiveFeatureSupport,
    StringArrayFeatureSupport,
)
from codebook_schema.services.feature_support_registry import (
    FeatureSupportRegistry,
    feature_support_registry,
)
from codebook_schema.utils.logging import configure_logging


def load_feature_support(path: str) -> FeatureSupport:
    """모듈 경로에서 피처 지원을 생성합니다.

    Import and instantiate a feature support from a "module:Class" path.

    Raises:
        ValueError: 경로 형식이 잘못되었거나 FeatureSupport가 아닐 때
                    (Malformed path, or the class is not a FeatureSupport)
    """
    module_name, _, class_name = path.partition(":")
    if not module_name or not class_name:
        raise ValueError(f"Invalid feature support path: {path!r}")

    support_class = getattr(importlib.import_module(module_name), class_name)
    if not (isinstance(support_class, type) and issubclass(support_class, FeatureSupport)):
        raise ValueError(f"{path!r} is not a FeatureSupport")
    return support_class()


def build_registry(
    extra: Iterable[FeatureSupport] = (),
    registry: FeatureSupportRegistry = feature_support_registry,
) -> FeatureSupportRegistry:
    """레지스트리를 내장 지원 + 설정된 지원 + 추가 지원으로 초기화합니다.

    Initialize the registry with the built-in supports, the supports named
    in ``settings.FEATURE_SUPPORTS`` and any ``extra`` instances, in that
    discovery order.
    """
    supports: list[FeatureSupport] = [
        PrimitiveFeatureSupport(),
        StringArrayFeatureSupport(),
    ]
    supports.extend(load_feature_support(path) for path in settings.FEATURE_SUPPORTS)
    supports.extend(extra)

    registry.initialize(supports)
    return registry


def startup() -> FeatureSupportRegistry:
    """애플리케이션 시작 시 한 번 호출합니다.

    Call once at application start-up.
    """
    configure_logging()
    return build_registry()
