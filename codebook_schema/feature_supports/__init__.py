"""피처 지원 패키지 — 피처 타입별 분류 및 생성 전략.

Feature support package — Per-type strategies that classify a codebook
feature's declared type and declare it in a type system.

Modules:
    base: FeatureSupport 인터페이스 (FeatureSupport interface)
    primitive: 기본 타입 지원 (String/Integer/Float/Boolean)
    string_array: 다중 값 코드 지원 (Multi-valued string codes)
"""

from codebook_schema.feature_supports.base import FeatureSupport
from codebook_schema.feature_supports.primitive import PrimitiveFeatureSupport
from codebook_schema.feature_supports.string_array import StringArrayFeatureSupport

__all__ = [
    "FeatureSupport",
    "PrimitiveFeatureSupport",
    "StringArrayFeatureSupport",
]
