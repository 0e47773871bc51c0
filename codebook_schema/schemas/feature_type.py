"""피처 타입 값 객체 스키마.

Feature type value object schema.
Returned by a feature support to describe how a declared type string is
interpreted. Immutable and never persisted.
"""

from pydantic import BaseModel, ConfigDict


class FeatureType(BaseModel):
    """피처 타입 — 선언된 타입 문자열의 해석 결과.

    Feature type — Interpretation of a declared type string.

    Attributes:
        name: 타입 이름 (Type name, e.g. "uima.cas.String")
        ui_name: 표시 이름 (Display name, e.g. "Primitive: String")
        feature_support_id: 담당 피처 지원 ID (Id of the owning feature support)
    """

    model_config = ConfigDict(frozen=True)

    name: str  # 선언된 타입 문자열 (Declared type string)
    ui_name: str  # 표시 이름 (Display name)
    feature_support_id: str  # 피처 지원 식별자 (Feature support identifier)
