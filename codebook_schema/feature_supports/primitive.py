"""기본 타입 피처 지원 — String, Integer, Float, Boolean.

Primitive feature support for single-valued UIMA primitive types.
"""

from codebook_schema.feature_supports.base import FeatureSupport
from codebook_schema.models.codebook import CodebookFeature
from codebook_schema.schemas.feature_type import FeatureType
from codebook_schema.schemas.type_system import TypeDescription, TypeSystemDescription

TYPE_NAME_STRING: str = "uima.cas.String"
TYPE_NAME_INTEGER: str = "uima.cas.Integer"
TYPE_NAME_FLOAT: str = "uima.cas.Float"
TYPE_NAME_BOOLEAN: str = "uima.cas.Boolean"


class PrimitiveFeatureSupport(FeatureSupport):
    """기본 타입 피처 지원.

    Classifies the primitive types and declares them with the declared
    type as range.
    """

    id = "primitive"
    order = 10

    def supported_feature_types(self) -> list[FeatureType]:
        return [
            FeatureType(name=TYPE_NAME_STRING, ui_name="Primitive: String", feature_support_id=self.id),
            FeatureType(name=TYPE_NAME_INTEGER, ui_name="Primitive: Integer", feature_support_id=self.id),
            FeatureType(name=TYPE_NAME_FLOAT, ui_name="Primitive: Float", feature_support_id=self.id),
            FeatureType(name=TYPE_NAME_BOOLEAN, ui_name="Primitive: Boolean", feature_support_id=self.id),
        ]

    def generate(
        self,
        type_system: TypeSystemDescription,
        type_description: TypeDescription,
        feature: CodebookFeature,
    ) -> None:
        # 타입 미지정 피처는 문자열로 선언 — Unset type is declared as a string
        type_description.add_feature(
            feature.name,
            feature.description or "",
            feature.type or TYPE_NAME_STRING,
        )
