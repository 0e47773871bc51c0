"""문자열 배열 피처 지원 — 다중 값 코드.

String array feature support for features holding several codes at once.
"""

from codebook_schema.feature_supports.base import FeatureSupport
from codebook_schema.feature_supports.primitive import TYPE_NAME_STRING
from codebook_schema.models.codebook import CodebookFeature
from codebook_schema.schemas.feature_type import FeatureType
from codebook_schema.schemas.type_system import TypeDescription, TypeSystemDescription

TYPE_NAME_STRING_ARRAY: str = "uima.cas.StringArray"


class StringArrayFeatureSupport(FeatureSupport):
    """문자열 배열 피처 지원.

    Declares the feature as a string array whose elements are strings.
    """

    id = "string-array"
    order = 20

    def supported_feature_types(self) -> list[FeatureType]:
        return [
            FeatureType(name=TYPE_NAME_STRING_ARRAY, ui_name="Multiple codes", feature_support_id=self.id),
        ]

    def generate(
        self,
        type_system: TypeSystemDescription,
        type_description: TypeDescription,
        feature: CodebookFeature,
    ) -> None:
        type_description.add_feature(
            feature.name,
            feature.description or "",
            TYPE_NAME_STRING_ARRAY,
            element_type=TYPE_NAME_STRING,
            multiple_references_allowed=False,
        )
