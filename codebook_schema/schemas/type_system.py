"""타입 시스템 기술자 스키마.

Type system descriptor schemas.
An in-memory description of an annotation type system: types, their
supertypes, and the features declared on them. Feature supports append
feature declarations; the schema service never reads them back.
"""

from pydantic import BaseModel, Field

# 코드북 타입의 기본 상위 타입 — Default supertype of generated codebook types
ANNOTATION_TYPE: str = "uima.tcas.Annotation"


class FeatureDescription(BaseModel):
    """타입에 선언된 피처 하나.

    One feature declared on a type.

    Attributes:
        name: 피처 이름 (Feature name)
        description: 설명 (Description)
        range_type_name: 값 타입 이름 (Range type name)
        element_type: 배열 원소 타입 (Element type for array ranges)
        multiple_references_allowed: 다중 참조 허용 여부 (Array sharing flag)
    """

    name: str
    description: str = ""
    range_type_name: str
    element_type: str | None = None
    multiple_references_allowed: bool | None = None


class TypeDescription(BaseModel):
    """타입 하나와 그 피처 목록.

    One type with the features declared on it, in declaration order.
    """

    name: str
    description: str = ""
    supertype_name: str = ANNOTATION_TYPE
    features: list[FeatureDescription] = Field(default_factory=list)

    def add_feature(
        self,
        name: str,
        description: str,
        range_type_name: str,
        element_type: str | None = None,
        multiple_references_allowed: bool | None = None,
    ) -> FeatureDescription:
        """피처를 선언합니다.

        Declare a feature on this type and return its description.
        """
        feature = FeatureDescription(
            name=name,
            description=description,
            range_type_name=range_type_name,
            element_type=element_type,
            multiple_references_allowed=multiple_references_allowed,
        )
        self.features.append(feature)
        return feature

    def get_feature(self, name: str) -> FeatureDescription | None:
        return next((f for f in self.features if f.name == name), None)


class TypeSystemDescription(BaseModel):
    """타입 시스템 — 타입 목록.

    Type system — The list of declared types, in declaration order.
    """

    types: list[TypeDescription] = Field(default_factory=list)

    def add_type(
        self,
        name: str,
        description: str = "",
        supertype_name: str = ANNOTATION_TYPE,
    ) -> TypeDescription:
        """타입을 추가합니다.

        Add a type to the type system and return its description.
        """
        type_description = TypeDescription(
            name=name,
            description=description,
            supertype_name=supertype_name,
        )
        self.types.append(type_description)
        return type_description

    def get_type(self, name: str) -> TypeDescription | None:
        return next((t for t in self.types if t.name == name), None)
