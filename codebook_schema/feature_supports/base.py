"""피처 지원 인터페이스.

Feature support interface.
A feature support knows how to classify one or more declared feature types
and how to declare a feature of those types in a type system. The registry
only talks to this interface and never branches on concrete classes.
"""

from abc import ABC, abstractmethod

from codebook_schema.models.codebook import CodebookFeature
from codebook_schema.schemas.feature_type import FeatureType
from codebook_schema.schemas.type_system import TypeDescription, TypeSystemDescription


class FeatureSupport(ABC):
    """피처 지원 추상 클래스.

    Abstract feature support.

    Attributes:
        id: 피처 지원 식별자 (Stable identifier, stored in FeatureType)
        order: 우선순위 힌트, 낮을수록 먼저 (Priority hint, lower first; None sorts last)
    """

    id: str = ""
    order: int | None = None

    @abstractmethod
    def supported_feature_types(self) -> list[FeatureType]:
        """이 지원이 처리하는 피처 타입 목록.

        Feature types this support can classify.
        """

    def classify(self, feature: CodebookFeature) -> FeatureType | None:
        """피처의 선언된 타입을 분류합니다.

        Return the feature type matching the feature's declared type, or
        None when this support has no opinion about it.
        """
        return next(
            (t for t in self.supported_feature_types() if t.name == feature.type),
            None,
        )

    @abstractmethod
    def generate(
        self,
        type_system: TypeSystemDescription,
        type_description: TypeDescription,
        feature: CodebookFeature,
    ) -> None:
        """피처를 타입 기술자에 선언합니다.

        Declare the feature on the given type description.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, order={self.order!r})"
