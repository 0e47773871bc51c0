"""내장 피처 지원 테스트.

Built-in feature support tests — Classification and generation of the
primitive and string array supports.
"""

from codebook_schema.feature_supports import PrimitiveFeatureSupport, StringArrayFeatureSupport
from codebook_schema.models.codebook import CodebookFeature
from codebook_schema.schemas.type_system import TypeSystemDescription
from codebook_schema.services.feature_support_registry import FeatureSupportRegistry


def feature(feature_type: str | None, name: str = "sentiment") -> CodebookFeature:
    return CodebookFeature(name=name, ui_name=name.title(), type=feature_type, description="How it feels")


class TestPrimitiveFeatureSupport:
    """기본 타입 피처 지원 테스트."""

    def test_classify_primitive_types(self):
        support = PrimitiveFeatureSupport()
        for type_name in ("uima.cas.String", "uima.cas.Integer", "uima.cas.Float", "uima.cas.Boolean"):
            result = support.classify(feature(type_name))
            assert result is not None
            assert result.name == type_name
            assert result.feature_support_id == "primitive"

    def test_classify_other_type(self):
        assert PrimitiveFeatureSupport().classify(feature("uima.cas.StringArray")) is None

    def test_generate_declares_range(self):
        """선언된 타입을 값 타입으로 피처를 선언."""
        type_system = TypeSystemDescription()
        type_description = type_system.add_type("webanno.custom.Emotion")

        PrimitiveFeatureSupport().generate(type_system, type_description, feature("uima.cas.Integer"))

        declared = type_description.get_feature("sentiment")
        assert declared is not None
        assert declared.range_type_name == "uima.cas.Integer"
        assert declared.description == "How it feels"
        assert declared.element_type is None

    def test_generate_unset_type_as_string(self):
        type_system = TypeSystemDescription()
        type_description = type_system.add_type("webanno.custom.Emotion")

        PrimitiveFeatureSupport().generate(type_system, type_description, feature(None))

        assert type_description.features[0].range_type_name == "uima.cas.String"


class TestStringArrayFeatureSupport:
    """문자열 배열 피처 지원 테스트."""

    def test_classify(self):
        result = StringArrayFeatureSupport().classify(feature("uima.cas.StringArray"))
        assert result is not None
        assert result.feature_support_id == "string-array"

    def test_generate_declares_array(self):
        type_system = TypeSystemDescription()
        type_description = type_system.add_type("webanno.custom.Topics")

        StringArrayFeatureSupport().generate(type_system, type_description, feature("uima.cas.StringArray", "topics"))

        declared = type_description.get_feature("topics")
        assert declared.range_type_name == "uima.cas.StringArray"
        assert declared.element_type == "uima.cas.String"
        assert declared.multiple_references_allowed is False


class TestBuiltInOrdering:
    """내장 지원의 우선순위 테스트."""

    def test_registry_order_and_classification(self):
        array_support = StringArrayFeatureSupport()
        primitive_support = PrimitiveFeatureSupport()
        registry = FeatureSupportRegistry()
        registry.initialize([array_support, primitive_support])

        assert registry.list_providers() == (primitive_support, array_support)
        assert registry.classify(feature("uima.cas.StringArray")).feature_support_id == "string-array"
        assert registry.classify(feature("uima.cas.Boolean")).feature_support_id == "primitive"
