"""Tests for the default property extractor."""

import pytest

from cypher_builder.core.base import ErrorCode
from cypher_builder.core.errors import PropertyExtractionError
from cypher_builder.query_builder.extractor import ExtractedEntity, extract_properties
from tests.models import Account, Likes, Person, Pet, Point


class TestSupportedEntities:
    def test_pydantic_model_in_declaration_order(self, fred):
        assert extract_properties(fred) == ("Person", (("Name", "Fred"), ("Age", 17)))

    def test_model_without_fields(self):
        assert extract_properties(Likes()) == ExtractedEntity("Likes", ())

    def test_dataclass_skips_private_fields(self):
        pet = Pet(name="Rex", species="dog", _owner_id=3)
        assert extract_properties(pet) == ("Pet", (("name", "Rex"), ("species", "dog")))

    def test_named_tuple(self):
        assert extract_properties(Point(1.0, 2.5)) == ("Point", (("x", 1.0), ("y", 2.5)))

    def test_plain_object_with_label_override(self):
        entity = extract_properties(Account("fred", True))
        assert entity.type_name == "UserAccount"
        assert entity.properties == (("login", "fred"), ("active", True))

    def test_extracted_entity_passes_through(self):
        entity = ExtractedEntity.of("Person", Name="Fred", Age=17)
        assert extract_properties(entity) is entity
        assert entity.properties == (("Name", "Fred"), ("Age", 17))


class TestUnsupportedEntities:
    @pytest.mark.parametrize("entity", [42, "text", {"Name": "Fred"}, None, Person])
    def test_raises_extraction_error(self, entity):
        with pytest.raises(PropertyExtractionError) as exc_info:
            extract_properties(entity)
        assert exc_info.value.code is ErrorCode.EXTRACTION_FAILED

    def test_error_details_name_the_type(self):
        with pytest.raises(PropertyExtractionError) as exc_info:
            extract_properties(42)
        assert exc_info.value.details.entity_type == "builtins.int"
        assert exc_info.value.details.operation == "extract_properties"
