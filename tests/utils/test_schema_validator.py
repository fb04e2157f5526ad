"""
Tests for JSON schema rule sets.
"""

import pytest

from collection_validator.utils.validation import SchemaValidator


@pytest.fixture
def person_schema():
    """Fixture providing a person schema."""
    return {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "age": {"type": "integer", "minimum": 0},
            "address": {
                "type": "object",
                "properties": {"city": {"type": "string"}},
            },
        },
        "required": ["name"],
    }


def test_valid_mapping(person_schema):
    """A conforming mapping passes."""
    validator = SchemaValidator(person_schema)
    assert validator.validate({"name": "alice", "age": 30}).is_valid


def test_missing_required_property(person_schema):
    """Missing required properties are reported as failures."""
    results = SchemaValidator(person_schema).validate({"age": 30})
    assert len(results) == 1
    assert results[0].message == "Schema validation failed: 'name' is a required property"
    assert results[0].property_name is None
    assert results[0].rule == "element"


def test_nested_error_path(person_schema):
    """The failing property path is recorded."""
    results = SchemaValidator(person_schema).validate({"name": "a", "address": {"city": 7}})
    assert results[0].property_name == "address.city"
    assert results[0].attempted_value == 7


def test_objects_validated_through_attributes(people, person_schema):
    """Non-mapping objects are validated through their attributes."""
    schema = {
        "type": "object",
        "properties": {"age": {"type": "integer", "maximum": 40}},
    }
    validator = SchemaValidator(schema)
    assert [validator.validate(person).is_valid for person in people] == [True, False, True]


def test_custom_message(person_schema):
    """A custom message replaces the schema error text."""
    validator = SchemaValidator(person_schema, error_message="not a person")
    assert validator.validate({}).errors == ["not a person"]
