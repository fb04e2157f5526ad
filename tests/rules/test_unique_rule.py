"""
Tests for the uniqueness rule.
"""

import pytest

from collection_validator.core.exceptions import ConfigurationError
from collection_validator.rules import UniqueRule


def test_empty_and_single_collections():
    """Empty and single-element collections have no duplicates."""
    rule = UniqueRule()
    assert rule.evaluate([]) == []
    assert rule.evaluate(["only"]) == []


def test_full_value_equality():
    """Without selectors whole items are compared."""
    failures = UniqueRule().evaluate(["a", "b", "a", "c", "b"])
    assert [failure.index for failure in failures] == [2, 4]
    assert [failure.element for failure in failures] == ["a", "b"]
    assert all(failure.property_name is None for failure in failures)
    assert failures[0].message == "Duplicate item at index 2: items must be unique"


def test_failures_follow_collection_order():
    """Failures are ordered by position, not by group."""
    failures = UniqueRule().evaluate([3, 1, 1, 3, 1])
    assert [failure.index for failure in failures] == [2, 3, 4]


def test_single_key_selector(people):
    """Items sharing a selected key are duplicates."""
    failures = UniqueRule("address.city").evaluate(people)
    assert len(failures) == 1
    assert failures[0].index == 2
    assert failures[0].property_name == "address.city"
    assert failures[0].attempted_value == ("Oslo",)
    assert failures[0].message == "Duplicate item at index 2: address.city must be unique"


def test_multiple_key_selectors_match_pairwise():
    """Items are duplicates only when every key matches."""
    rows = [
        {"first": "ada", "last": "lovelace"},
        {"first": "ada", "last": "byron"},
        {"first": "ada", "last": "lovelace"},
    ]
    failures = UniqueRule("first", "last").evaluate(rows)
    assert [failure.index for failure in failures] == [2]
    assert failures[0].property_name == "first, last"
    assert UniqueRule("first").evaluate(rows)[-1].index == 2
    assert len(UniqueRule("first").evaluate(rows)) == 2


def test_callable_selectors():
    """Callables can be used as key selectors."""

    def lowered(name):
        return name.lower()

    failures = UniqueRule(lowered).evaluate(["Ann", "ann", "Bo"])
    assert len(failures) == 1
    assert "lowered must be unique" in failures[0].message


def test_none_keys_are_an_equality_class():
    """Two items with None keys are duplicates."""
    rows = [{"code": None}, {"code": "x"}, {"code": None}]
    failures = UniqueRule("code").evaluate(rows)
    assert [failure.index for failure in failures] == [2]


def test_unhashable_items():
    """Unhashable items are compared by equality."""
    items = [{"a": 1}, {"a": 2}, {"a": 1}, [1, 2], [1, 2]]
    failures = UniqueRule().evaluate(items)
    assert [failure.index for failure in failures] == [2, 4]


def test_unhashable_keys():
    """Unhashable selected keys are compared by equality."""
    rows = [{"tags": ["x"]}, {"tags": ["y"]}, {"tags": ["x"]}]
    assert [failure.index for failure in UniqueRule("tags").evaluate(rows)] == [2]


def test_custom_message():
    """A custom message is used verbatim."""
    failures = UniqueRule(error_message="ids must be unique").evaluate([1, 1])
    assert failures[0].message == "ids must be unique"


def test_rule_does_not_modify_collection():
    """Evaluation only reads the collection."""
    items = [1, 2, 2]
    UniqueRule().evaluate(items)
    assert items == [1, 2, 2]


def test_invalid_selector():
    """Unsupported selectors are rejected at configuration time."""
    with pytest.raises(ConfigurationError):
        UniqueRule(3.5)
