"""
Tests for the element rule and element wrapper.
"""

import pytest

from collection_validator import ElementValidator
from collection_validator.core.results import ValidationFailure
from collection_validator.rules import ElementRule, ElementWrapper


def test_no_checks_is_noop(people):
    """An element rule without checks reports nothing."""
    rule = ElementRule()
    assert rule.check_count == 0
    assert rule.evaluate(people) == []


def test_property_rule(people):
    """Property rules validate the selected value of each element."""
    rule = ElementRule()
    rule.create_property_rule("age").greater_than(28)
    failures = rule.evaluate(people)
    assert len(failures) == 1
    failure = failures[0]
    assert failure.index == 2
    assert failure.element is people[2]
    assert failure.property_name == "age"
    assert failure.attempted_value == 27
    assert failure.rule == "element"
    assert failure.message == "age value 27 is outside the allowed range"


def test_property_rule_with_display_name(people):
    """A display name replaces the selector name in messages."""
    rule = ElementRule()
    rule.create_property_rule(lambda person: person.address.zip_code, "zip").matches(r"^0")
    failures = rule.evaluate(people)
    assert [failure.index for failure in failures] == [1]
    assert failures[0].property_name == "zip"


def test_rule_set_failures_are_stamped(people):
    """Failures from rule sets get the element's index and value."""

    class NameValidator(ElementValidator):
        def __init__(self):
            super().__init__()
            self.rule_for("name").must(lambda name: name.startswith("a"), "name must start with a")

    rule = ElementRule()
    rule.add_validator(NameValidator())
    failures = rule.evaluate(people)
    assert [(failure.index, failure.element.name) for failure in failures] == [
        (1, "bob"),
        (2, "carol"),
    ]


def test_plain_rule_set_objects():
    """Any object with validate() returning failures can be attached."""

    class Positive:
        def validate(self, instance):
            if instance > 0:
                return []
            return [ValidationFailure(f"{instance} is not positive")]

    rule = ElementRule()
    rule.add_validator(Positive())
    failures = rule.evaluate([3, -1, 0])
    assert [(failure.index, failure.message) for failure in failures] == [
        (1, "-1 is not positive"),
        (2, "0 is not positive"),
    ]


def test_context_rule_sees_wrapper():
    """Context rules receive the wrapper as root."""
    rule = ElementRule()
    rule.create_rule().must_with_root(
        lambda wrapper, item: wrapper.is_first or item >= wrapper.previous,
        "items must be sorted",
    )
    failures = rule.evaluate([1, 3, 2, 4, 0])
    assert [failure.index for failure in failures] == [2, 4]
    assert failures[0].property_name == "element"
    assert failures[0].attempted_value == 2


def test_failure_order_is_element_major():
    """Failures are grouped by element, then by check registration order."""
    rule = ElementRule()
    rule.create_property_rule(lambda item: item).must(lambda item: item > 0, "positive")
    rule.create_rule().must(lambda item: item % 2 == 0, "even")
    failures = rule.evaluate([-1, 3, 2])
    assert [(failure.index, failure.message) for failure in failures] == [
        (0, "positive"),
        (0, "even"),
        (1, "even"),
    ]


def test_default_message_applies_to_rules_without_message(people):
    """The element rule message replaces default templates only."""
    rule = ElementRule()
    rule.create_property_rule("name").matches(r"^a")
    rule.create_property_rule("age").greater_than(40).with_message("too young")
    rule.set_error_message("invalid person")
    failures = rule.evaluate(people)
    assert [(failure.index, failure.message) for failure in failures] == [
        (0, "too young"),
        (1, "invalid person"),
        (2, "invalid person"),
        (2, "too young"),
    ]


def test_default_message_does_not_touch_rule_sets():
    """Rule sets report their own messages."""

    class NonEmpty(ElementValidator):
        def __init__(self):
            super().__init__()
            self.rule_for().not_empty()

    rule = ElementRule()
    rule.add_validator(NonEmpty())
    rule.set_error_message("invalid")
    assert [failure.message for failure in rule.evaluate([""])] == ["element must not be empty"]


def test_wrapper_accessors():
    """Wrapper exposes position and neighbours."""
    items = ["a", "b", "c"]
    first, middle, last = (ElementWrapper(item, index, items) for index, item in enumerate(items))
    assert first.is_first and not first.is_last
    assert first.previous is None
    assert first.next == "b"
    assert middle.previous == "a"
    assert middle.next == "c"
    assert last.is_last
    assert last.next is None


def test_wrapper_is_frozen():
    """Wrappers cannot be modified."""
    wrapper = ElementWrapper("a", 0, ["a"])
    with pytest.raises(AttributeError):
        wrapper.index = 1


def test_rule_set_errors_propagate():
    """Exceptions from rule sets are not converted into failures."""

    class Broken:
        def validate(self, instance):
            raise ValueError("broken rule set")

    rule = ElementRule()
    rule.add_validator(Broken())
    with pytest.raises(ValueError, match="broken rule set"):
        rule.evaluate([1])
