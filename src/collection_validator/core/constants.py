"""
Constants for collection validation.

This module defines:
- Rule kind names stamped on every reported failure
- Default message templates for structural and element rules
- The configuration error message raised by an unconfigured validator

Templates are formatted with ``str.format``. Custom messages supplied by callers
are used verbatim and never formatted.
"""

from enum import Enum


class RuleKind(str, Enum):
    """Kind of rule that produced a failure."""

    UNIQUE = "unique"
    COUNT = "count"
    ELEMENT = "element"


# Uniqueness rule templates
UNIQUE_ITEMS_MESSAGE = "Duplicate item at index {index}: items must be unique"
UNIQUE_KEYS_MESSAGE = "Duplicate item at index {index}: {keys} must be unique"

# Cardinality rule templates
COUNT_GREATER_THAN_MESSAGE = "Collection count {count} is not greater than {threshold}"
COUNT_LESS_THAN_MESSAGE = "Collection count {count} is not less than {threshold}"
COUNT_GREATER_OR_EQUAL_MESSAGE = (
    "Collection count {count} is not greater than or equal to {threshold}"
)
COUNT_LESS_OR_EQUAL_MESSAGE = "Collection count {count} is not less than or equal to {threshold}"
COUNT_SINGLE_MESSAGE = "Collection must contain exactly one element, found {count}"
COUNT_CONDITION_MESSAGE = "Collection count {count} does not satisfy the count condition"

# Element rule templates, formatted with the property name and offending value
REQUIRED_MESSAGE = "{property} must not be empty"
NOT_NONE_MESSAGE = "{property} must not be None"
TYPE_MESSAGE = "{property} must be of type {expected}"
RANGE_MESSAGE = "{property} value {value!r} is outside the allowed range"
REGEX_MESSAGE = "{property} value {value!r} does not match pattern {pattern}"
CUSTOM_MESSAGE = "{property} does not satisfy the specified condition"
DATACLASS_MESSAGE = "{property} is not a valid {expected}"
SCHEMA_MESSAGE = "Schema validation failed: {reason}"

# Property name used when a rule targets the element itself
ELEMENT_PROPERTY_NAME = "element"

NOT_CONFIGURED_MESSAGE = "Collection validator not configured."
