"""
Base Validation Rules for single elements

This module provides the primitive rules used by the single-element validation
engine. Each rule answers one question about one value and knows how to describe
its own failure. Rules are combined into property chains by RuleBuilder and into
rule sets by ElementValidator.

The module implements:
- Required value validation (not None, not blank, not an empty container)
- None checks
- Type checking
- Numeric range validation
- Regular expression pattern matching
- Custom predicate functions, with or without access to the root object
- Dataclass field type validation

Every rule keeps an optional custom error message. When no custom message is
set the rule formats its default template with the property name and value.
"""

import re
import types
from collections.abc import Sized
from dataclasses import is_dataclass
from datetime import datetime
from typing import (
    Any,
    Callable,
    Optional,
    Tuple,
    Type,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from ...core import constants

# Origins of Optional, Union and PEP 604 unions such as ``str | None``
_UNION_ORIGINS = (Union, types.UnionType) if hasattr(types, "UnionType") else (Union,)


class ValidationRule:
    """
    Base class for all single-value validation rules.

    Subclasses override validate() to implement their check and set
    default_message to the template used when no custom message is given.

    Attributes:
        error_message (Optional[str]): Custom message, used verbatim when set
        default_message (str): Template formatted with ``property`` and ``value``
    """

    default_message = constants.CUSTOM_MESSAGE

    def __init__(self, error_message: Optional[str] = None):
        """
        Initialize a validation rule.

        Args:
            error_message: Custom message to report when validation fails
        """
        self.error_message = error_message

    def validate(self, value: Any) -> bool:
        """
        Validate a value against the rule.

        Args:
            value: Value to validate

        Returns:
            bool: True if validation passes, False otherwise

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Validation rules must implement validate()")

    def check(self, root: Any, value: Any) -> bool:
        """
        Validate a value that was selected from a root object.

        Rules that only look at the value ignore the root.
        """
        return self.validate(value)

    def template_values(self) -> dict:
        """Extra placeholders available to the default message template."""
        return {}

    def message_for(self, property_name: str, value: Any) -> str:
        """Build the failure message for a value."""
        if self.error_message is not None:
            return self.error_message
        return self.default_message.format(
            property=property_name, value=value, **self.template_values()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RequiredRule(ValidationRule):
    """
    Rule for validating required values.

    A value passes when it is not None, is not a blank string, and is not an
    empty container.
    """

    default_message = constants.REQUIRED_MESSAGE

    def validate(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        if isinstance(value, Sized):
            return len(value) > 0
        return True


class NotNoneRule(ValidationRule):
    """Rule rejecting None."""

    default_message = constants.NOT_NONE_MESSAGE

    def validate(self, value: Any) -> bool:
        return value is not None


class TypeRule(ValidationRule):
    """
    Rule for type checking values.

    Attributes:
        expected_type: Single type or tuple of types to check against
    """

    default_message = constants.TYPE_MESSAGE

    def __init__(
        self,
        expected_type: Union[Type, Tuple[Type, ...]],
        error_message: Optional[str] = None,
    ):
        super().__init__(error_message)
        self.expected_type = expected_type

    def validate(self, value: Any) -> bool:
        return isinstance(value, self.expected_type)

    def template_values(self) -> dict:
        if isinstance(self.expected_type, tuple):
            expected = " or ".join(t.__name__ for t in self.expected_type)
        else:
            expected = self.expected_type.__name__
        return {"expected": expected}


class RangeRule(ValidationRule):
    """
    Rule for validating ordered values against bounds.

    Either bound may be None to leave that side open. Bounds are inclusive
    unless ``exclusive`` is set, in which case both are strict.

    Attributes:
        min_value: Lower bound, or None for no minimum
        max_value: Upper bound, or None for no maximum
        exclusive (bool): Whether the bounds are strict
    """

    default_message = constants.RANGE_MESSAGE

    def __init__(
        self,
        min_value: Any = None,
        max_value: Any = None,
        error_message: Optional[str] = None,
        exclusive: bool = False,
    ):
        super().__init__(error_message)
        self.min_value = min_value
        self.max_value = max_value
        self.exclusive = exclusive

    def validate(self, value: Any) -> bool:
        if value is None:
            return False
        try:
            if self.min_value is not None:
                if value < self.min_value or (self.exclusive and value == self.min_value):
                    return False
            if self.max_value is not None:
                if value > self.max_value or (self.exclusive and value == self.max_value):
                    return False
        except TypeError:
            # Values that cannot be ordered against the bounds are out of range
            return False
        return True


class RegexRule(ValidationRule):
    """
    Rule for regex pattern matching.

    The pattern must match at the start of the string form of the value.

    Attributes:
        pattern: Compiled regular expression pattern
    """

    default_message = constants.REGEX_MESSAGE

    def __init__(self, pattern: str, error_message: Optional[str] = None):
        super().__init__(error_message)
        self.pattern = re.compile(pattern)

    def validate(self, value: Any) -> bool:
        if value is None:
            return False
        return bool(self.pattern.match(str(value)))

    def template_values(self) -> dict:
        return {"pattern": self.pattern.pattern}


class CustomRule(ValidationRule):
    """
    Rule for custom validation functions.

    Attributes:
        validator_func: Function that takes a value and returns True if valid
    """

    def __init__(self, validator_func: Callable[[Any], bool], error_message: Optional[str] = None):
        super().__init__(error_message)
        self.validator_func = validator_func

    def validate(self, value: Any) -> bool:
        return bool(self.validator_func(value))


class RootCustomRule(ValidationRule):
    """
    Rule for custom functions that also need the root object.

    The function receives the object the value was selected from and the value
    itself. For collection context rules the root is an ElementWrapper, which
    exposes the element's index and the whole collection.

    Attributes:
        validator_func: Function taking (root, value) and returning True if valid
    """

    def __init__(
        self, validator_func: Callable[[Any, Any], bool], error_message: Optional[str] = None
    ):
        super().__init__(error_message)
        self.validator_func = validator_func

    def validate(self, value: Any) -> bool:
        return bool(self.validator_func(None, value))

    def check(self, root: Any, value: Any) -> bool:
        return bool(self.validator_func(root, value))


class DataclassRule(ValidationRule):
    """
    Rule for validating dataclass instances.

    A value passes when it is an instance of the dataclass type and each field
    matches its type hint. Lists, dicts, tuples, Optional and Union hints are
    checked structurally; other generic hints only check their origin type.

    Attributes:
        dataclass_type: The dataclass type to validate against
        type_hints: Resolved field type hints
    """

    default_message = constants.DATACLASS_MESSAGE

    def __init__(self, dataclass_type: Type, error_message: Optional[str] = None):
        if not is_dataclass(dataclass_type):
            raise TypeError(f"{dataclass_type!r} is not a dataclass")
        super().__init__(error_message)
        self.dataclass_type = dataclass_type
        self.type_hints = get_type_hints(dataclass_type)

    def _matches(self, value: Any, expected_type: Any) -> bool:
        """Check a value against a type hint."""
        if expected_type is Any:
            return True

        origin = get_origin(expected_type)
        args = get_args(expected_type)

        if origin in _UNION_ORIGINS:
            return any(self._matches(value, arg) for arg in args)
        if expected_type is type(None):
            return value is None
        if value is None:
            return False
        if expected_type is datetime:
            return isinstance(value, datetime)

        if origin is list:
            if not isinstance(value, list):
                return False
            return not args or all(self._matches(item, args[0]) for item in value)
        if origin is dict:
            if not isinstance(value, dict):
                return False
            if len(args) != 2:
                return True
            key_type, val_type = args
            return all(
                self._matches(k, key_type) and self._matches(v, val_type)
                for k, v in value.items()
            )
        if origin is tuple:
            if not isinstance(value, tuple):
                return False
            if not args:
                return True
            if len(args) == 2 and args[1] is Ellipsis:
                return all(self._matches(item, args[0]) for item in value)
            if len(args) != len(value):
                return False
            return all(self._matches(item, arg) for item, arg in zip(value, args))

        target = origin if origin is not None else expected_type
        try:
            return isinstance(value, target)
        except TypeError:
            # Special forms that isinstance cannot handle are accepted
            return True

    def validate(self, value: Any) -> bool:
        if not isinstance(value, self.dataclass_type):
            return False
        return all(
            self._matches(getattr(value, name), hint) for name, hint in self.type_hints.items()
        )

    def template_values(self) -> dict:
        return {"expected": self.dataclass_type.__name__}
