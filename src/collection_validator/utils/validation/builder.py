"""
Fluent rule chains for a single property.

A RuleBuilder targets one value selected from a root object and collects the
primitive rules that value must satisfy. Chained calls append rules in order;
with_message() customizes the most recently added rule.

Example:
    >>> builder = RuleBuilder("name")
    >>> _ = builder.not_empty().matches(r"^[a-z]+$").with_message("name must be lowercase")
    >>> [f.message for f in builder.evaluate({"name": "Bob"})]
    ['name must be lowercase']
"""

from typing import Any, Callable, Generic, List, Optional, Tuple, Type, TypeVar, Union

from ...core import constants
from ...core.exceptions import ConfigurationError
from ...core.results import ValidationFailure
from ...core.selectors import Selector, resolve_selector
from .base import (
    CustomRule,
    DataclassRule,
    NotNoneRule,
    RangeRule,
    RegexRule,
    RequiredRule,
    RootCustomRule,
    TypeRule,
    ValidationRule,
)

R = TypeVar("R")


def _identity(value: Any) -> Any:
    return value


class RuleBuilder(Generic[R]):
    """
    Collects the rules for one property of a root object.

    Attributes:
        property_name (str): Name used in default messages and failures
        rules (Tuple[ValidationRule, ...]): Rules in evaluation order
    """

    def __init__(self, selector: Optional[Selector] = None, name: Optional[str] = None):
        """
        Initialize a rule builder.

        Args:
            selector: Selector producing the validated value from the root object.
                None validates the root object itself.
            name: Display name overriding the selector's own name
        """
        if selector is None:
            selected_name, getter = constants.ELEMENT_PROPERTY_NAME, _identity
        else:
            selected_name, getter = resolve_selector(selector)
        self.property_name = name or selected_name
        self._getter: Callable[[Any], Any] = getter
        self._rules: List[ValidationRule] = []

    @property
    def rules(self) -> Tuple[ValidationRule, ...]:
        return tuple(self._rules)

    def add_rule(self, rule: ValidationRule) -> "RuleBuilder[R]":
        """Append a rule to the chain."""
        self._rules.append(rule)
        return self

    def not_empty(self, message: Optional[str] = None) -> "RuleBuilder[R]":
        return self.add_rule(RequiredRule(message))

    def not_none(self, message: Optional[str] = None) -> "RuleBuilder[R]":
        return self.add_rule(NotNoneRule(message))

    def is_instance(
        self, expected_type: Union[Type, Tuple[Type, ...]], message: Optional[str] = None
    ) -> "RuleBuilder[R]":
        return self.add_rule(TypeRule(expected_type, message))

    def in_range(
        self, min_value: Any = None, max_value: Any = None, message: Optional[str] = None
    ) -> "RuleBuilder[R]":
        """Require min_value <= value <= max_value. Either bound may be None."""
        return self.add_rule(RangeRule(min_value, max_value, message))

    def greater_than(self, bound: Any, message: Optional[str] = None) -> "RuleBuilder[R]":
        return self.add_rule(RangeRule(min_value=bound, error_message=message, exclusive=True))

    def less_than(self, bound: Any, message: Optional[str] = None) -> "RuleBuilder[R]":
        return self.add_rule(RangeRule(max_value=bound, error_message=message, exclusive=True))

    def matches(self, pattern: str, message: Optional[str] = None) -> "RuleBuilder[R]":
        return self.add_rule(RegexRule(pattern, message))

    def must(self, predicate: Callable[[Any], bool], message: Optional[str] = None) -> "RuleBuilder[R]":
        """Require predicate(value) to be truthy."""
        return self.add_rule(CustomRule(predicate, message))

    def must_with_root(
        self, predicate: Callable[[R, Any], bool], message: Optional[str] = None
    ) -> "RuleBuilder[R]":
        """Require predicate(root, value) to be truthy."""
        return self.add_rule(RootCustomRule(predicate, message))

    def conforms_to(self, dataclass_type: Type, message: Optional[str] = None) -> "RuleBuilder[R]":
        """Require the value to be a dataclass instance whose fields match their type hints."""
        return self.add_rule(DataclassRule(dataclass_type, message))

    def with_message(self, message: str) -> "RuleBuilder[R]":
        """
        Set the message of the most recently added rule.

        Raises:
            ConfigurationError: If no rule has been added yet
        """
        if not self._rules:
            raise ConfigurationError(
                f"with_message() called before any rule for '{self.property_name}'"
            )
        self._rules[-1].error_message = message
        return self

    def evaluate(self, root: R, default_message: Optional[str] = None) -> List[ValidationFailure]:
        """
        Run every rule against the value selected from root.

        Args:
            root: Object the value is selected from
            default_message: Message for failing rules without a custom message.
                When None, each rule's default template is used.

        Returns:
            List[ValidationFailure]: One failure per failing rule, in chain order
        """
        value = self._getter(root)
        failures = []
        for rule in self._rules:
            if rule.check(root, value):
                continue
            if rule.error_message is None and default_message is not None:
                message = default_message
            else:
                message = rule.message_for(self.property_name, value)
            failures.append(
                ValidationFailure(
                    message,
                    rule=constants.RuleKind.ELEMENT.value,
                    property_name=self.property_name,
                    attempted_value=value,
                )
            )
        return failures

    def __repr__(self) -> str:
        return f"RuleBuilder(property_name={self.property_name!r}, rules={self._rules!r})"
