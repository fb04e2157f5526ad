"""
Collection validator.

CollectionValidator is the entry point of the library. It holds an ordered list of
collection rules, offers a fluent configuration surface for adding them, and
evaluates all of them against a collection.

Every validator starts with one Element Rule, which stays a no-op until element
checks are configured. Structural rules are appended in call order. Validation
runs every rule against the same snapshot of the collection and concatenates
their failures in registration order, without short-circuiting.

Example:
    >>> validator = (
    ...     CollectionValidator()
    ...     .unique("id")
    ...     .count_greater_than(0)
    ...     .element_validation("name", lambda rule: rule.not_empty())
    ... )
    >>> results = validator.validate([{"id": 1, "name": "a"}, {"id": 1, "name": ""}])
    >>> results.errors
    ['name must not be empty', 'Duplicate item at index 1: id must be unique']
"""

import logging
from collections.abc import Sequence as SequenceABC
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..rules.base import CollectionRule
from ..rules.count import CountRule
from ..rules.element import ElementRule, ElementWrapper
from ..rules.unique import UniqueRule
from ..utils.validation.builder import RuleBuilder
from . import constants
from .exceptions import ConfigurationError
from .results import ValidationFailure, ValidationResults
from .selectors import Selector
from .types import CountPredicate, ElementRuleSet, T

logger = logging.getLogger(__name__)


class CollectionValidator(CollectionRule[T]):
    """
    Fluent validator for homogeneous collections.

    All configuration methods mutate the validator and return the same instance.
    A configured validator is reusable: validate() may be called any number of
    times, and from several threads once configuration is finished.

    A CollectionValidator is itself a collection rule, so it can be attached to
    another validator with add_rule().
    """

    def __init__(self) -> None:
        self._element_rule: ElementRule[T] = ElementRule()
        self._rules: List[CollectionRule[T]] = [self._element_rule]

    @property
    def rules(self) -> Tuple[CollectionRule[T], ...]:
        """Registered rules in evaluation order."""
        return tuple(self._rules)

    def add_rule(self, rule: CollectionRule[T]) -> "CollectionValidator[T]":
        """Append a rule of any kind."""
        self._rules.append(rule)
        return self

    def unique(self, *key_selectors: Selector, message: Optional[str] = None) -> "CollectionValidator[T]":
        """
        Require items to be unique.

        Args:
            *key_selectors: Selectors forming the uniqueness key. With none, items
                are compared by full value equality.
            message: Custom failure message

        Returns:
            CollectionValidator: self
        """
        return self.add_rule(UniqueRule(*key_selectors, error_message=message))

    def count_greater_than(self, count: int, message: Optional[str] = None) -> "CollectionValidator[T]":
        return self.add_rule(CountRule.greater_than(count, message))

    def count_less_than(self, count: int, message: Optional[str] = None) -> "CollectionValidator[T]":
        return self.add_rule(CountRule.less_than(count, message))

    def count_greater_or_equal_to(
        self, count: int, message: Optional[str] = None
    ) -> "CollectionValidator[T]":
        return self.add_rule(CountRule.greater_or_equal_to(count, message))

    def count_less_or_equal_to(
        self, count: int, message: Optional[str] = None
    ) -> "CollectionValidator[T]":
        return self.add_rule(CountRule.less_or_equal_to(count, message))

    def count_condition(
        self, condition: CountPredicate, message: Optional[str] = None
    ) -> "CollectionValidator[T]":
        """Require condition(count) to be truthy."""
        return self.add_rule(CountRule.satisfying(condition, message))

    def single(self, message: Optional[str] = None) -> "CollectionValidator[T]":
        """Require exactly one item."""
        return self.add_rule(CountRule.exactly_one(message))

    def element_validation(self, *args) -> "CollectionValidator[T]":
        """
        Configure per-element checks on the shared Element Rule.

        Three forms are accepted:

        - ``element_validation(rule_set)``: validate whole elements with an object
          exposing ``validate(instance)``, such as an ElementValidator
        - ``element_validation(selector, build)``: call ``build`` with a RuleBuilder
          for the selected property of each element
        - ``element_validation(build)``: call ``build`` with a RuleBuilder whose root
          is an ElementWrapper, giving access to the index and the collection

        Returns:
            CollectionValidator: self

        Raises:
            ConfigurationError: If the arguments match none of the forms
        """
        if len(args) == 1 and isinstance(args[0], type):
            raise ConfigurationError(
                f"element_validation() expects a rule set instance, got class {args[0].__name__}"
            )
        elif len(args) == 1 and isinstance(args[0], ElementRuleSet):
            self._element_rule.add_validator(args[0])
        elif len(args) == 1 and callable(args[0]):
            build: Callable[[RuleBuilder[ElementWrapper[T]]], object] = args[0]
            build(self._element_rule.create_rule())
        elif len(args) == 2 and callable(args[1]):
            selector, build_property = args
            build_property(self._element_rule.create_property_rule(selector))
        else:
            raise ConfigurationError(
                "element_validation() expects a rule set, a rule callback, "
                "or a selector and a rule callback"
            )
        return self

    def element_validation_message(self, message: Optional[str]) -> "CollectionValidator[T]":
        """Set the message used by element rules without a custom message."""
        self._element_rule.set_error_message(message)
        return self

    def evaluate(self, collection: Sequence[T]) -> List[ValidationFailure]:
        if not self._rules:
            raise ConfigurationError(constants.NOT_CONFIGURED_MESSAGE)
        failures: List[ValidationFailure] = []
        logger.debug(f"Evaluating {len(self._rules)} rules against {len(collection)} items")
        for rule in self._rules:
            produced = rule.evaluate(collection)
            logger.debug(f"Rule {rule.name} reported {len(produced)} failures")
            failures.extend(produced)
        return failures

    def validate(self, collection: Iterable[T]) -> ValidationResults:
        """
        Validate a collection against every registered rule.

        Iterables that are not sequences are read once into a list, so every rule
        sees the same items.

        Args:
            collection: Items to validate

        Returns:
            ValidationResults: All failures in rule registration order

        Raises:
            ConfigurationError: If no rules are registered
        """
        snapshot = collection if isinstance(collection, SequenceABC) else list(collection)
        return ValidationResults(self.evaluate(snapshot))

    def __repr__(self) -> str:
        return f"CollectionValidator(rules={self._rules!r})"
