"""
Element rule.

Applies per-element checks to every item of a collection. Three kinds of check
can be attached:

- a rule set that validates a whole element (anything with ``validate(instance)``)
- a property rule chain built against a value selected from the element
- a context rule chain built against an ElementWrapper, for checks that need the
  element's index or its siblings

Failures are reported element by element and, within one element, in check
registration order. Each failure is stamped with the element and its index.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Generic, List, Optional, Sequence, Tuple, Union

from ..core import constants
from ..core.results import ValidationFailure
from ..core.selectors import Selector
from ..core.types import ElementRuleSet, T
from ..utils.validation.builder import RuleBuilder
from .base import CollectionRule


@dataclass(frozen=True)
class ElementWrapper(Generic[T]):
    """
    An element together with its position in the collection.

    Attributes:
        element: The element being validated
        index (int): Position of the element
        collection (Sequence): The whole collection, read-only
    """

    element: T
    index: int
    collection: Sequence[T] = field(repr=False, compare=False)

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == len(self.collection) - 1

    @property
    def previous(self) -> Optional[T]:
        """The preceding element, or None for the first element."""
        return None if self.is_first else self.collection[self.index - 1]

    @property
    def next(self) -> Optional[T]:
        """The following element, or None for the last element."""
        return None if self.is_last else self.collection[self.index + 1]


def _wrapped_element(wrapper: ElementWrapper) -> Any:
    return wrapper.element


class _CheckKind(Enum):
    RULE_SET = "rule_set"
    PROPERTY = "property"
    CONTEXT = "context"


Check = Tuple[_CheckKind, Union[ElementRuleSet, RuleBuilder]]


class ElementRule(CollectionRule[T]):
    """
    Rule delegating each element to single-element checks.

    With no checks attached the rule reports nothing.

    Attributes:
        error_message (Optional[str]): Message for failing property and context
            rules that have no custom message of their own
    """

    def __init__(self) -> None:
        self._checks: List[Check] = []
        self.error_message: Optional[str] = None

    @property
    def check_count(self) -> int:
        return len(self._checks)

    def add_validator(self, validator: ElementRuleSet) -> None:
        """Attach a rule set validating whole elements."""
        self._checks.append((_CheckKind.RULE_SET, validator))

    def create_property_rule(
        self, selector: Selector, name: Optional[str] = None
    ) -> RuleBuilder[T]:
        """Attach and return a rule chain for a property of each element."""
        builder: RuleBuilder[T] = RuleBuilder(selector, name)
        self._checks.append((_CheckKind.PROPERTY, builder))
        return builder

    def create_rule(self) -> RuleBuilder[ElementWrapper[T]]:
        """
        Attach and return a rule chain with collection context.

        The chain validates the element itself. Predicates added with
        must_with_root() receive the ElementWrapper as their root.
        """
        builder: RuleBuilder[ElementWrapper[T]] = RuleBuilder(
            _wrapped_element, constants.ELEMENT_PROPERTY_NAME
        )
        self._checks.append((_CheckKind.CONTEXT, builder))
        return builder

    def set_error_message(self, message: Optional[str]) -> None:
        self.error_message = message

    def _failures_for(
        self, item: T, index: int, collection: Sequence[T]
    ) -> List[ValidationFailure]:
        failures: List[ValidationFailure] = []
        wrapper = None
        for kind, check in self._checks:
            if kind is _CheckKind.RULE_SET:
                failures.extend(check.validate(item))
            elif kind is _CheckKind.PROPERTY:
                failures.extend(check.evaluate(item, self.error_message))
            else:
                if wrapper is None:
                    wrapper = ElementWrapper(item, index, collection)
                failures.extend(check.evaluate(wrapper, self.error_message))
        return failures

    def evaluate(self, collection: Sequence[T]) -> List[ValidationFailure]:
        if not self._checks:
            return []
        failures = []
        for index, item in enumerate(collection):
            for failure in self._failures_for(item, index, collection):
                failures.append(
                    replace(
                        failure,
                        rule=constants.RuleKind.ELEMENT.value,
                        index=index,
                        element=item,
                    )
                )
        return failures

    def __repr__(self) -> str:
        return f"ElementRule(checks={len(self._checks)})"
