"""
Rule sets for single elements.

ElementValidator groups property rule chains into a reusable rule set for one
element type. Rule sets are declared by subclassing and calling rule_for() in
__init__, or by building an instance directly.

Example:
    >>> class PersonValidator(ElementValidator):
    ...     def __init__(self):
    ...         super().__init__()
    ...         self.rule_for("name").not_empty()
    ...         self.rule_for("age").is_instance(int).in_range(0, 150)
    >>> PersonValidator().validate({"name": "", "age": 200}).errors
    ['name must not be empty', 'age value 200 is outside the allowed range']
"""

from typing import Generic, List, Optional, Union

from ...core.results import ValidationFailure, ValidationResults
from ...core.selectors import Selector
from ...core.types import ElementRuleSet, T
from .builder import RuleBuilder


class ElementValidator(Generic[T]):
    """
    A rule set validating single elements of one type.

    Checks run in registration order. A check is either a RuleBuilder created by
    rule_for() or another rule set added with include().
    """

    def __init__(self) -> None:
        self._checks: List[Union[RuleBuilder[T], ElementRuleSet]] = []

    def rule_for(self, selector: Optional[Selector] = None, name: Optional[str] = None) -> RuleBuilder[T]:
        """
        Start a rule chain for a property.

        Args:
            selector: Path string or callable selecting the property. None targets
                the element itself.
            name: Display name for messages

        Returns:
            RuleBuilder: The new chain, already registered with this rule set
        """
        builder: RuleBuilder[T] = RuleBuilder(selector, name)
        self._checks.append(builder)
        return builder

    def include(self, rule_set: ElementRuleSet) -> "ElementValidator[T]":
        """Run another rule set's checks as part of this one."""
        self._checks.append(rule_set)
        return self

    def failures_for(self, instance: T, default_message: Optional[str] = None) -> List[ValidationFailure]:
        """
        Collect the failures of every check against one instance.

        default_message replaces the default templates of rules without a custom
        message. Included rule sets report their own messages unchanged.
        """
        failures: List[ValidationFailure] = []
        for check in self._checks:
            if isinstance(check, RuleBuilder):
                failures.extend(check.evaluate(instance, default_message))
            else:
                failures.extend(check.validate(instance))
        return failures

    def validate(self, instance: T) -> ValidationResults:
        """Validate one instance against the rule set."""
        return ValidationResults(self.failures_for(instance))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(checks={len(self._checks)})"
