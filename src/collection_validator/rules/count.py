"""
Cardinality rule.

Checks a predicate against the number of items in a collection. The rule reports
at most one failure. An empty collection has count 0 and is checked like any
other count.
"""

from typing import List, Optional, Sequence

from ..core import constants
from ..core.results import ValidationFailure
from ..core.types import CountPredicate, T
from .base import CollectionRule


class CountRule(CollectionRule[T]):
    """
    Rule checking the size of a collection.

    Attributes:
        predicate (CountPredicate): Function returning True for an acceptable count
        error_message (Optional[str]): Custom message, used verbatim when set
        default_message (str): Template formatted with ``count`` and ``threshold``
        threshold (Optional[int]): Threshold shown in the default message
    """

    def __init__(
        self,
        predicate: CountPredicate,
        error_message: Optional[str] = None,
        default_message: str = constants.COUNT_CONDITION_MESSAGE,
        threshold: Optional[int] = None,
    ):
        self.predicate = predicate
        self.error_message = error_message
        self.default_message = default_message
        self.threshold = threshold

    @classmethod
    def greater_than(cls, threshold: int, error_message: Optional[str] = None) -> "CountRule[T]":
        return cls(
            lambda count: count > threshold,
            error_message,
            constants.COUNT_GREATER_THAN_MESSAGE,
            threshold,
        )

    @classmethod
    def less_than(cls, threshold: int, error_message: Optional[str] = None) -> "CountRule[T]":
        return cls(
            lambda count: count < threshold,
            error_message,
            constants.COUNT_LESS_THAN_MESSAGE,
            threshold,
        )

    @classmethod
    def greater_or_equal_to(
        cls, threshold: int, error_message: Optional[str] = None
    ) -> "CountRule[T]":
        return cls(
            lambda count: count >= threshold,
            error_message,
            constants.COUNT_GREATER_OR_EQUAL_MESSAGE,
            threshold,
        )

    @classmethod
    def less_or_equal_to(cls, threshold: int, error_message: Optional[str] = None) -> "CountRule[T]":
        return cls(
            lambda count: count <= threshold,
            error_message,
            constants.COUNT_LESS_OR_EQUAL_MESSAGE,
            threshold,
        )

    @classmethod
    def exactly_one(cls, error_message: Optional[str] = None) -> "CountRule[T]":
        return cls(lambda count: count == 1, error_message, constants.COUNT_SINGLE_MESSAGE, 1)

    @classmethod
    def satisfying(
        cls, predicate: CountPredicate, error_message: Optional[str] = None
    ) -> "CountRule[T]":
        return cls(predicate, error_message)

    def _message(self, count: int) -> str:
        if self.error_message is not None:
            return self.error_message
        return self.default_message.format(count=count, threshold=self.threshold)

    def evaluate(self, collection: Sequence[T]) -> List[ValidationFailure]:
        count = len(collection)
        if self.predicate(count):
            return []
        return [
            ValidationFailure(
                self._message(count),
                rule=constants.RuleKind.COUNT.value,
                attempted_value=count,
            )
        ]

    def __repr__(self) -> str:
        return f"CountRule(threshold={self.threshold!r})"
