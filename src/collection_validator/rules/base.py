"""
Base contract for collection rules.

A collection rule inspects a whole collection and reports zero or more failures.
Rules only hold configuration: evaluate() must not mutate or retain the
collection it receives, so one configured rule can be evaluated repeatedly and
from several threads.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Sequence

from ..core.results import ValidationFailure
from ..core.types import T


class CollectionRule(ABC, Generic[T]):
    """Base class for rules evaluated against a whole collection."""

    @property
    def name(self) -> str:
        """Rule name for identification."""
        return type(self).__name__

    @abstractmethod
    def evaluate(self, collection: Sequence[T]) -> List[ValidationFailure]:
        """
        Evaluate the rule.

        Args:
            collection: Snapshot of the collection being validated

        Returns:
            List[ValidationFailure]: Failures in the rule's own reporting order
        """
        pass
