"""
Validation result containers.

This module provides the two value types produced by every validation run:
- ValidationFailure: a single reported violation with its location
- ValidationResults: the ordered, immutable aggregate of failures

Example:
    >>> results = ValidationResults([ValidationFailure("Duplicate item", rule="unique", index=2)])
    >>> results.is_valid
    False
    >>> results.errors
    ['Duplicate item']
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .exceptions import CollectionValidationError


@dataclass(frozen=True)
class ValidationFailure:
    """
    A single validation failure.

    Attributes:
        message (str): Human readable description of the violation
        rule (str): Kind of rule that reported the failure
        index (Optional[int]): Position of the offending element, if any
        element (Any): The offending element, if any
        property_name (Optional[str]): Property or key basis that failed
        attempted_value (Any): The value that was checked
    """

    message: str
    rule: str = ""
    index: Optional[int] = None
    element: Any = None
    property_name: Optional[str] = None
    attempted_value: Any = None

    def __str__(self) -> str:
        location = ""
        if self.index is not None:
            location = f" at index {self.index}"
        prefix = f"[{self.rule}]" if self.rule else ""
        if prefix or location:
            return f"{prefix}{location}: {self.message}".lstrip()
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary. The element itself is rendered with repr()."""
        return {
            "message": self.message,
            "rule": self.rule,
            "index": self.index,
            "property_name": self.property_name,
            "element": None if self.element is None else repr(self.element),
        }


class ValidationResults:
    """
    Ordered, immutable collection of validation failures.

    A fresh instance is produced for every validation run. An empty instance
    means the collection is valid.

    Attributes:
        failures (Tuple[ValidationFailure, ...]): Failures in reporting order
    """

    __slots__ = ("_failures",)

    def __init__(self, failures: Iterable[ValidationFailure] = ()):
        self._failures: Tuple[ValidationFailure, ...] = tuple(failures)

    @property
    def failures(self) -> Tuple[ValidationFailure, ...]:
        return self._failures

    @property
    def is_valid(self) -> bool:
        """Whether no failures were reported."""
        return len(self._failures) == 0

    @property
    def errors(self) -> List[str]:
        """Failure messages in reporting order."""
        return [failure.message for failure in self._failures]

    def raise_for_failures(self) -> "ValidationResults":
        """
        Raise if any failure was reported.

        Returns:
            ValidationResults: self, when the results are valid

        Raises:
            CollectionValidationError: If the results contain failures
        """
        if not self.is_valid:
            raise CollectionValidationError(self)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "is_valid": self.is_valid,
            "failure_count": len(self._failures),
            "failures": [failure.to_dict() for failure in self._failures],
        }

    def __iter__(self) -> Iterator[ValidationFailure]:
        return iter(self._failures)

    def __len__(self) -> int:
        return len(self._failures)

    def __getitem__(self, index: int) -> ValidationFailure:
        return self._failures[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationResults):
            return NotImplemented
        return self._failures == other._failures

    def __repr__(self) -> str:
        return f"ValidationResults(is_valid={self.is_valid}, failures={list(self._failures)!r})"
