"""
Core type definitions and protocols.

This module provides the type variables, aliases and protocols shared by the
collection rules and the single-element validation engine.
"""

from typing import Any, Callable, Iterable, Protocol, TypeVar, Union, runtime_checkable

from .results import ValidationFailure, ValidationResults

T = TypeVar("T")

CountPredicate = Callable[[int], bool]


@runtime_checkable
class ElementRuleSet(Protocol):
    """Protocol for objects that validate a single element."""

    def validate(self, instance: Any) -> Union[ValidationResults, Iterable[ValidationFailure]]:
        """Validate one element and report its failures."""
        ...
