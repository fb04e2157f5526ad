"""
Custom exceptions for the collection validation system.

This module defines the exceptions raised by the library. Ordinary validation
outcomes are never raised: rule violations are reported as failures inside a
ValidationResults instance. Exceptions are reserved for programmer errors made
while configuring a validator, and for callers that explicitly ask for an invalid
result to be raised.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .results import ValidationResults


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This is the base class for errors that report invalid data. It is only raised
    on request, for example by ValidationResults.raise_for_failures().
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class CollectionValidationError(ValidationError):
    """
    Raised when a validated collection is converted into an exception.

    The failing results are kept on the exception so handlers can report every
    failure rather than only the first one.

    Attributes:
        results (ValidationResults): The results that triggered the error
    """

    def __init__(self, results: "ValidationResults"):
        self.results = results
        count = len(results)
        noun = "failure" if count == 1 else "failures"
        summary = "; ".join(results.errors)
        super().__init__(f"collection has {count} {noun}: {summary}")


class ConfigurationError(Exception):
    """
    Raised when a validator is configured incorrectly.

    Configuration errors are programmer errors. They are raised immediately and
    are not meant to be recovered from at runtime.

    Examples:
        * Validating with no registered rules
        * Unsupported argument shapes for element validation
        * Setting a message on a rule builder before adding any rule
        * Selectors that are neither strings nor callables
    """
