"""Core collection validation functionality."""

from .constants import RuleKind
from .exceptions import CollectionValidationError, ConfigurationError, ValidationError
from .results import ValidationFailure, ValidationResults
from .selectors import Selector, resolve_selector
from .types import ElementRuleSet
from .validator import CollectionValidator

__all__ = [
    "CollectionValidationError",
    "CollectionValidator",
    "ConfigurationError",
    "ElementRuleSet",
    "RuleKind",
    "Selector",
    "ValidationError",
    "ValidationFailure",
    "ValidationResults",
    "resolve_selector",
]
