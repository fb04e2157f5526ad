"""
Collection Validator - Composable validation for homogeneous collections

This package validates collections of items of one type. A CollectionValidator
combines structural rules over the whole collection with per-element rules:

- Uniqueness of items, by full value or by derived keys
- Cardinality checks on the number of items
- Per-element rule sets, property rule chains and index-aware rules
- JSON schema validation of individual elements

All rules run against the same collection and their failures are merged, in
registration order, into a single ValidationResults.
"""

__version__ = "0.1.0"
__author__ = "Collection Validator Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("collection_validator requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.exceptions import CollectionValidationError, ConfigurationError, ValidationError
from .core.results import ValidationFailure, ValidationResults
from .core.validator import CollectionValidator
from .rules import CollectionRule, CountRule, ElementRule, ElementWrapper, UniqueRule
from .utils.validation import ElementValidator, RuleBuilder, SchemaValidator

__all__ = [
    "CollectionValidator",
    "CollectionRule",
    "UniqueRule",
    "CountRule",
    "ElementRule",
    "ElementWrapper",
    "ElementValidator",
    "RuleBuilder",
    "SchemaValidator",
    "ValidationFailure",
    "ValidationResults",
    "ValidationError",
    "CollectionValidationError",
    "ConfigurationError",
]
