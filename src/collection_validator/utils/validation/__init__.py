"""
Single-element validation engine.

This package validates one element at a time. It provides primitive rules,
fluent property rule chains, reusable rule sets, and a JSON schema rule set.
Collection rules delegate per-element checks to it.
"""

from .base import (
    ValidationRule,
    RequiredRule,
    NotNoneRule,
    TypeRule,
    RangeRule,
    RegexRule,
    CustomRule,
    RootCustomRule,
    DataclassRule,
)
from .builder import RuleBuilder
from .validator import ElementValidator
from .schema import SchemaValidator

__all__ = [
    "ValidationRule",
    "RequiredRule",
    "NotNoneRule",
    "TypeRule",
    "RangeRule",
    "RegexRule",
    "CustomRule",
    "RootCustomRule",
    "DataclassRule",
    "RuleBuilder",
    "ElementValidator",
    "SchemaValidator",
]
