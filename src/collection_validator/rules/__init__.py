"""Collection rules: uniqueness, cardinality and per-element validation."""

from .base import CollectionRule
from .unique import UniqueRule
from .count import CountRule
from .element import ElementRule, ElementWrapper

__all__ = [
    "CollectionRule",
    "UniqueRule",
    "CountRule",
    "ElementRule",
    "ElementWrapper",
]
