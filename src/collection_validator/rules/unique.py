"""
Uniqueness rule.

Detects duplicate items in a collection. Items are compared either by full value
equality or by a tuple of keys produced by one or more selectors.

Every occurrence after the first in a group of equal keys is reported, so a key
seen n times yields n - 1 failures. Failures follow collection order.
"""

from typing import Any, Callable, Hashable, List, Optional, Sequence, Set, Tuple

from ..core import constants
from ..core.results import ValidationFailure
from ..core.selectors import Selector, resolve_selector
from ..core.types import T
from .base import CollectionRule


class _SeenKeys:
    """Set of keys that also accepts unhashable keys."""

    def __init__(self) -> None:
        self._hashable: Set[Hashable] = set()
        self._unhashable: List[Any] = []

    def add(self, key: Any) -> bool:
        """Record a key. Returns True if an equal key was already recorded."""
        try:
            if key in self._hashable:
                return True
            self._hashable.add(key)
            return False
        except TypeError:
            # Unhashable keys are compared by equality
            if key in self._unhashable:
                return True
            self._unhashable.append(key)
            return False


class UniqueRule(CollectionRule[T]):
    """
    Rule reporting duplicate items.

    Attributes:
        key_names (Tuple[str, ...]): Names of the key selectors, empty for full equality
        error_message (Optional[str]): Custom message, used verbatim when set
    """

    def __init__(self, *key_selectors: Selector, error_message: Optional[str] = None):
        """
        Initialize a uniqueness rule.

        Args:
            *key_selectors: Selectors producing the uniqueness key. With none, items
                are compared by full value equality.
            error_message: Custom failure message
        """
        resolved = [resolve_selector(selector) for selector in key_selectors]
        self.key_names: Tuple[str, ...] = tuple(name for name, _ in resolved)
        self._getters: Tuple[Callable[[Any], Any], ...] = tuple(getter for _, getter in resolved)
        self.error_message = error_message

    def _key(self, item: T) -> Any:
        if not self._getters:
            return item
        return tuple(getter(item) for getter in self._getters)

    def _message(self, index: int) -> str:
        if self.error_message is not None:
            return self.error_message
        if not self.key_names:
            return constants.UNIQUE_ITEMS_MESSAGE.format(index=index)
        return constants.UNIQUE_KEYS_MESSAGE.format(index=index, keys=", ".join(self.key_names))

    def evaluate(self, collection: Sequence[T]) -> List[ValidationFailure]:
        seen = _SeenKeys()
        property_name = ", ".join(self.key_names) or None
        failures = []
        for index, item in enumerate(collection):
            key = self._key(item)
            if seen.add(key):
                failures.append(
                    ValidationFailure(
                        self._message(index),
                        rule=constants.RuleKind.UNIQUE.value,
                        index=index,
                        element=item,
                        property_name=property_name,
                        attempted_value=key,
                    )
                )
        return failures

    def __repr__(self) -> str:
        return f"UniqueRule(keys={list(self.key_names)!r})"
