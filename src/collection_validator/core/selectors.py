"""
Property selectors.

A selector turns an element into a derived value. Selectors are used as uniqueness
keys and as the targets of per-property element rules. Two forms are accepted:

- a callable taking the element and returning the value
- a dotted path string such as ``"address.city"``, where each part is looked up as a
  mapping key when the current value is a mapping and as an attribute otherwise

Lookup errors (missing attributes or keys) are not caught here and propagate to the
caller unchanged.
"""

from collections.abc import Mapping
from typing import Any, Callable, Tuple, Union

from .exceptions import ConfigurationError

Selector = Union[str, Callable[[Any], Any]]


def _lookup(value: Any, part: str) -> Any:
    if isinstance(value, Mapping):
        return value[part]
    return getattr(value, part)


def path_getter(path: str) -> Callable[[Any], Any]:
    """Build a getter for a dotted attribute or mapping-key path."""
    parts = path.split(".")

    def getter(item: Any) -> Any:
        value = item
        for part in parts:
            value = _lookup(value, part)
        return value

    getter.__name__ = path
    return getter


def selector_name(selector: Selector) -> str:
    """
    Get a display name for a selector.

    Path strings are their own name. Named functions use their __name__; lambdas and
    other anonymous callables fall back to "value".
    """
    if isinstance(selector, str):
        return selector
    name = getattr(selector, "__name__", None)
    if not name or name == "<lambda>":
        return "value"
    return name


def resolve_selector(selector: Selector) -> Tuple[str, Callable[[Any], Any]]:
    """
    Resolve a selector into a (name, getter) pair.

    Args:
        selector: Dotted path string or callable

    Returns:
        Tuple[str, Callable[[Any], Any]]: Display name and value getter

    Raises:
        ConfigurationError: If the selector is neither a non-empty string nor callable
    """
    if isinstance(selector, str):
        if not selector.strip():
            raise ConfigurationError("selector path must be a non-empty string")
        return selector, path_getter(selector)
    if callable(selector):
        return selector_name(selector), selector
    raise ConfigurationError(f"Unsupported selector type: {type(selector).__name__}")
