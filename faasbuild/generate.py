"""Helpers for generating function resource definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class EnvPair:
    """A single environment variable of a container spec."""

    name: str
    value: str


def _item_name(item: Any) -> str:
    if isinstance(item, Mapping):
        return str(item.get("name", ""))
    return str(getattr(item, "name", ""))


def filter_store_item(items: Iterable[T], from_store: str) -> T:
    """Return the first store item whose name equals ``from_store``.

    Items may be mappings with a ``name`` key or objects with a ``name``
    attribute. Raises LookupError when no item matches.
    """
    for item in items:
        if _item_name(item) == from_store:
            return item
    raise LookupError(f"unable to find '{from_store}' in store")


def generate_function_order(functions: Mapping[str, Any]) -> List[str]:
    """Return the function names in sorted order."""
    return sorted(functions)


def order_knative_env(environment: Mapping[str, str]) -> List[EnvPair]:
    """Return the environment as name/value pairs sorted by name."""
    return [EnvPair(name=key, value=environment[key]) for key in sorted(environment)]