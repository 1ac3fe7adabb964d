"""Predicates and finders for lists, tuples and mappings.

A mapping is *sequential* when its keys are exactly ``0 .. n-1`` in order,
which is how a plain list looks when viewed as a mapping. Everything else
with keys is *associative*.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import asdict, is_dataclass
from typing import Any, TypeVar

from assegai_util.errors import ArgumentError

T = TypeVar("T")

Items = Sequence[Any] | Mapping[Any, Any]


def _values(argument: str, items: object) -> list[Any]:
    if isinstance(items, Mapping):
        return list(items.values())
    if isinstance(items, Sequence) and not isinstance(items, (str, bytes)):
        return list(items)
    raise ArgumentError(
        f"Argument '{argument}' must be a sequence or mapping, "
        f"got {type(items).__name__}."
    )


def _is_blank(item: object) -> bool:
    return item is None or item is False or item == ""


# --- Finders ---


def find(items: Items, predicate: Callable[[Any], bool]) -> Any | None:
    """Return the first value satisfying *predicate*, or None."""
    return next((item for item in _values("items", items) if predicate(item)), None)


def find_last(items: Items, predicate: Callable[[Any], bool]) -> Any | None:
    """Return the last value satisfying *predicate*, or None."""
    return find(list(reversed(_values("items", items))), predicate)


def contains(items: Items, needle: Any) -> bool:
    """Return True if any value equals *needle*."""
    return needle in _values("items", items)


def first(items: Items) -> Any | None:
    """Return the first value, or None when empty."""
    values = _values("items", items)
    return values[0] if values else None


def last(items: Items) -> Any | None:
    """Return the last value, or None when empty."""
    values = _values("items", items)
    return values[-1] if values else None


# --- Predicates ---


def is_sequential(items: Items) -> bool:
    """Return True if *items* is a list/tuple or a mapping keyed ``0 .. n-1``."""
    _values("items", items)
    if isinstance(items, Mapping):
        return list(items.keys()) == list(range(len(items)))
    return True


def is_numeric(items: Items) -> bool:
    """Return True if the keys are the integers ``0 .. n-1``; see `is_sequential`."""
    return is_sequential(items)


def is_associative(items: Items) -> bool:
    """Return True if *items* has at least one key out of ``0 .. n-1`` order."""
    return not is_sequential(items)


def is_multidimensional(items: Items) -> bool:
    """Return True if any value is itself a list, tuple or mapping."""
    return any(
        isinstance(item, (list, tuple, Mapping)) for item in _values("items", items)
    )


def is_empty(items: Items) -> bool:
    """Return True if *items* holds no values."""
    return not _values("items", items)


# --- Cleanup ---


def trim(items: Sequence[T]) -> list[T]:
    """Strip None, False and "" from both ends, keeping the ones in between.

    Example:
        >>> trim([None, "", "foo", "", "bar", None])
        ['foo', '', 'bar']
    """
    values = _values("items", items)
    start, end = 0, len(values)
    while start < end and _is_blank(values[start]):
        start += 1
    while end > start and _is_blank(values[end - 1]):
        end -= 1
    return values[start:end]


def clean(items: Sequence[T], strict: bool = False) -> list[T]:
    """Drop blank values everywhere.

    Args:
        items: Values to filter.
        strict: When True only None is dropped; "" and False are kept.
    """
    values = _values("items", items)
    if strict:
        return [item for item in values if item is not None]
    return [item for item in values if not _is_blank(item)]


def object_to_dict(obj: object) -> dict[str, Any]:
    """Return the public attributes of *obj* as a dict.

    Dataclass instances are converted recursively with `dataclasses.asdict`.

    Raises:
        ArgumentError: If *obj* has no attribute dictionary.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, Mapping):
        return dict(obj)
    try:
        attributes = vars(obj)
    except TypeError as e:
        raise ArgumentError(f"Cannot convert {type(obj).__name__} to a dict.") from e
    return {
        name: value for name, value in attributes.items() if not name.startswith("_")
    }
