"""Step-wise iteration over sequences with value conversion."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any, Callable

from toolkit.conversion import as_boolean, as_float, as_int, as_string, as_time

_CONVERTERS: dict[Any, Callable[[Any], Any]] = {
    str: as_string,
    int: as_int,
    float: as_float,
    bool: as_boolean,
    datetime: as_time,
}


def _convert(value: Any, kind: Any) -> Any:
    if kind is None or kind is object:
        return value
    converter = _CONVERTERS.get(kind)
    if converter is not None:
        return converter(value)
    if value is None or isinstance(value, kind):
        return value
    raise TypeError(f"cannot assign {type(value).__name__} to {kind.__name__}")


class SliceIterator:
    """Iterates a sequence, optionally converting each item on the way out."""

    def __init__(self, items: Sequence[Any]):
        self._items = items
        self._index = 0

    def has_next(self) -> bool:
        """Return True while items remain."""
        return self._index < len(self._items)

    def next_as(self, kind: Any = None) -> Any:
        """Return the next item converted to ``kind`` (unchanged when None)."""
        if not self.has_next():
            raise StopIteration
        value = self._items[self._index]
        self._index += 1
        return _convert(value, kind)

    def __iter__(self) -> SliceIterator:
        return self

    def __next__(self) -> Any:
        return self.next_as()


def new_slice_iterator(items: Iterable[Any]) -> SliceIterator:
    """Create an iterator over a sequence or any other non-text iterable."""
    if isinstance(items, (str, bytes, bytearray)) or not isinstance(items, Iterable):
        raise TypeError(f"expected a sequence, got {type(items).__name__}")
    if not isinstance(items, Sequence):
        items = list(items)
    return SliceIterator(items)