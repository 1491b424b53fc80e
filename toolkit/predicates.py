"""Predicates that test a single value."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from toolkit.conversion import (
    as_float,
    as_int,
    as_string,
    as_time,
    can_convert_to_float,
)


class Predicate(ABC):
    """A test applied to one value."""

    @abstractmethod
    def apply(self, value: Any) -> bool:
        """Return True if ``value`` satisfies the predicate."""


def _difference(left: datetime, right: datetime) -> timedelta:
    if (left.tzinfo is None) != (right.tzinfo is None):
        if left.tzinfo is None:
            left = left.replace(tzinfo=timezone.utc)
        else:
            right = right.replace(tzinfo=timezone.utc)
    return left - right


@dataclass
class WithinPredicate(Predicate):
    """True for times no further than ``delta_in_seconds`` from ``base_time``."""

    base_time: datetime
    delta_in_seconds: int
    date_layout: str | None = None
    elapsed: timedelta = field(default=timedelta(0))
    max_allowed_delay: timedelta = field(default=timedelta(0))

    def apply(self, value: Any) -> bool:
        moment = as_time(value, self.date_layout)
        if moment is None:
            return False
        elapsed = abs(_difference(moment, self.base_time))
        max_allowed_delay = timedelta(seconds=self.delta_in_seconds)
        passed = max_allowed_delay >= elapsed
        if not passed:
            self.elapsed = elapsed
            self.max_allowed_delay = max_allowed_delay
        return passed

    def __str__(self) -> str:
        def nanos(delta: timedelta) -> int:
            return (delta // timedelta(microseconds=1)) * 1000

        return (
            f"(elapsed: {nanos(self.elapsed)}, "
            f"max allowed delay: {nanos(self.max_allowed_delay)})\n"
        )


@dataclass(frozen=True)
class BetweenPredicate(Predicate):
    """True for numbers in the closed range [low, high]."""

    low: float
    high: float

    def apply(self, value: Any) -> bool:
        return self.low <= as_float(value) <= self.high

    def __str__(self) -> str:
        return f"x BETWEEN {as_string(self.low)} AND {as_string(self.high)}"


@dataclass(frozen=True)
class InPredicate(Predicate):
    """True for values that, once converted, belong to ``values``."""

    values: frozenset
    convert: Callable[[Any], Any]

    def apply(self, value: Any) -> bool:
        return self.convert(value) in self.values


_NUMERIC_OPERATORS: dict[str, Callable[[float, float], bool]] = {
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
    "=": operator.eq,
    "!=": operator.ne,
}

_TEXT_OPERATORS: dict[str, Callable[[str, str], bool]] = {
    "=": operator.eq,
    "!=": operator.ne,
}


@dataclass(frozen=True)
class ComparablePredicate(Predicate):
    """Compares a value against an operand; numeric when the operand is a number."""

    operator: str
    operand: Any
    numeric: bool

    def apply(self, value: Any) -> bool:
        if self.numeric:
            compare = _NUMERIC_OPERATORS.get(self.operator)
            return compare is not None and compare(as_float(value), self.operand)
        compare = _TEXT_OPERATORS.get(self.operator)
        return compare is not None and compare(as_string(value), self.operand)


class NilPredicate(Predicate):
    """True only for ``None``."""

    def apply(self, value: Any) -> bool:
        return value is None


@dataclass(frozen=True)
class LikePredicate(Predicate):
    """Case-insensitive SQL LIKE matching with ``%`` wildcards."""

    fragments: tuple[str, ...]

    def apply(self, value: Any) -> bool:
        text = as_string(value).lower()
        for fragment in self.fragments:
            position = text.find(fragment)
            if position == -1:
                return False
            text = text[position:]
        return True


def new_within_predicate(
    base_time: datetime, delta_in_seconds: int, date_layout: str | None = None
) -> WithinPredicate:
    """Create a predicate matching times within a number of seconds of ``base_time``."""
    return WithinPredicate(base_time, delta_in_seconds, date_layout or None)


def new_between_predicate(low: Any, high: Any) -> BetweenPredicate:
    """Create a BETWEEN predicate."""
    return BetweenPredicate(as_float(low), as_float(high))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return _is_int(value) or isinstance(value, float)


def new_in_predicate(*values: Any) -> InPredicate:
    """Create an IN predicate; the kind of the values decides how candidates compare."""
    if values and all(_is_int(v) for v in values):
        convert: Callable[[Any], Any] = as_int
    elif values and all(_is_number(v) for v in values):
        convert = as_float
    else:
        convert = as_string
    return InPredicate(frozenset(convert(v) for v in values), convert)


def new_comparable_predicate(operator: str, operand: Any) -> ComparablePredicate:
    """Create a predicate for =, !=, >, >=, <, <=."""
    if can_convert_to_float(operand):
        return ComparablePredicate(operator, as_float(operand), True)
    return ComparablePredicate(operator, as_string(operand), False)


def new_nil_predicate() -> NilPredicate:
    """Create a predicate matching ``None``."""
    return NilPredicate()


def new_like_predicate(matching: str) -> LikePredicate:
    """Create a LIKE predicate from a pattern using ``%`` wildcards."""
    return LikePredicate(tuple(matching.lower().split("%")))