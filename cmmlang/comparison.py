"""Logical operators and comparisons on runtime values."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from .arithmetic import OperationError
from .values import ValueObject, ValueType, cast_to, common_type

_I = ValueType.INTEGER
_R = ValueType.REAL
_S = ValueType.STRING
_C = ValueType.COMPLEX
_B = ValueType.BOOL
_A = ValueType.ANY

_Test = Callable[[Any, Any], bool]

# Every comparison reports the same operator symbol when the types do not meet.
_COMPARISON_SYMBOL = '"^"'


def _as_bool(value: ValueObject) -> bool:
    return bool((value if value.type is _B else cast_to(value, _B)).value)


def _boolean(result: bool) -> ValueObject:
    return ValueObject(_B, bool(result))


def _complex_key(number: complex) -> tuple[float, float]:
    return (number.real, number.imag)


def _compare(left: ValueObject, right: ValueObject,
             tests: Mapping[ValueType, _Test]) -> ValueObject:
    """Bring both operands to their common type and apply the matching test."""
    common = common_type(left.type, right.type)
    if common is None:
        raise OperationError(left.type, right.type, _COMPARISON_SYMBOL)

    lhs = left if left.type is common else cast_to(left, common)
    rhs = right if right.type is common else cast_to(right, common)

    test = tests.get(common)
    if test is None:
        return _boolean(False)
    return _boolean(test(lhs.value, rhs.value))


def _ordering(check: Callable[[Any, Any], bool]) -> dict[ValueType, _Test]:
    """Tests for an ordering; strings are ordered by their length."""
    return {
        _I: check,
        _R: check,
        _C: lambda a, b: check(_complex_key(a), _complex_key(b)),
        _S: lambda a, b: check(len(a), len(b)),
        _B: lambda a, b: check(int(bool(a)), int(bool(b))),
    }


def logical_or(left: ValueObject, right: ValueObject) -> ValueObject:
    """True when either operand, taken as a boolean, is true."""
    lhs = _as_bool(left)
    rhs = _as_bool(right)
    return _boolean(lhs or rhs)


def logical_and(left: ValueObject, right: ValueObject) -> ValueObject:
    """True when both operands, taken as booleans, are true."""
    lhs = _as_bool(left)
    rhs = _as_bool(right)
    return _boolean(lhs and rhs)


def logical_not(operand: ValueObject) -> ValueObject:
    """Negation of the operand taken as a boolean."""
    return _boolean(not _as_bool(operand))


def equal(left: ValueObject, right: ValueObject) -> ValueObject:
    """Equality after bringing both operands to their common type."""
    same: _Test = lambda a, b: a == b
    return _compare(left, right, {
        _I: same,
        _R: same,
        _C: same,
        _S: same,
        _B: lambda a, b: bool(a) == bool(b),
    })


def not_equal(left: ValueObject, right: ValueObject) -> ValueObject:
    """Inequality; strings differ when their lengths differ."""
    return _compare(left, right, _ordering(lambda a, b: a != b))


def greater(left: ValueObject, right: ValueObject) -> ValueObject:
    """Strictly greater; strings compare by length."""
    return _compare(left, right, _ordering(lambda a, b: a > b))


def less(left: ValueObject, right: ValueObject) -> ValueObject:
    """Strictly less; strings compare by length."""
    return _compare(left, right, _ordering(lambda a, b: a < b))


def greater_equal(left: ValueObject, right: ValueObject) -> ValueObject:
    """Greater or equal; strings compare by length."""
    return _compare(left, right, _ordering(lambda a, b: a >= b))


def less_equal(left: ValueObject, right: ValueObject) -> ValueObject:
    """Less or equal; strings compare by length."""
    return _compare(left, right, _ordering(lambda a, b: a <= b))