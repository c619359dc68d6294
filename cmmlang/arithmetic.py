"""Arithmetic and bitwise operators on runtime values."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from .values import ValueObject, ValueType, cast_to, common_type, type_name

_I = ValueType.INTEGER
_R = ValueType.REAL
_S = ValueType.STRING
_C = ValueType.COMPLEX
_B = ValueType.BOOL
_A = ValueType.ANY

_Op = Callable[[Any, Any], Any]


class OperationError(Exception):
    """Raised when an operator cannot be applied to the given operand types."""

    def __init__(self, source: ValueType, target: ValueType, op: str) -> None:
        self.source = source
        self.target = target
        self.op = op
        super().__init__(
            f"Cannot perform operation {op} on type {type_name(source)} and "
            f"{type_name(target)} : Types missmatch"
        )


class DivisionByZeroError(Exception):
    """Raised when the right operand of a division is zero."""

    def __init__(self) -> None:
        super().__init__("Division by zero")


def _int_div(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZeroError()
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _int_mod(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZeroError()
    return a - b * _int_div(a, b)


def _real_div(a: float, b: float) -> float:
    if b == 0.0:
        raise DivisionByZeroError()
    return a / b


def _complex_div(a: complex, b: complex) -> complex:
    if b == 0:
        raise DivisionByZeroError()
    return a / b


def _shift_left(a: int, b: int) -> int:
    return a << b if b >= 0 else a >> -b


def _shift_right(a: int, b: int) -> int:
    return a >> b if b >= 0 else a << -b


def _apply(left: ValueObject, right: ValueObject, symbol: str,
           ops: Mapping[ValueType, _Op]) -> ValueObject:
    """Bring both operands to their common type and apply the matching operation."""
    op = f'"{symbol}"'
    common = common_type(left.type, right.type)
    if common is None or (common is not _A and common not in ops):
        raise OperationError(left.type, right.type, op)

    lhs = left if left.type is common else cast_to(left, common)
    rhs = right if right.type is common else cast_to(right, common)

    if common is _A:
        return ValueObject(_A, None)
    return ValueObject(common, ops[common](lhs.value, rhs.value))


def add(left: ValueObject, right: ValueObject) -> ValueObject:
    """Add numbers, concatenate strings, or OR booleans."""
    return _apply(left, right, "+", {
        _I: lambda a, b: a + b,
        _R: lambda a, b: a + b,
        _C: lambda a, b: a + b,
        _S: lambda a, b: a + b,
        _B: lambda a, b: bool(a or b),
    })


def sub(left: ValueObject, right: ValueObject) -> ValueObject:
    """Subtract numbers or XOR booleans."""
    return _apply(left, right, "-", {
        _I: lambda a, b: a - b,
        _R: lambda a, b: a - b,
        _C: lambda a, b: a - b,
        _B: lambda a, b: bool(a) != bool(b),
    })


def mul(left: ValueObject, right: ValueObject) -> ValueObject:
    """Multiply numbers or AND booleans."""
    return _apply(left, right, "*", {
        _I: lambda a, b: a * b,
        _R: lambda a, b: a * b,
        _C: lambda a, b: a * b,
        _B: lambda a, b: bool(a and b),
    })


def div(left: ValueObject, right: ValueObject) -> ValueObject:
    """Divide numbers; integer division truncates toward zero."""
    return _apply(left, right, "/", {
        _I: _int_div,
        _R: _real_div,
        _C: _complex_div,
    })


def mod(left: ValueObject, right: ValueObject) -> ValueObject:
    """Integer remainder, taking the sign of the dividend."""
    return _apply(left, right, "&", {_I: _int_mod})


def lshift(left: ValueObject, right: ValueObject) -> ValueObject:
    """Shift an integer left."""
    return _apply(left, right, "<<", {_I: _shift_left})


def rshift(left: ValueObject, right: ValueObject) -> ValueObject:
    """Shift an integer right."""
    return _apply(left, right, ">>", {_I: _shift_right})


def bitwise_or(left: ValueObject, right: ValueObject) -> ValueObject:
    """Bitwise OR of two integers."""
    return _apply(left, right, "|", {_I: lambda a, b: a | b})


def bitwise_and(left: ValueObject, right: ValueObject) -> ValueObject:
    """Bitwise AND of two integers."""
    return _apply(left, right, "&", {_I: lambda a, b: a & b})


def bitwise_xor(left: ValueObject, right: ValueObject) -> ValueObject:
    """Bitwise XOR of two integers."""
    return _apply(left, right, "^", {_I: lambda a, b: a ^ b})


def bitwise_not(operand: ValueObject) -> ValueObject:
    """Bitwise complement, after converting the operand to an integer."""
    value = operand if operand.type is _I else cast_to(operand, _I)
    return ValueObject(_I, ~value.value)