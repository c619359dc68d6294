"""Runtime value types, conversions between them, and their textual forms."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Any


class ValueType(enum.Enum):
    """The types a runtime value can have."""

    INTEGER = "int"
    REAL = "real"
    STRING = "str"
    COMPLEX = "complex"
    BOOL = "bool"
    VOID = "void"
    ANY = "any"


@dataclass(frozen=True, slots=True)
class ValueObject:
    """A typed runtime value.

    Integers are held as ``int``, reals as ``float``, complex numbers as
    ``complex``, strings as ``str`` and booleans as ``bool``; void carries
    ``None``.
    """

    type: ValueType
    value: Any = None

    @classmethod
    def void(cls) -> ValueObject:
        """Return the void value."""
        return cls(ValueType.VOID, None)


class ConversionError(Exception):
    """Raised when a value cannot be converted to the requested type."""

    def __init__(self, source: ValueType, target: ValueType) -> None:
        self.source = source
        self.target = target
        super().__init__(
            f"Cannot convert from type {type_name(source)} to "
            f"{type_name(target)} : Unknown conversion"
        )


_I, _R, _S, _C, _B, _V, _A = (
    ValueType.INTEGER,
    ValueType.REAL,
    ValueType.STRING,
    ValueType.COMPLEX,
    ValueType.BOOL,
    ValueType.VOID,
    ValueType.ANY,
)

# Rank of the numeric-ish types when two operands meet; the higher one wins.
_TERM_RANK = {_B: 0, _I: 1, _R: 2, _C: 3, _S: 4, _A: 5}

_CASTS: dict[ValueType, frozenset[ValueType]] = {
    _I: frozenset({_I, _R, _C, _B, _S, _A}),
    _R: frozenset({_I, _R, _C, _B, _S, _A}),
    _C: frozenset({_I, _R, _C, _B, _S, _A}),
    _S: frozenset({_I, _R, _B, _S, _A}),
    _B: frozenset({_I, _R, _C, _B, _S, _A}),
    _A: frozenset({_A}),
    _V: frozenset(),
}

_BY_NAME = {member.value: member for member in ValueType}


def type_name(value_type: ValueType) -> str:
    """Return the language's name for a value type, or ``"wtf"`` if unknown."""
    if isinstance(value_type, ValueType):
        return value_type.value
    return "wtf"


def parse_type_name(name: str) -> ValueType:
    """Return the value type with the given language name."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise ValueError(f"unknown type name: {name!r}") from None


def common_type(left: ValueType, right: ValueType) -> ValueType | None:
    """Return the type two operands are brought to, or ``None`` if there is none."""
    left_rank = _TERM_RANK.get(left)
    right_rank = _TERM_RANK.get(right)
    if left_rank is None or right_rank is None:
        return None
    return left if left_rank >= right_rank else right


def can_cast(source: ValueType, target: ValueType) -> bool:
    """Tell whether an explicit cast from ``source`` to ``target`` is allowed."""
    return target in _CASTS.get(source, frozenset())


def _format_real(number: float) -> str:
    return str(float(number))


def _format_complex(number: complex) -> str:
    real = _format_real(number.real)
    imag = number.imag
    sign = "-" if imag < 0 or (imag == 0 and math.copysign(1.0, imag) < 0) else "+"
    return f"{real}{sign}{_format_real(abs(imag))}i"


def _real_to_int(number: float, source: ValueType, target: ValueType) -> int:
    if not math.isfinite(number):
        raise ConversionError(source, target)
    return int(number)


def _convert(value: ValueObject, new_type: ValueType) -> Any:
    source = value.type
    data = value.value

    if source is _I:
        number = int(data)
        converters = {
            _I: lambda: number,
            _R: lambda: float(number),
            _C: lambda: complex(number, 0),
            _B: lambda: number != 0,
            _S: lambda: str(number),
        }
    elif source is _R:
        number = float(data)
        converters = {
            _I: lambda: _real_to_int(number, source, new_type),
            _R: lambda: number,
            _C: lambda: complex(number, 0.0),
            _B: lambda: number != 0.0,
            _S: lambda: _format_real(number),
        }
    elif source is _C:
        number = complex(data)
        converters = {
            _I: lambda: _real_to_int(number.real, source, new_type),
            _R: lambda: number.real,
            _C: lambda: number,
            _B: lambda: number.real != 0.0 or number.imag != 0.0,
            _S: lambda: _format_complex(number),
        }
    elif source is _S:
        text = str(data)

        def parse(kind):
            try:
                return kind(text)
            except ValueError:
                raise ConversionError(source, new_type) from None

        converters = {
            _I: lambda: parse(int),
            _R: lambda: parse(float),
            _B: lambda: text != "",
            _S: lambda: text,
        }
    elif source is _B:
        flag = bool(data)
        converters = {
            _I: lambda: 1 if flag else 0,
            _R: lambda: 1.0 if flag else 0.0,
            _C: lambda: complex(1 if flag else 0, 0),
            _B: lambda: flag,
            _S: lambda: "true" if flag else "false",
        }
    else:
        raise ConversionError(source, new_type)

    converter = converters.get(new_type)
    if converter is None:
        raise ConversionError(source, new_type)
    return converter()


def cast_to(value: ValueObject, new_type: ValueType) -> ValueObject:
    """Return ``value`` converted to ``new_type``."""
    return ValueObject(new_type, _convert(value, new_type))


def clone(value: ValueObject) -> ValueObject:
    """Return an independent copy of ``value``."""
    if value.type is _V:
        return ValueObject.void()
    return cast_to(value, value.type)


def to_string(value: ValueObject) -> str:
    """Return the textual form of ``value``."""
    if value.type is _V:
        return "void"
    return cast_to(value, _S).value