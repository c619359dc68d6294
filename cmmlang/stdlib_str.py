"""String functions for the native function table."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .values import ValueObject, ValueType

_I = ValueType.INTEGER
_S = ValueType.STRING


def strlen(signature: Any, params: Sequence[ValueObject]) -> ValueObject:
    """Length of a string."""
    return ValueObject(_I, len(str(params[0].value)))


def char_at(signature: Any, params: Sequence[ValueObject]) -> ValueObject:
    """The character at a position; out-of-range positions raise ``IndexError``."""
    text = str(params[0].value)
    index = int(params[1].value)
    if not 0 <= index < len(text):
        raise IndexError(f"charAt: index {index} out of range for length {len(text)}")
    return ValueObject(_S, text[index])


def slice_string(signature: Any, params: Sequence[ValueObject]) -> ValueObject:
    """The characters from ``start`` to ``end`` inclusive.

    An end before the start takes the rest of the string; a start past the
    end of the string raises ``IndexError``.
    """
    text = str(params[0].value)
    start = int(params[1].value)
    end = int(params[2].value)
    if not 0 <= start <= len(text):
        raise IndexError(f"slice: start {start} out of range for length {len(text)}")
    count = end - start + 1
    return ValueObject(_S, text[start:] if count < 0 else text[start:start + count])


def char_add(signature: Any, params: Sequence[ValueObject]) -> ValueObject:
    """Shift every byte of the string by an offset, wrapping modulo 256."""
    data = str(params[0].value).encode("utf-8")
    shift = int(params[1].value)
    shifted = bytes((byte + shift) % 256 for byte in data)
    return ValueObject(_S, shifted.decode("latin-1"))


def char_of(signature: Any, params: Sequence[ValueObject]) -> ValueObject:
    """The one-character string for a character code, taken modulo 256."""
    return ValueObject(_S, chr(int(params[0].value) % 256))


def register(add: Callable[..., Any]) -> None:
    """Register the string functions through ``add(name, types, by_ref, handler)``."""
    add("strlen", [_S], [False], strlen)
    add("charAt", [_S, _I], [False, False], char_at)
    add("slice", [_S, _I, _I], [False, False, False], slice_string)
    add("charAdd", [_S, _I], [False, False], char_add)
    add("charOf", [_I], [False], char_of)