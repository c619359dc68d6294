"""Console input and output functions for the native function table."""

from __future__ import annotations

import sys
from typing import Any, Callable, Sequence, TextIO

from .values import ValueObject, ValueType, cast_to, to_string

_S = ValueType.STRING


def _read_token(stream: TextIO) -> str:
    """Read one whitespace-delimited word, skipping leading whitespace."""
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)
    chars: list[str] = []
    while ch and not ch.isspace():
        chars.append(ch)
        ch = stream.read(1)
    return "".join(chars)


def get_line(signature: Any, params: Sequence[ValueObject]) -> ValueObject:
    """Read a whole line from standard input, without its newline."""
    line = sys.stdin.readline()
    if line.endswith("\n"):
        line = line[:-1]
    return ValueObject(_S, line)


def read_input(signature: Any, params: Sequence[ValueObject]) -> ValueObject:
    """Read one word from standard input as the type named by the first argument.

    A ``complex`` or unknown type name yields void.
    """
    wanted = str(params[0].value)
    token = _read_token(sys.stdin)

    if wanted == "str":
        return ValueObject(_S, token)
    if wanted == "int":
        return cast_to(ValueObject(_S, token), ValueType.INTEGER)
    if wanted == "real":
        return cast_to(ValueObject(_S, token), ValueType.REAL)
    if wanted == "bool":
        return ValueObject(ValueType.BOOL, token == "true")
    return ValueObject.void()


def print_value(signature: Any, params: Sequence[ValueObject]) -> ValueObject:
    """Write the textual form of the first argument to standard output."""
    sys.stdout.write(to_string(params[0]))
    sys.stdout.flush()
    return ValueObject.void()


def endl(signature: Any, params: Sequence[ValueObject]) -> ValueObject:
    """Return a newline string."""
    return ValueObject(_S, "\n")


def register(add: Callable[..., Any]) -> None:
    """Register the console functions through ``add(name, types, by_ref, handler)``."""
    add("input", [ValueType.STRING], [True], read_input)
    add("getLine", [], [], get_line)
    for printable in (
        ValueType.STRING,
        ValueType.INTEGER,
        ValueType.BOOL,
        ValueType.COMPLEX,
        ValueType.REAL,
    ):
        add("print", [printable], [False], print_value)
    add("endl", [], [], endl)