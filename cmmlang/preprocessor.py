"""Expansion of ``#include <...>`` and collection of ``#bind <...>`` directives."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Union

PathLike = Union[str, "os.PathLike[str]"]

_INCLUDE = re.compile(r'# *include *< *([^"\\]*(?:\\.[^"\\]*)*) *>')
_BIND = re.compile(r'# *bind *< *([^"\\]*(?:\\.[^"\\]*)*) *>')

SOURCE_SUFFIX = ".cmm"


@dataclass
class PreprocessResult:
    """The expanded source text and the native libraries it asks to bind."""

    code: str = ""
    binds: list[str] = field(default_factory=list)

    def __iter__(self) -> Iterator:
        yield self.code
        yield self.binds


def find_file(filename: str, search_paths: Iterable[PathLike]) -> str | None:
    """Return the first existing file named ``filename`` (or with ``.cmm`` added)."""
    for directory in search_paths:
        candidate = Path(directory) / filename
        if candidate.exists() and not candidate.is_dir():
            return str(candidate)
        with_suffix = Path(str(candidate) + SOURCE_SUFFIX)
        if with_suffix.exists() and not with_suffix.is_dir():
            return str(with_suffix)
    return None


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def process_lines(lines: Iterable[str], search_paths: Iterable[PathLike]) -> PreprocessResult:
    """Expand directives in ``lines``; each line may carry its trailing newline."""
    paths = [str(p) for p in search_paths]
    parts: list[str] = []
    binds: list[str] = []

    for raw in lines:
        line = raw[:-1] if raw.endswith("\n") else raw
        if match := _INCLUDE.fullmatch(line):
            included = load_file(match.group(1), paths)
            parts.append(included.code)
            binds.extend(included.binds)
        elif match := _BIND.fullmatch(line):
            name = match.group(1)
            found = find_file(name, paths)
            if found is None:
                raise FileNotFoundError(f"Bind file not found: {name}")
            binds.append(found)
        else:
            parts.append(line + "\n")

    return PreprocessResult("".join(parts), binds)


def process_content(content: str, search_paths: Iterable[PathLike]) -> PreprocessResult:
    """Expand directives in a block of source text."""
    return process_lines(_split_lines(content), search_paths)


def load_file(filename: str, search_paths: Iterable[PathLike] | None = None) -> PreprocessResult:
    """Locate ``filename`` on the search paths and expand it.

    The directory of the file found is searched first for its own includes.
    """
    paths = ["."] if search_paths is None else [str(p) for p in search_paths]
    found = find_file(filename, paths)
    if found is None:
        raise FileNotFoundError(f"File not found: {filename}")

    try:
        with open(found, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise OSError(f"Failed to open file: {found}") from exc

    return process_lines(_split_lines(text), [str(Path(found).parent), *paths])