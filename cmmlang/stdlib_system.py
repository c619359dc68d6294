"""Running shell commands from programs."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Any, Callable, Sequence

from .values import ValueObject, ValueType


def _wait_status(returncode: int) -> int:
    """Encode a return code the way the C ``system`` call reports it."""
    if os.name != "posix":
        return returncode
    if returncode < 0:
        return -returncode
    return (returncode & 0xFF) << 8


def run_system(signature: Any, params: Sequence[ValueObject]) -> ValueObject:
    """Run the argument as a shell command and return its wait status."""
    command = str(params[0].value)
    sys.stdout.flush()
    completed = subprocess.run(command, shell=True, check=False)
    return ValueObject(ValueType.INTEGER, _wait_status(completed.returncode))


def register(add: Callable[..., Any]) -> None:
    """Register ``system`` through ``add(name, types, by_ref, handler)``."""
    add("system", [ValueType.STRING], [False], run_system)