"""Opening an external text editor to write a program."""

from __future__ import annotations

import os
import subprocess
import tempfile
from pathlib import Path
from typing import Sequence

DEFAULT_COMMAND: tuple[str, ...] = (
    "xterm", "-fa", "DejaVu Sans Mono", "-fs", "16",
    "-e", "nano", "-i", "-Y", "java", "-T", "4",
)


def edit(command: Sequence[str] | None = None, temp_dir: str | os.PathLike[str] | None = None) -> str:
    """Run an editor on a fresh temporary file and return what was written.

    The file's path is passed as the last argument to ``command``. Every line
    of the result ends with a newline; an empty string comes back if the
    editor left no file. The temporary file is removed afterwards.
    """
    args = list(DEFAULT_COMMAND if command is None else command)
    directory = Path(tempfile.gettempdir() if temp_dir is None else temp_dir)
    path = directory / f"nano_temp_{os.getpid()}.cmm"

    try:
        subprocess.run([*args, str(path)], check=False)
    except OSError:
        pass

    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError:
        return ""

    path.unlink(missing_ok=True)
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return "".join(line + "\n" for line in lines)