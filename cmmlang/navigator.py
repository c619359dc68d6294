"""Keyboard-driven navigation of the debugger screen."""

from __future__ import annotations

import contextlib
import enum
import os
import shutil
import sys
from typing import Callable, Iterator, Protocol, Sequence

from .renderer import HIDE_CURSOR, SHOW_CURSOR, Mode, StackFrame, render_frame

CLEAR_SCREEN = "\033[H\033[2J"

ReadChar = Callable[[], str]


class _DebugSession(Protocol):
    def step(self) -> None: ...

    def is_done(self) -> bool: ...

    def current_line(self) -> int: ...

    def error(self) -> str: ...

    def stack_frames(self, skip_empty: bool) -> Sequence[StackFrame]: ...


class Key(enum.Enum):
    """The keys the debugger screen reacts to."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    STEP = enum.auto()
    STEP_INTO = enum.auto()
    CONTINUE = enum.auto()
    TOGGLE_EMPTY = enum.auto()
    EXIT = enum.auto()
    QUIT = enum.auto()
    NONE = enum.auto()


_FUNCTION_KEYS = {
    "18": Key.STEP,
    "19": Key.STEP_INTO,
    "20": Key.CONTINUE,
    "21": Key.TOGGLE_EMPTY,
    "23": Key.EXIT,
}

_ARROWS = {"A": Key.UP, "B": Key.DOWN, "C": Key.RIGHT, "D": Key.LEFT}


def decode_key(read_char: ReadChar) -> Key:
    """Read one key press through ``read_char``.

    ``read_char`` returns one character, or an empty string once input has
    ended; the end of input reads as :attr:`Key.QUIT`.
    """
    ch = read_char()
    if ch == "" or ch == "\x03" or ch == "q":
        return Key.QUIT
    if ch != "\033":
        return Key.NONE
    if read_char() != "[":
        return Key.NONE
    code = read_char()
    if code.isdigit():
        digits = [code]
        while (nxt := read_char()) not in ("~", ""):
            digits.append(nxt)
        return _FUNCTION_KEYS.get("".join(digits), Key.NONE)
    return _ARROWS.get(code, Key.NONE)


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class Navigator:
    """The selection state of the debugger screen and its reaction to keys."""

    def __init__(self, code: str, debugger: _DebugSession) -> None:
        self.debugger = debugger
        self.code_lines = _split_lines(code)
        self.mode = Mode.CODE
        self.current_variable_index = 0
        self.current_stack_index = 0
        self.current_code_line = debugger.current_line()
        self.skip_empty = True
        self.stacks: list[StackFrame] = list(debugger.stack_frames(self.skip_empty))

    def _frame_size(self, index: int) -> int:
        if 0 <= index < len(self.stacks):
            return len(self.stacks[index].variables)
        return 0

    def _move_up(self) -> None:
        if self.mode is Mode.CODE:
            count = len(self.code_lines)
            if count:
                self.current_code_line = (self.current_code_line - 1 + count) % count
            return
        if self._frame_size(self.current_stack_index) > 0:
            if self.current_variable_index > 0:
                self.current_variable_index -= 1
            else:
                if self.current_stack_index > 0:
                    self.current_stack_index -= 1
                self.current_variable_index = self._frame_size(self.current_stack_index) - 1

    def _move_down(self) -> None:
        if self.mode is Mode.CODE:
            count = len(self.code_lines)
            if count:
                self.current_code_line = (self.current_code_line + 1) % count
            return
        count = self._frame_size(self.current_stack_index)
        if count > 0:
            if self.current_variable_index < count - 1:
                self.current_variable_index += 1
            elif self.current_stack_index < len(self.stacks) - 1:
                self.current_stack_index += 1
                self.current_variable_index = 0

    def handle(self, key: Key) -> bool:
        """Apply a key press; ``False`` means the screen should close."""
        if key is Key.QUIT:
            return False
        if key is Key.EXIT and self.debugger.is_done():
            return False

        if key is Key.STEP:
            if not self.debugger.is_done():
                self.debugger.step()
                self.current_code_line = self.debugger.current_line()
        elif key is Key.TOGGLE_EMPTY:
            self.skip_empty = not self.skip_empty
        elif key is Key.UP:
            self._move_up()
        elif key is Key.DOWN:
            self._move_down()
        elif key is Key.RIGHT:
            self.mode = Mode.STACK_VARIABLE
        elif key is Key.LEFT:
            self.mode = Mode.CODE

        self.stacks = list(self.debugger.stack_frames(self.skip_empty))
        return True

    def render(self, width: int, height: int) -> str:
        """The screen for a terminal of ``width`` columns by ``height`` rows."""
        return render_frame(
            self.code_lines,
            self.stacks,
            self.current_code_line,
            self.current_variable_index,
            self.current_stack_index,
            self.mode,
            width,
            height,
            executing_line=self.debugger.current_line(),
            error=self.debugger.error(),
            done=self.debugger.is_done(),
        )


@contextlib.contextmanager
def _raw_terminal() -> Iterator[ReadChar]:
    fd = sys.stdin.fileno()

    def read_char() -> str:
        data = os.read(fd, 1)
        return data.decode("latin-1") if data else ""

    try:
        import termios
    except ImportError:
        yield read_char
        return

    if not os.isatty(fd):
        yield read_char
        return

    original = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG)
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        yield read_char
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, original)


def run_debug_terminal(code: str, debugger: _DebugSession,
                       read_char: ReadChar | None = None,
                       write: Callable[[str], object] | None = None) -> None:
    """Show the debugger screen for ``code`` until the user leaves it.

    Without ``read_char`` keys come from the terminal in raw mode; without
    ``write`` the screen goes to standard output.
    """
    if write is None:
        def write(text: str) -> None:
            sys.stdout.write(text)
            sys.stdout.flush()

    def redraw(navigator: Navigator) -> None:
        size = shutil.get_terminal_size((80, 24))
        write(CLEAR_SCREEN + navigator.render(size.columns, size.lines))

    with contextlib.ExitStack() as stack:
        reader = read_char if read_char is not None else stack.enter_context(_raw_terminal())
        write(HIDE_CURSOR)
        navigator = Navigator(code, debugger)
        redraw(navigator)
        try:
            while navigator.handle(decode_key(reader)):
                redraw(navigator)
        finally:
            write(CLEAR_SCREEN + SHOW_CURSOR)