"""Text rendering of the debugger screen: a code pane beside a stack pane."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Sequence

SELECT_BG = "\033[48;5;240m"
HEADER_BG = "\033[41m"
RESET_COLOR = "\033[0m"

RED_FG = "\033[31m"
GREEN_FG = "\033[32m"
YELLOW_FG = "\033[33m"
MAGENTA_FG = "\033[35m"
CYAN_FG = "\033[36m"
RESET_FG = "\033[39m"

BRIGHT_RED_FG = "\033[91m"
BRIGHT_GREEN_FG = "\033[92m"
BRIGHT_CYAN_FG = "\033[96m"

UNDERLINE = "\033[4m"
RESET_ATTR = "\033[0m"

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

DIVIDER = " ║ "
MIN_WIDTH = 80
MIN_HEIGHT = 12


class Align(enum.Enum):
    """Where text sits inside a padded field."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class Mode(enum.Enum):
    """Which pane the debugger's selection is in."""

    CODE = "code"
    STACK_VARIABLE = "stack_variable"


@dataclass
class StackVar:
    """One entry shown inside a stack frame."""

    name: str
    type: str = ""
    value: str = ""


@dataclass
class StackFrame:
    """A stack frame as shown: a header and its entries."""

    header: str
    variables: list[StackVar] = field(default_factory=list)


@dataclass
class StackView:
    """The rendered lines of the stack pane.

    ``is_header`` flags header lines and ``offsets`` gives the line index of
    each frame's header.
    """

    lines: list[str] = field(default_factory=list)
    is_header: list[bool] = field(default_factory=list)
    offsets: list[int] = field(default_factory=list)


def pad_string(text: str, width: int, align: Align = Align.LEFT, fill: str = " ") -> str:
    """Pad ``text`` to ``width`` characters, truncating it if it is too long."""
    if len(text) >= width:
        return text[:width]
    padding = width - len(text)
    if align is Align.RIGHT:
        return fill * padding + text
    if align is Align.CENTER:
        left = padding // 2
        return fill * left + text + fill * (padding - left)
    return text + fill * padding


def limit_render_length(text: str, max_width: int, tab_width: int = 4) -> str:
    """Render ``text`` into exactly ``max_width`` columns.

    ANSI escape sequences and control characters take no columns, tabs expand
    to the next tab stop, and the result is padded with spaces.
    """
    out: list[str] = []
    rendered = 0
    i = 0
    size = len(text)
    while i < size and rendered < max_width:
        ch = text[i]
        if ch == "\033":
            out.append(ch)
            i += 1
            if i < size and text[i] == "[":
                out.append(text[i])
                i += 1
                while i < size and not "@" <= text[i] <= "~":
                    out.append(text[i])
                    i += 1
                if i < size:
                    out.append(text[i])
                    i += 1
            continue
        if ch == "\t":
            spaces = tab_width - (rendered % tab_width)
            spaces = min(spaces, max_width - rendered)
            out.append(" " * spaces)
            rendered += spaces
            i += 1
            continue
        if ord(ch) < 32:
            out.append(ch)
            i += 1
            continue
        out.append(ch)
        rendered += 1
        i += 1

    if rendered < max_width:
        out.append(" " * (max_width - rendered))
    return "".join(out)


_TYPE_COLORS = {
    "func": RED_FG,
    "int": CYAN_FG,
    "real": CYAN_FG,
    "str": GREEN_FG,
    "bool": YELLOW_FG,
    "complex": MAGENTA_FG,
}


def color_for_type(type_name: str) -> str:
    """The foreground colour used for entries of the given type."""
    return _TYPE_COLORS.get(type_name, RESET_FG)


def _variable_line(indent: str, var: StackVar) -> str:
    if not var.type:
        return indent + " " + pad_string(var.name, 14)
    colored_type = color_for_type(var.type) + pad_string(var.type, 8) + RESET_FG
    if var.type != "func":
        return (indent + " " + pad_string(var.name, 14) + ": " + colored_type
                + "    " + BRIGHT_GREEN_FG + var.value)
    return (indent + " " + pad_string(var.name, 30) + ": " + colored_type
            + " -> " + BRIGHT_GREEN_FG + var.value)


def build_stack_view(stacks: Sequence[StackFrame], pane_width: int) -> StackView:
    """Lay out the stack frames, each indented two spaces deeper than the last.

    A leading ``Native`` frame does not add to the indentation of the others.
    """
    view = StackView()
    native_first = bool(stacks) and stacks[0].header == "Native"
    for depth, frame in enumerate(stacks):
        if native_first and depth > 0:
            depth -= 1
        indent = " " * (depth * 2)
        header = (indent + frame.header)[:pane_width]
        view.offsets.append(len(view.lines))
        view.lines.append(header)
        view.is_header.append(True)
        for var in frame.variables:
            view.lines.append(_variable_line(indent, var) + RESET_FG)
            view.is_header.append(False)
    return view


def _window_top(total: int, visible: int, focus: int) -> int:
    top = max(focus - visible // 2, 0)
    if top + visible > total:
        top = total - visible
    return top


def render_frame(code_lines: Sequence[str], stacks: Sequence[StackFrame],
                 current_code_line: int, current_variable_index: int,
                 current_stack_index: int, mode: Mode, width: int, height: int,
                 executing_line: int = -1, error: str = "", done: bool = False) -> str:
    """Render one full debugger screen for a terminal of ``width`` by ``height``.

    The width is at least 80 columns and the height at least 12 rows; one row
    is kept free, one holds the key legend and one more the error, if any.
    """
    total_width = max(width, MIN_WIDTH)
    visible_rows = max(height, MIN_HEIGHT) - 1 - 1 - (1 if error else 0)
    code_width = int(total_width * (0.4 if mode is Mode.STACK_VARIABLE else 0.6))
    stack_width = total_width - code_width - len(DIVIDER)

    view = build_stack_view(stacks, stack_width)

    code_count = len(code_lines)
    code_top = 0
    if code_count > visible_rows:
        code_top = _window_top(code_count, visible_rows, current_code_line)

    selected = -1
    if (mode is Mode.STACK_VARIABLE and 0 <= current_stack_index < len(stacks)
            and stacks[current_stack_index].variables):
        selected = view.offsets[current_stack_index] + 1 + current_variable_index

    stack_count = len(view.lines)
    stack_top = 0
    if stack_count > visible_rows:
        focus = selected if selected != -1 else stack_count + visible_rows // 2
        stack_top = _window_top(stack_count, visible_rows, focus)

    out: list[str] = []
    for row in range(visible_rows):
        code_index = code_top + row
        if code_index < code_count:
            line = code_lines[code_index][:code_width - 2]
            marker = "> " if code_index == executing_line else "  "
            plain = marker + line
            if code_index == current_code_line and mode is Mode.CODE:
                code_segment = SELECT_BG + plain + RESET_COLOR
            else:
                code_segment = plain
        else:
            code_segment = " " * code_width

        stack_index = stack_top + row
        if stack_index < stack_count:
            plain = view.lines[stack_index]
            if view.is_header[stack_index]:
                stack_segment = HEADER_BG + plain + RESET_COLOR
            elif mode is Mode.STACK_VARIABLE and stack_index == selected:
                stack_segment = SELECT_BG + plain + RESET_COLOR
            else:
                stack_segment = plain
        else:
            stack_segment = " " * stack_width

        out.append(limit_render_length(code_segment, code_width) + DIVIDER
                   + limit_render_length(stack_segment, stack_width) + RESET_FG + "\n")

    out.append(BRIGHT_CYAN_FG + UNDERLINE + "F7:" + RESET_ATTR + " Step\t")
    out.append(BRIGHT_GREEN_FG + UNDERLINE + "F10:" + RESET_ATTR + " Toggle empty\t")
    if done:
        out.append(BRIGHT_RED_FG + UNDERLINE + "F11:" + RESET_ATTR + " Exit\t")
    out.append(RESET_ATTR + "\n")
    if error:
        out.append(BRIGHT_RED_FG + error + RESET_ATTR + "\n")
    return "".join(out)