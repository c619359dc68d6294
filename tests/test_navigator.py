import pytest

from cmmlang.navigator import Key, Navigator, decode_key, run_debug_terminal
from cmmlang.renderer import HIDE_CURSOR, SELECT_BG, SHOW_CURSOR, Mode, StackFrame, StackVar


def reader(text):
    chars = iter(text)
    return lambda: next(chars, "")


class FakeDebugger:
    def __init__(self, total_lines=3, frames=None, error=""):
        self.line = 0
        self.total = total_lines
        self.steps = 0
        self.skip_requests = []
        self.frames = frames if frames is not None else [
            StackFrame("Global", [StackVar("a", "int", "1"), StackVar("b", "int", "2")]),
            StackFrame("main", [StackVar("c", "str", '"x"')]),
        ]
        self._error = error

    def step(self):
        self.steps += 1
        self.line += 1
        if self.line >= self.total:
            self.line = -1

    def is_done(self):
        return self.line == -1

    def current_line(self):
        return self.line

    def error(self):
        return self._error

    def stack_frames(self, skip_empty):
        self.skip_requests.append(skip_empty)
        return self.frames


CODE = "x = 1;\ny = 2;\nz = 3;\n"


@pytest.mark.parametrize("text, key", [
    ("\033[A", Key.UP),
    ("\033[B", Key.DOWN),
    ("\033[C", Key.RIGHT),
    ("\033[D", Key.LEFT),
    ("\033[18~", Key.STEP),
    ("\033[19~", Key.STEP_INTO),
    ("\033[20~", Key.CONTINUE),
    ("\033[21~", Key.TOGGLE_EMPTY),
    ("\033[23~", Key.EXIT),
    ("q", Key.QUIT),
    ("\x03", Key.QUIT),
    ("", Key.QUIT),
    ("x", Key.NONE),
    ("\033[99~", Key.NONE),
])
def test_decode_key(text, key):
    assert decode_key(reader(text)) is key


def test_decode_key_consumes_only_one_key():
    read = reader("\033[18~\033[A")
    assert decode_key(read) is Key.STEP
    assert decode_key(read) is Key.UP


def test_code_lines_split():
    nav = Navigator(CODE, FakeDebugger())
    assert nav.code_lines == ["x = 1;", "y = 2;", "z = 3;"]


def test_up_and_down_wrap_in_code_mode():
    nav = Navigator(CODE, FakeDebugger())
    assert nav.current_code_line == 0
    nav.handle(Key.UP)
    assert nav.current_code_line == len(nav.code_lines) - 1
    nav.handle(Key.DOWN)
    assert nav.current_code_line == 0


def test_right_and_left_switch_modes():
    nav = Navigator(CODE, FakeDebugger())
    nav.handle(Key.RIGHT)
    assert nav.mode is Mode.STACK_VARIABLE
    nav.handle(Key.LEFT)
    assert nav.mode is Mode.CODE


def test_stack_navigation_crosses_frames():
    nav = Navigator(CODE, FakeDebugger())
    nav.handle(Key.RIGHT)
    nav.handle(Key.DOWN)
    assert (nav.current_stack_index, nav.current_variable_index) == (0, 1)
    nav.handle(Key.DOWN)
    assert (nav.current_stack_index, nav.current_variable_index) == (1, 0)
    nav.handle(Key.DOWN)
    assert (nav.current_stack_index, nav.current_variable_index) == (1, 0)
    nav.handle(Key.UP)
    assert (nav.current_stack_index, nav.current_variable_index) == (0, 1)
    nav.handle(Key.UP)
    nav.handle(Key.UP)
    assert (nav.current_stack_index, nav.current_variable_index) == (0, 1)


def test_stack_navigation_with_no_frames_is_harmless():
    nav = Navigator(CODE, FakeDebugger(frames=[]))
    nav.handle(Key.RIGHT)
    assert nav.handle(Key.DOWN) is True
    assert (nav.current_stack_index, nav.current_variable_index) == (0, 0)


def test_step_advances_debugger_and_line():
    debugger = FakeDebugger()
    nav = Navigator(CODE, debugger)
    nav.handle(Key.STEP)
    assert debugger.steps == 1
    assert nav.current_code_line == debugger.current_line()


def test_step_does_nothing_when_done():
    debugger = FakeDebugger(total_lines=1)
    nav = Navigator(CODE, debugger)
    nav.handle(Key.STEP)
    nav.handle(Key.STEP)
    assert debugger.steps == 1


def test_exit_only_when_done():
    debugger = FakeDebugger(total_lines=1)
    nav = Navigator(CODE, debugger)
    assert nav.handle(Key.EXIT) is True
    nav.handle(Key.STEP)
    assert nav.handle(Key.EXIT) is False


def test_quit_closes():
    nav = Navigator(CODE, FakeDebugger())
    assert nav.handle(Key.QUIT) is False


def test_toggle_empty_changes_stack_request():
    debugger = FakeDebugger()
    nav = Navigator(CODE, debugger)
    nav.handle(Key.TOGGLE_EMPTY)
    assert nav.skip_empty is False
    assert debugger.skip_requests == [True, False]


def test_render_marks_executing_line_and_selection():
    nav = Navigator(CODE, FakeDebugger())
    screen = nav.render(80, 24)
    assert SELECT_BG + "> x = 1;" in screen
    assert "  y = 2;" in screen
    assert "Global" in screen
    assert "F11:" not in screen


def test_render_shows_exit_and_error():
    debugger = FakeDebugger(total_lines=1, error="boom")
    nav = Navigator(CODE, debugger)
    nav.handle(Key.STEP)
    screen = nav.render(80, 24)
    assert "F11:" in screen
    assert "boom" in screen


def test_run_debug_terminal_steps_and_quits():
    debugger = FakeDebugger()
    out = []
    run_debug_terminal(CODE, debugger, reader("\033[18~q"), out.append)
    assert debugger.steps == 1
    assert out[0] == HIDE_CURSOR
    assert out[-1].endswith(SHOW_CURSOR)
    assert any("y = 2;" in chunk for chunk in out)


def test_run_debug_terminal_ends_at_end_of_input():
    debugger = FakeDebugger()
    out = []
    run_debug_terminal(CODE, debugger, reader("\033[A"), out.append)
    assert debugger.steps == 0
    assert out[-1].endswith(SHOW_CURSOR)