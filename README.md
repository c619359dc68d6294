# cmmlang

Runtime pieces for C--, a small statically typed scripting language:

- **Values** (`cmmlang.values`): the value types `int`, `real`, `complex`,
  `str`, `bool`, `void` and `any` (`ValueType`), the typed `ValueObject`,
  the promotion rule that picks the common type of two operands
  (`common_type`), the table of allowed casts (`can_cast`), conversion
  (`cast_to`, `clone`) and text output (`to_string`).
- **Operators**: `cmmlang.arithmetic` has `add`, `sub`, `mul`, `div`,
  `mod`, `lshift`, `rshift`, `bitwise_or`, `bitwise_and`, `bitwise_xor` and
  `bitwise_not`; `cmmlang.comparison` has `logical_or`, `logical_and`,
  `logical_not`, `equal`, `not_equal`, `greater`, `less`, `greater_equal`
  and `less_equal`.
- **Preprocessor** (`cmmlang.preprocessor`): expands `#include <file>` lines
  recursively and collects `#bind <library>` lines.
- **Console, string and shell functions**: `cmmlang.stdlib_io`,
  `cmmlang.stdlib_str` and `cmmlang.stdlib_system`.
- **Debugger view** (`cmmlang.renderer`, `cmmlang.navigator`): the two-pane
  terminal debugger screen and its key handling.
- **Editor** (`cmmlang.editor`): opens an external editor on a temporary
  `.cmm` file and returns what was written.

## Values and operators

```python
from cmmlang.values import ValueObject, ValueType, common_type, can_cast, to_string
from cmmlang.arithmetic import add, div
from cmmlang.comparison import less

common_type(ValueType.INTEGER, ValueType.REAL)      # ValueType.REAL
can_cast(ValueType.STRING, ValueType.COMPLEX)       # False

total = add(ValueObject(ValueType.INTEGER, 2), ValueObject(ValueType.REAL, 0.5))
to_string(total)                                    # "2.5"

div(ValueObject(ValueType.INTEGER, -7), ValueObject(ValueType.INTEGER, 2)).value  # -3
less(ValueObject(ValueType.STRING, "ab"), ValueObject(ValueType.STRING, "xyz")).value  # True
```

Points worth knowing:

- Operands are brought to their common type before an operator runs;
  booleans rank lowest, then `int`, `real`, `complex`, `str`, and `any`.
  `void` has no common type with anything.
- Integer division truncates toward zero and `mod` takes the sign of the
  dividend. Dividing by zero raises `DivisionByZeroError`.
- `+` concatenates strings; on booleans `+` is OR, `-` is XOR and `*` is AND.
- Mod, shifts and bitwise operators take integers only. An operator that does
  not apply to the common type raises `OperationError`.
- `greater`, `less`, `greater_equal`, `less_equal` and `not_equal` compare
  strings by length; `equal` compares their contents.
- `cast_to` raises `ConversionError` for a conversion the language does not
  define, such as `str` to `complex`, or text that is not a number.
- `to_string` writes booleans as `true`/`false`, complex numbers as
  `1.0+2.0i`, and `void` as `void`.

## Preprocessing

```python
from cmmlang.preprocessor import process_content, load_file

code, binds = process_content("#include <prelude>\nprint(1);\n", ["./lib", "."])
```

`process_content`, `process_lines` and `load_file` return a
`PreprocessResult` holding `code` (the expanded text) and `binds` (the paths
named by `#bind` lines, in the order met); it also unpacks as a pair.
`find_file` looks in each search directory for the name as given and then
with `.cmm` appended. An included file's own directory is searched first for
its includes. A missing include or bind target raises `FileNotFoundError`.

## Console, string and shell functions

Each function takes `(signature, params)`, where `params` is a sequence of
`ValueObject`, and returns a `ValueObject`. Each module's `register(add)`
calls `add(name, param_types, by_ref, handler)` once per overload:

```python
from cmmlang import stdlib_io, stdlib_str, stdlib_system

table = {}
def add(name, param_types, by_ref, handler):
    table.setdefault(name, []).append((param_types, by_ref, handler))

for module in (stdlib_io, stdlib_str, stdlib_system):
    module.register(add)
```

- `stdlib_io`: `input` (`read_input`, reads one word as the named type),
  `getLine` (`get_line`), `print` (`print_value`, one overload per printable
  type) and `endl`.
- `stdlib_str`: `strlen`, `charAt` (`char_at`), `slice` (`slice_string`,
  inclusive end), `charAdd` (`char_add`, shifts every byte modulo 256) and
  `charOf` (`char_of`).
- `stdlib_system`: `system` (`run_system`), which runs a shell command and
  returns its wait status.

## Debugger view

`cmmlang.renderer.render_frame` builds one screen for a given terminal size
from the code lines and a list of `StackFrame`s (each a header and
`StackVar` entries). `build_stack_view`, `pad_string` and
`limit_render_length` are the pieces it is made of; the last cuts a line to a
number of visible columns while keeping colour escape sequences intact.

`cmmlang.navigator.run_debug_terminal(code, debugger)` runs the interactive
loop. `debugger` is any object with `step()`, `is_done()`, `current_line()`,
`error()` and `stack_frames(skip_empty)`. Arrow keys move through the code
and the stack variables, F7 steps, F10 toggles empty frames, F11 leaves once
the program is done, and `q` or Ctrl+C quits. `read_char` and `write` may be
given to drive it without a terminal; `Navigator` and `decode_key` hold the
state and key decoding on their own.

## Editor

`cmmlang.editor.edit()` runs `xterm` with `nano` on a temporary `.cmm` file
and returns its text, or `""` if no file was written. Pass `command` (a list
of arguments, the file path is appended) and `temp_dir` to use another
editor or directory.

## What the package does not do

There is no parser or interpreter for C-- source here and no command-line
program: nothing turns preprocessed code into a running program, executes
statements, or produces a debugger session to feed `run_debug_terminal`.
There is no registry that dispatches native function calls by name and
argument types, and no loading of `#bind` libraries; `register(add)` only
hands functions to whatever `add` you supply. Math and clock/sleep functions
are not included.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.