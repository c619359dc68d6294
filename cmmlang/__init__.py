"""Runtime pieces for the C-- scripting language: values, operators,
preprocessor, console/string/shell functions, debugger view and editor."""

__version__ = "0.2.0"