"""Readable rendering of values, used by `pr-str`, `str`, `println` and error messages."""

from __future__ import annotations

from fractions import Fraction
from io import StringIO

from scopeval import LispValue
from scopeval.types.lambda_fn import Fn
from scopeval.types.map_form import MapForm
from scopeval.types.nil import is_nil
from scopeval.types.symbol import Symbol, Keyword

STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def _write(buffer: StringIO, obj: LispValue, readably: bool) -> None:
    if is_nil(obj):
        buffer.write("nil")
    elif obj is True:
        buffer.write("true")
    elif obj is False:
        buffer.write("false")
    elif isinstance(obj, str):
        if readably:
            buffer.write('"')
            buffer.write("".join(STRING_ESCAPES.get(ch, ch) for ch in obj))
            buffer.write('"')
        else:
            buffer.write(obj)
    elif isinstance(obj, (Symbol, Keyword, Fn)):
        buffer.write(str(obj))
    elif isinstance(obj, Fraction):
        buffer.write(f"{obj.numerator}/{obj.denominator}")
    elif isinstance(obj, list):
        _write_seq(buffer, obj, "(", ")", readably)
    elif isinstance(obj, tuple):
        _write_seq(buffer, obj, "[", "]", readably)
    elif isinstance(obj, (dict, MapForm)):
        buffer.write("{")
        first = True
        for k, v in (obj.items() if isinstance(obj, dict) else obj.pairs):
            if not first:
                buffer.write(", ")
            _write(buffer, k, readably)
            buffer.write(" ")
            _write(buffer, v, readably)
            first = False
        buffer.write("}")
    elif callable(obj):
        buffer.write(f"#<builtin {getattr(obj, 'lisp_name', getattr(obj, '__name__', '?'))}>")
    else:
        buffer.write(str(obj))


def _write_seq(buffer: StringIO, items, open_: str, close: str, readably: bool) -> None:
    buffer.write(open_)
    for i, item in enumerate(items):
        if i:
            buffer.write(" ")
        _write(buffer, item, readably)
    buffer.write(close)


def pr_str(obj: LispValue) -> str:
    """Render `obj` so that reading the text back gives an equal value."""
    with StringIO() as buffer:
        _write(buffer, obj, True)
        return buffer.getvalue()


def print_str(obj: LispValue) -> str:
    """Render `obj` for display, with strings unquoted at every level."""
    with StringIO() as buffer:
        _write(buffer, obj, False)
        return buffer.getvalue()


def str_value(obj: LispValue) -> str:
    """Render `obj` the way `str` does: nil is empty, a string is itself."""
    if is_nil(obj):
        return ""
    if isinstance(obj, str):
        return obj
    return pr_str(obj)
