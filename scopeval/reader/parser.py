"""
  Reader: lexer and parser for the textual form of expressions.

- Streaming, lazy parsing
- Emits plain Python values:

    - nil -> Nil
    - true / false -> True / False
    - lists -> Python list
    - vectors -> Python tuple
    - maps -> Python dict (MapForm when a key is an unhashable form)
    - symbols -> Symbol
    - keywords -> Keyword
    - strings -> str
    - numbers -> int / float / Fraction
    - quote forms -> [Symbol("quote"), expr], etc.
"""

from __future__ import annotations

import re
from fractions import Fraction
from typing import Iterator, Optional

from scopeval import SExpression
from scopeval.errors import ReaderError
from scopeval.types.map_form import MapForm
from scopeval.types.nil import Nil
from scopeval.types.symbol import Symbol, Keyword


TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<syntax_quote>`)"  # `
    r"|(?P<unquote>~@|~)"  # ~ and ~@
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<bad_string>")'  # unterminated string
    r'|(?P<atom>[^\s()\[\]{}\'`~",;]+)'  # numbers, symbols, keywords
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+")
RATIO_RE = re.compile(r"([+-]?\d+)/(\d+)")
FLOAT_RE = re.compile(r"[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?")

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("syntax-quote"),
    "~": Symbol("unquote"),
    "~@": Symbol("unquote-splicing"),
}

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

CLOSERS: dict[str, str] = {
    "lparen": "rparen",
    "lbracket": "rbracket",
    "lbrace": "rbrace",
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            # Only separators remain
            if source[pos:].strip(" \t\r\n,") == "":
                return
            raise ReaderError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        if kind == "bad_string":
            raise ReaderError(f"Unterminated string starting at {m.start(kind)}")
        yield kind, m.group(kind)


def unescape(literal: str) -> str:
    out = []
    body = literal[1:-1]
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\":
            i += 1
            esc = body[i]
            if esc not in STRING_ESCAPES:
                raise ReaderError(f"Unsupported escape character: \\{esc}")
            out.append(STRING_ESCAPES[esc])
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def parse_atom(token: str) -> SExpression:
    """Convert a bare token into a number, keyword, constant, or symbol."""
    if token == "nil":
        return Nil
    if token == "true":
        return True
    if token == "false":
        return False
    if token.startswith(":"):
        if len(token) == 1:
            raise ReaderError("Invalid token: :")
        return Keyword(token)
    if INT_RE.fullmatch(token):
        return int(token)
    m = RATIO_RE.fullmatch(token)
    if m:
        denominator = int(m.group(2))
        if denominator == 0:
            raise ReaderError(f"Divide by zero in ratio literal: {token}")
        value = Fraction(int(m.group(1)), denominator)
        return value.numerator if value.denominator == 1 else value
    if FLOAT_RE.fullmatch(token):
        return float(token)
    if token[0].isdigit() or (token[0] in "+-" and token[1:2].isdigit()):
        raise ReaderError(f"Invalid number: {token}")
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def _parse_until(self, opener: str) -> list[SExpression]:
        closer = CLOSERS[opener]
        items = []
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise ReaderError(f"EOF while reading, expected {closer}")
            if tok_type == closer:
                self.advance()
                return items
            if tok_type in ("rparen", "rbracket", "rbrace"):
                raise ReaderError(f"Unmatched delimiter: {tok_val}")
            items.append(self.parse_expr())

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise ReaderError("EOF while reading")

        if tok_type == "atom":
            return parse_atom(tok_val)

        if tok_type == "string":
            return unescape(tok_val)

        # Quote forms: 'x `x ~x ~@x
        if tok_type in ("quote", "syntax_quote", "unquote"):
            if self.peek()[0] is None:
                raise ReaderError(f"EOF after {tok_val}")
            return [QUOTE_FORMS[tok_val], self.parse_expr()]

        if tok_type == "lparen":
            return self._parse_until("lparen")

        if tok_type == "lbracket":
            return tuple(self._parse_until("lbracket"))

        if tok_type == "lbrace":
            items = self._parse_until("lbrace")
            if len(items) % 2:
                raise ReaderError("Map literal must contain an even number of forms")
            pairs = list(zip(items[::2], items[1::2]))
            result: dict = {}
            for key, value in pairs:
                try:
                    if key in result:
                        raise ReaderError(f"Duplicate key: {key}")
                    result[key] = value
                except TypeError:
                    # Keys such as 'x are forms; they become hashable once evaluated
                    return MapForm(pairs)
            return result

        raise ReaderError(f"Unmatched delimiter: {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_all(source: str) -> list[SExpression]:
    """Read every form in `source`."""
    return list(TokenStream(lex(source)).parse_all())


def read(source: str) -> SExpression:
    """Read exactly one form from `source`."""
    forms = read_all(source)
    if len(forms) != 1:
        raise ReaderError(f"Expected exactly one form, found {len(forms)}")
    return forms[0]
