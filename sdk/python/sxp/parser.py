"""Single-pass recursive-descent parser for sxp expressions.

Scanning and parsing are fused: the parser walks a cursor over the source
text with one character of lookahead and never backtracks.
"""

import sys
from string import ascii_letters
from typing import Optional

from .types import Expr, Identifier, List, Noop, StringLiteral

MAX_DEPTH = 256

# ASCII whitespace, excluding vertical tab.
WHITESPACE = " \t\n\r\f"

# Frames reserved for callers above parse(); each nesting level costs two.
_STACK_HEADROOM = 200

_CHAR_ESCAPES = {
    "\0": "\\0",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "'": "\\'",
    "\\": "\\\\",
}


class ParseError(SyntaxError):
    """The single parse failure kind. The message is the whole payload."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class _Cursor:
    __slots__ = ("src", "pos", "line", "col")

    def __init__(self, src: str):
        self.src = src
        self.pos = 0
        self.line = 1
        self.col = 1

    def peek(self) -> Optional[str]:
        if self.pos < len(self.src):
            return self.src[self.pos]
        return None

    def next(self) -> Optional[str]:
        c = self.peek()
        if c is None:
            return None
        self.pos += 1
        if c == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return c


def depth_ceiling() -> int:
    """Deepest nesting the current recursion limit can parse without overflow."""
    return max(1, (sys.getrecursionlimit() - _STACK_HEADROOM) // 2)


def _debug_char(c: str) -> str:
    """Quote a character for an error message: 'a', '\\'', '\\n', '\\u{b}'."""
    if c in _CHAR_ESCAPES:
        return f"'{_CHAR_ESCAPES[c]}'"
    if not c.isprintable():
        return f"'\\u{{{ord(c):x}}}'"
    return f"'{c}'"


def _is_letter(c: Optional[str]) -> bool:
    return c is not None and c in ascii_letters


class Parser:
    """Parses one complete expression out of ``code``.

    A Parser is single-use: it owns a fresh cursor positioned at line 1,
    column 1. Use the module-level ``parse`` for the one-shot call.
    """

    def __init__(self, code: str, max_depth: int = MAX_DEPTH):
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.cursor = _Cursor(code)
        # Bounds above what the interpreter stack can hold are clamped.
        self.max_depth = min(max_depth, depth_ceiling())
        self.depth = 0

    @property
    def line(self) -> int:
        return self.cursor.line

    @property
    def col(self) -> int:
        return self.cursor.col

    def parse(self) -> Expr:
        expr = self.parse_expr()
        c = self.cursor.next()
        if c is not None:
            raise ParseError(f"Unexpected character {_debug_char(c)} after expression")
        return expr

    def error(self, msg: str) -> ParseError:
        return ParseError(f"ERROR: {msg} on line {self.line} column {self.col}")

    def skip_whitespace(self) -> None:
        while True:
            c = self.cursor.peek()
            if c is None or c not in WHITESPACE:
                return
            self.cursor.next()

    def parse_expr(self) -> Expr:
        self.skip_whitespace()
        c = self.cursor.peek()
        if c is None:
            return Noop()
        if c == "(":
            return self.parse_list()
        if c == '"':
            return self.parse_string_literal()
        if _is_letter(c):
            return self.parse_identifier()
        raise self.error(f"unexpected char {_debug_char(c)} in expression")

    def parse_identifier(self) -> Identifier:
        c = self.cursor.next()
        if c is None:
            raise self.error("no identifier")
        if not _is_letter(c):
            raise self.error(f"Identifier can't start with {_debug_char(c)}")
        chars = [c]
        while _is_letter(self.cursor.peek()):
            chars.append(self.cursor.next())
        return Identifier("".join(chars))

    def parse_string_literal(self) -> StringLiteral:
        if self.cursor.next() != '"':
            raise RuntimeError("string literal should start with a double quote")
        chars: list[str] = []
        while True:
            c = self.cursor.next()
            if c is None:
                raise self.error("Unterminated string literal")
            if c == '"':
                return StringLiteral("".join(chars))
            chars.append(c)

    def parse_list(self) -> List:
        c = self.cursor.next()
        if c != "(":
            raise self.error(f"expected '(' to start a list, got {c!r}")
        self.depth += 1
        try:
            if self.depth > self.max_depth:
                raise self.error("maximum nesting depth exceeded")
            items: list[Expr] = []
            while True:
                self.skip_whitespace()
                c = self.cursor.peek()
                if c == ")":
                    self.cursor.next()
                    return List(items)
                if c is None:
                    raise self.error("Unterminated list")
                items.append(self.parse_expr())
        finally:
            self.depth -= 1


def parse(code: str, max_depth: int = MAX_DEPTH) -> Expr:
    """Parse ``code`` into exactly one expression.

    Empty or all-whitespace input yields ``Noop``. Any character left over
    after the expression, trailing whitespace included, is an error.

    Raises:
        ParseError: on the first problem found, in lexical order.
    """
    return Parser(code, max_depth).parse()
