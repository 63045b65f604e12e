from .types import Expr, Noop, List, Identifier, StringLiteral
from .parser import parse, Parser, ParseError, MAX_DEPTH, depth_ceiling
from .printer import render, dump
from .repl import repl

__all__ = [
    "Expr", "Noop", "List", "Identifier", "StringLiteral",
    "parse", "Parser", "ParseError", "MAX_DEPTH", "depth_ceiling",
    "render", "dump", "repl",
]
