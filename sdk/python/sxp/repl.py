"""Interactive front end: read a line, parse it, print the tree or the error."""

import sys
from typing import Callable, Optional, TextIO

from .parser import ParseError, parse
from .printer import dump

try:
    import readline
except ImportError:  # readline is not available on every platform
    readline = None

PROMPT = ">> "


def _readline_history() -> Optional[Callable[[str], None]]:
    if readline is None:
        return None
    # Only lines that parse go into history.
    readline.set_auto_history(False)
    return readline.add_history


def repl(
    read_line: Optional[Callable[[str], str]] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    add_history: Optional[Callable[[str], None]] = None,
) -> int:
    """Run the read-parse-print loop until input is exhausted.

    Returns the number of lines that parsed successfully.
    """
    if read_line is None:
        read_line = input
        if add_history is None:
            add_history = _readline_history()
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr

    accepted = 0
    while True:
        try:
            line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            return accepted
        try:
            ast = parse(line)
        except ParseError as e:
            print(e.message, file=err)
            continue
        accepted += 1
        if add_history is not None:
            add_history(line)
        print(dump(ast), file=out)
