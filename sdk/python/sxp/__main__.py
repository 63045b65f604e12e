"""CLI: python -m sxp [file.sxp]"""

import sys
from pathlib import Path

from .parser import ParseError, parse
from .printer import dump
from .repl import repl


def main():
    if len(sys.argv) > 2:
        print("Usage: python -m sxp [file.sxp]", file=sys.stderr)
        sys.exit(1)

    if len(sys.argv) == 1:
        repl()
        return

    src = Path(sys.argv[1]).read_text().strip()
    try:
        ast = parse(src)
    except ParseError as e:
        print(e.message, file=sys.stderr)
        sys.exit(1)

    print(dump(ast))


if __name__ == "__main__":
    main()
