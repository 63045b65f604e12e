"""Render expression trees back to surface syntax, or as an indented dump."""

from string import ascii_letters

from .types import Expr, Identifier, List, Noop, StringLiteral

INDENT = "  "


def render(expr: Expr) -> str:
    """Canonical surface syntax for ``expr``; ``parse(render(e)) == e``.

    Raises ValueError for trees with no textual form: a string literal
    holding a double quote, an identifier that isn't all ASCII letters,
    or a Noop nested inside a list.
    """
    if isinstance(expr, Noop):
        return ""
    return _render(expr)


def _render(expr: Expr) -> str:
    if isinstance(expr, List):
        return "(" + " ".join(_render(item) for item in expr.items) + ")"
    if isinstance(expr, Identifier):
        if not expr.name or any(c not in ascii_letters for c in expr.name):
            raise ValueError(f"cannot render identifier {expr.name!r}")
        return expr.name
    if isinstance(expr, StringLiteral):
        if '"' in expr.value:
            raise ValueError(f"cannot render string literal {expr.value!r}")
        return f'"{expr.value}"'
    if isinstance(expr, Noop):
        raise ValueError("Noop has no surface form inside a list")
    raise TypeError(f"not an expression: {expr!r}")


def dump(expr: Expr, depth: int = 0) -> str:
    pad = INDENT * depth
    if isinstance(expr, List):
        if not expr.items:
            return f"{pad}List []"
        lines = [f"{pad}List"]
        lines.extend(dump(item, depth + 1) for item in expr.items)
        return "\n".join(lines)
    if isinstance(expr, Identifier):
        return f"{pad}Identifier({expr.name!r})"
    if isinstance(expr, StringLiteral):
        return f"{pad}StringLiteral({expr.value!r})"
    if isinstance(expr, Noop):
        return f"{pad}Noop"
    raise TypeError(f"not an expression: {expr!r}")
