"""
sxp End-to-End Example

Demonstrates the public API:
1. Parse a multi-line program into a tree
2. Render the tree back to canonical text
3. Show how whitespace between tokens is irrelevant
4. Inspect parse errors with line/column positions

Run: pip install -e . && python examples/e2e/e2e.py
"""

from sxp import ParseError, dump, parse, render

print("=== sxp E2E Demo ===\n")

# 1. Parse
program = """(define greeting
  (concat "hello, " name))"""

ast = parse(program)
print("1. Parsed tree:")
print(dump(ast))
print()

# 2. Render
canonical = render(ast)
print("2. Canonical form:")
print(f"   {canonical}")
assert parse(canonical) == ast
print("   Round trip OK\n")

# 3. Whitespace
spread = "(define\tgreeting\n\n   (concat \"hello, \"   name) )"
print("3. Extra whitespace parses to the same tree:", parse(spread) == ast, "\n")

# 4. Errors
print("4. Errors:")
for src in ["(define greeting", '"unterminated', "abc123", "(a\n  #b)", "(a) "]:
    try:
        parse(src)
    except ParseError as e:
        print(f"   {src!r:22} -> {e.message}")

print("\n=== Done ===")
