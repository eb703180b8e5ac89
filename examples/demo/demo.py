"""
S-expression End-to-End Example (Python)

Demonstrates the full pipeline:
1. Scan source text into tokens
2. Parse the token stream into a tree
3. Unparse the tree back into canonical text
4. Export the tree as a Graphviz diagram
5. Report an unterminated quoted atom

Run: pip install -e . && python examples/demo/demo.py
"""

from sexpr import ParseError, TokenStream, dump_tokens, parse, unparse_text
from sexpr.dot import dot_text

print("=== S-expression Demo ===\n")

source = '(test (test2 "i am long" test3) blah)'

# 1. Tokens
print("1. Tokens")
n = dump_tokens(TokenStream.from_source(source, "demo"))
print(f"   ({n} tokens)\n")

# 2. Parse
root = parse(source, "demo")
print("2. Parsed tree")
print(f"   {root!r}\n")

# 3. Unparse
print("3. Canonical text")
print(f"   {unparse_text(root)}\n")

# 4. Graphviz
print("4. Graphviz diagram")
print(dot_text(root))

# 5. Errors carry byte ranges
print("5. Unterminated quote")
try:
    parse('(a "b', "demo")
except ParseError as e:
    print(f"   {e}")

print("\n=== Done ===")
