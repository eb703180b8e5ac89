"""CLI: python -m sexpr [--tokens] [--tree] [--dot out.dot] <file.sexp | ->"""

import argparse
import logging
import sys
from pathlib import Path

from .dot import write_dot
from .dump import dump_tokens
from .parser import ParseError, parse
from .stream import TokenStream
from .types import MAX_DEPTH, ParseOptions
from .unparser import unparse_text


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="sexpr", description="Scan and parse S-expressions.")
    ap.add_argument("source", nargs="?", default="-", help="Input file (default: stdin)")
    ap.add_argument("--label", help="Name used in diagnostics (default: the file name)")
    ap.add_argument("--tokens", action="store_true", help="Dump the token stream instead of parsing")
    ap.add_argument("--tree", action="store_true", help="Also print the parsed tree structure")
    ap.add_argument("--dot", type=Path, help="Write a Graphviz .dot diagram of the tree")
    ap.add_argument("--lenient", action="store_true", help="Close unterminated lists and skip stray ')'")
    ap.add_argument("--max-depth", type=int, default=MAX_DEPTH, help="Maximum list nesting depth")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.source == "-":
        data = sys.stdin.buffer.read()
        label = args.label or "<stdin>"
    else:
        data = Path(args.source).read_bytes()
        label = args.label or args.source

    if args.tokens:
        dump_tokens(TokenStream.from_source(data, label))
        return 0

    try:
        root = parse(data, label, ParseOptions(strict=not args.lenient, max_depth=args.max_depth))
    except ParseError as e:
        print(e, file=sys.stderr)
        return 1

    print(unparse_text(root))
    if args.tree and root is not None:
        for node in root.siblings():
            print(repr(node))
    if args.dot:
        n = write_dot(root, args.dot)
        print(f"[+] wrote {n} nodes to {args.dot}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
