"""Export S-expression trees as Graphviz dot files."""

import io
from itertools import count
from pathlib import Path
from typing import Optional, TextIO, Union

from .types import Atom, List, SExpr

_RECORD_SPECIALS = str.maketrans({c: "\\" + c for c in '\\"{}|<>'})


def _escape(value: str) -> str:
    return value.translate(_RECORD_SPECIALS)


def to_dot(root: Optional[SExpr], sink: TextIO) -> int:
    """Write root as a digraph to sink. Returns the number of nodes written.

    Nodes are numbered from 1 in depth-first pre-order: a node, then its
    list contents, then its following siblings.
    """
    ids = count(1)
    written = 0
    sink.write("digraph sexp {\n")
    # (node, id of the node pointing at it, port it points from)
    pending: list[tuple[SExpr, Optional[int], str]] = []
    if root is not None:
        pending.append((root, None, ""))
    while pending:
        node, parent, port = pending.pop()
        nid = next(ids)
        if isinstance(node, Atom):
            label = f"<type> ATOM value={_escape(node.value)}"
        elif isinstance(node, List):
            label = "<type> LIST"
        else:
            raise AssertionError(f"not an S-expression node: {type(node).__name__}")
        sink.write(f'  sx{nid} [shape=record,label="{label} | <list> list | <next> next"];\n')
        if parent is not None:
            sink.write(f"  sx{parent}:{port} -> sx{nid}:type;\n")
        written += 1

        if node.next is not None:
            pending.append((node.next, nid, "next"))
        if isinstance(node, List) and node.head is not None:
            pending.append((node.head, nid, "list"))
    sink.write("}\n")
    return written


def dot_text(root: Optional[SExpr]) -> str:
    buf = io.StringIO()
    to_dot(root, buf)
    return buf.getvalue()


def write_dot(root: Optional[SExpr], path: Union[str, Path]) -> int:
    with open(path, "w", encoding="utf-8") as f:
        return to_dot(root, f)
