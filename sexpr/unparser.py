"""Tree-to-text unparser."""

from typing import Iterator, Optional

from .types import Atom, List, SExpr

SPACE = b" "
OPEN = b"("
CLOSE = b")"
QUOTE = b'"'


def unparse(root: Optional[SExpr]) -> Iterator[bytes]:
    """Lazily yield the UTF-8 text of root and its siblings.

    Siblings are separated by exactly one space, list contents are wrapped
    in parentheses and quoted atoms get their quotes back.
    """
    # sibling chains to resume once the list being written is closed
    resume: list[Optional[SExpr]] = []
    node = root
    while node is not None or resume:
        if node is None:
            yield CLOSE
            node = resume.pop()
            if node is not None:
                yield SPACE
            continue

        if isinstance(node, List):
            yield OPEN
            resume.append(node.next)
            node = node.head
            continue

        if not isinstance(node, Atom):
            raise AssertionError(f"not an S-expression node: {type(node).__name__}")
        text = node.value.encode("utf-8", "surrogateescape")
        yield QUOTE + text + QUOTE if node.quoted else text
        node = node.next
        if node is not None:
            yield SPACE


def unparse_text(root: Optional[SExpr]) -> str:
    return b"".join(unparse(root)).decode("utf-8", "surrogateescape")
