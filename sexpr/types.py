from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

DEFAULT_LABEL = "<string>"
MAX_DEPTH = 256


class TokenKind(Enum):
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    ATOM = "atom"
    QUOTED_ATOM = "quoted"
    END_OF_INPUT = "eof"
    ERROR = "error"


TERMINAL_KINDS = (TokenKind.END_OF_INPUT, TokenKind.ERROR)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    start: int = 0  # byte offsets into the source, half-open
    end: int = 0

    @property
    def terminal(self) -> bool:
        return self.kind in TERMINAL_KINDS

    def __str__(self) -> str:
        if self.kind is TokenKind.END_OF_INPUT:
            return "EOF"
        if self.kind is TokenKind.ERROR:
            return self.text
        if len(self.text) > 20:
            return f'{self.kind.name}:"{self.text[:20]}"...'
        return f'{self.kind.name}:"{self.text}"'


class SExpr:
    """Base of the two node kinds. Every node links to its next sibling."""

    next: Optional["SExpr"]

    def siblings(self) -> Iterator["SExpr"]:
        node: Optional[SExpr] = self
        while node is not None:
            yield node
            node = node.next

    def __eq__(self, other):
        if not isinstance(other, SExpr):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            a, b = pending.pop()
            if a is None or b is None:
                if a is not b:
                    return False
                continue
            if type(a) is not type(b):
                return False
            if isinstance(a, Atom):
                if a.value != b.value or a.quoted != b.quoted:
                    return False
            else:
                pending.append((a.head, b.head))
            pending.append((a.next, b.next))
        return True

    __hash__ = None


@dataclass(frozen=True, eq=False, repr=False)
class Atom(SExpr):
    value: str
    quoted: bool = False
    next: Optional[SExpr] = None

    def __repr__(self) -> str:
        if self.quoted:
            return f"Atom({self.value!r}, quoted=True)"
        return f"Atom({self.value!r})"


@dataclass(frozen=True, eq=False, repr=False)
class List(SExpr):
    head: Optional[SExpr] = None
    next: Optional[SExpr] = None

    def children(self) -> Iterator[SExpr]:
        if self.head is not None:
            yield from self.head.siblings()

    def __repr__(self) -> str:
        parts = ["List["]
        # sibling chains to resume once the inner list is closed
        resume: list[Optional[SExpr]] = [None]
        node = self.head
        while resume:
            if node is None:
                parts.append("]")
                node = resume.pop()
                if node is not None:
                    parts.append(", ")
                continue
            if isinstance(node, List):
                parts.append("List[")
                resume.append(node.next)
                node = node.head
                continue
            parts.append(repr(node))
            node = node.next
            if node is not None:
                parts.append(", ")
        return "".join(parts)


@dataclass
class ParseOptions:
    strict: bool = True
    max_depth: int = MAX_DEPTH
