"""Debug dump of a token stream."""

import sys
from typing import Iterable, Optional, TextIO

from .types import Token


def dump_tokens(tokens: Iterable[Token], out: Optional[TextIO] = None) -> int:
    """Print one token per line, stopping right after the terminal token."""
    out = out or sys.stdout
    n = 0
    for tok in tokens:
        print(tok, file=out)
        n += 1
        if tok.terminal:
            break
    return n
