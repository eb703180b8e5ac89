"""Forward-only token channel between the scanner and its consumer."""

import logging
from typing import Iterable, Iterator

from .scanner import Source, scan
from .types import DEFAULT_LABEL, Token

logger = logging.getLogger(__name__)


class TokenStream:
    """Pull-based stream: each next() makes the producer scan one more token.

    The stream ends right after its terminal token (END_OF_INPUT or ERROR)
    and cannot be rewound; to read the input again, scan it again.
    """

    def __init__(self, tokens: Iterable[Token], label: str = DEFAULT_LABEL):
        self.label = label
        self.consumed = 0
        self._tokens: Iterator[Token] = iter(tokens)
        self._finished = False

    @classmethod
    def from_source(cls, src: Source, label: str = DEFAULT_LABEL) -> "TokenStream":
        return cls(scan(src, label), label)

    @property
    def finished(self) -> bool:
        return self._finished

    def __iter__(self) -> "TokenStream":
        return self

    def __next__(self) -> Token:
        if self._finished:
            raise StopIteration
        try:
            tok = next(self._tokens)
        except StopIteration:
            self._finished = True
            raise RuntimeError(f"{self.label}: token source ended without a terminal token") from None
        self.consumed += 1
        if tok.terminal:
            self._finish()
        return tok

    def _finish(self) -> None:
        self._finished = True
        close = getattr(self._tokens, "close", None)
        if close is not None:
            close()
        logger.debug(f"{self.label}: stream finished after {self.consumed} tokens")
