"""State-machine scanner turning S-expression source into tokens.

Each state is a generator method: it yields the tokens it emits and returns
the next state (None once the scan is done). The cursor moves one code
point at a time and tracks UTF-8 byte offsets alongside the code point
index, so every token knows its exact byte range in the source.
"""

import logging
from typing import Iterator, Optional, Union

from .types import DEFAULT_LABEL, Token, TokenKind

logger = logging.getLogger(__name__)

EOF = None
WHITESPACE = frozenset(" \t\r\n")

Source = Union[str, bytes, bytearray, memoryview]


class SourceError(SyntaxError):
    """A problem located at a byte range of the source."""

    def __init__(self, message: str, start: int, end: int, label: str = DEFAULT_LABEL):
        # tracebacks print SyntaxError.msg, not str(), so msg holds the location too
        super().__init__(f"{label}: bytes {start}-{end}: {message}")
        self.message = message
        self.start = start
        self.end = end
        self.label = label

    def __str__(self) -> str:
        return self.msg


class ScanError(SourceError):
    """Lexical failure. The scanner reports it in-band as an ERROR token."""

    @classmethod
    def from_token(cls, token: Token, label: str = DEFAULT_LABEL) -> "ScanError":
        return cls(token.text, token.start, token.end, label)


def _utf8_width(ch: str) -> int:
    cp = ord(ch)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if 0xDC80 <= cp <= 0xDCFF:
        # undecodable byte smuggled through surrogateescape
        return 1
    if cp < 0x10000:
        return 3
    return 4


class Scanner:
    def __init__(self, src: Source, label: str = DEFAULT_LABEL):
        if not isinstance(src, str):
            src = bytes(src).decode("utf-8", "surrogateescape")
        self.src = src
        self.label = label
        self._start = 0  # code point index where the pending token begins
        self._pos = 0
        self._start_offset = 0  # same two positions, in bytes
        self._offset = 0
        self._width = 0
        self._byte_width = 0
        self._ran = False

    # --- cursor ---

    def _next(self) -> Optional[str]:
        if self._pos >= len(self.src):
            self._width = self._byte_width = 0
            return EOF
        ch = self.src[self._pos]
        self._width = 1
        self._byte_width = _utf8_width(ch)
        self._pos += 1
        self._offset += self._byte_width
        return ch

    def _backup(self) -> None:
        """Undo the last _next(). Only one step of undo is kept."""
        self._pos -= self._width
        self._offset -= self._byte_width
        self._width = self._byte_width = 0

    def _peek(self) -> Optional[str]:
        ch = self._next()
        self._backup()
        return ch

    def _ignore(self) -> None:
        self._start = self._pos
        self._start_offset = self._offset

    def _emit(self, kind: TokenKind) -> Token:
        tok = Token(kind, self.src[self._start:self._pos], self._start_offset, self._offset)
        self._ignore()
        return tok

    def _flush_atom(self) -> Iterator[Token]:
        if self._pos > self._start:
            yield self._emit(TokenKind.ATOM)

    # --- states ---

    def tokens(self) -> Iterator[Token]:
        """Lazily yield every token, ending with END_OF_INPUT or ERROR."""
        if self._ran:
            raise RuntimeError("scanner already ran; create a new one to rescan")
        self._ran = True
        state = self._lex_default
        while state is not None:
            state = yield from state()
        logger.debug(f"{self.label}: scan finished at byte {self._offset}")

    __iter__ = tokens

    def _lex_default(self):
        while True:
            ch = self._peek()
            if ch == "(" or ch == ")":
                yield from self._flush_atom()
                return self._lex_paren
            if ch == '"':
                yield from self._flush_atom()
                self._next()
                self._ignore()
                return self._lex_quoted
            if ch in WHITESPACE:
                yield from self._flush_atom()
                return self._lex_whitespace
            if ch is EOF:
                yield from self._flush_atom()
                yield self._emit(TokenKind.END_OF_INPUT)
                return None
            self._next()

    def _lex_paren(self):
        ch = self._next()
        yield self._emit(TokenKind.LEFT_PAREN if ch == "(" else TokenKind.RIGHT_PAREN)
        return self._lex_default

    def _lex_quoted(self):
        # the opening quote is always one byte, just before the run
        quote_offset = self._start_offset - 1
        while True:
            ch = self._peek()
            if ch is EOF:
                logger.debug(f"{self.label}: unterminated quoted atom at byte {quote_offset}")
                yield Token(TokenKind.ERROR, "unterminated quoted atom", quote_offset, self._offset)
                return None
            if ch == '"':
                yield self._emit(TokenKind.QUOTED_ATOM)
                self._next()
                self._ignore()
                return self._lex_default
            self._next()

    def _lex_whitespace(self):
        while self._peek() in WHITESPACE:
            self._next()
        self._ignore()
        # emits nothing, but must be a generator like every other state
        yield from ()
        return self._lex_default


def scan(src: Source, label: str = DEFAULT_LABEL) -> Iterator[Token]:
    """Scan src from the start with a fresh Scanner."""
    return Scanner(src, label).tokens()
