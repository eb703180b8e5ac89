"""Parser building S-expression trees from a token stream."""

import logging
from typing import Any, Optional, Union

from .scanner import ScanError, Source, SourceError
from .stream import TokenStream
from .types import DEFAULT_LABEL, Atom, List, ParseOptions, SExpr, Token, TokenKind

logger = logging.getLogger(__name__)


class ParseError(SourceError):
    pass


class _Frame:
    """An open list: the token that opened it and the elements read so far."""

    __slots__ = ("opener", "items", "head")

    def __init__(self, opener: Optional[Token]):
        self.opener = opener
        self.items: list[Union[Token, "_Frame"]] = []
        self.head: Optional[SExpr] = None

    def close(self) -> "_Frame":
        self.head = _link(self.items)
        self.items = []
        return self


def _link(items: list) -> Optional[SExpr]:
    # Nodes are immutable, so each sibling chain is built back to front.
    node: Optional[SExpr] = None
    for item in reversed(items):
        if isinstance(item, _Frame):
            node = List(item.head, node)
        else:
            node = Atom(item.text, item.kind is TokenKind.QUOTED_ATOM, node)
    return node


def _options(options: Any) -> ParseOptions:
    if options is None:
        return ParseOptions()
    if isinstance(options, dict):
        return ParseOptions(**options)
    return options


def parse(src: Source, label: str = DEFAULT_LABEL, options: Any = None) -> Optional[SExpr]:
    """Parse S-expression source into a tree.

    Returns the first top-level node (its siblings follow through `next`),
    or None when the source holds no element at all.
    """
    return parse_stream(TokenStream.from_source(src, label), options)


def parse_stream(stream: TokenStream, options: Any = None) -> Optional[SExpr]:
    """Build a tree from stream, pulling exactly one token per step.

    Args:
        stream: Token stream; consumed up to and including its terminal token
        options: ParseOptions, a dict of its fields, or None for defaults

    Raises:
        ParseError: on a scan error, an unmatched parenthesis in strict mode,
            or nesting deeper than options.max_depth
    """
    opts = _options(options)
    label = stream.label
    frames = [_Frame(None)]

    for tok in stream:
        kind = tok.kind

        if kind is TokenKind.LEFT_PAREN:
            if len(frames) > opts.max_depth:
                raise ParseError("max nesting depth exceeded", tok.start, tok.end, label)
            frames.append(_Frame(tok))

        elif kind is TokenKind.RIGHT_PAREN:
            if len(frames) == 1:
                if opts.strict:
                    raise ParseError("unexpected ')'", tok.start, tok.end, label)
                logger.warning(f"{label}: skipping unmatched ')' at byte {tok.start}")
                continue
            done = frames.pop().close()
            frames[-1].items.append(done)

        elif kind is TokenKind.ATOM or kind is TokenKind.QUOTED_ATOM:
            frames[-1].items.append(tok)

        elif kind is TokenKind.END_OF_INPUT:
            if len(frames) > 1:
                opener = frames[-1].opener
                if opts.strict:
                    raise ParseError("unexpected end of input inside list", opener.start, tok.end, label)
                logger.warning(f"{label}: closing {len(frames) - 1} unterminated list(s) at end of input")
                while len(frames) > 1:
                    done = frames.pop().close()
                    frames[-1].items.append(done)
            break

        elif kind is TokenKind.ERROR:
            raise ParseError(f"scan error: {tok.text}", tok.start, tok.end, label) from ScanError.from_token(tok, label)

        else:
            raise AssertionError(f"unknown token kind: {kind!r}")

    logger.debug(f"{label}: parsed {stream.consumed} tokens")
    return frames[0].close().head
