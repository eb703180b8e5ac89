from .types import Atom, List, ParseOptions, SExpr, Token, TokenKind
from .scanner import Scanner, ScanError, scan
from .stream import TokenStream
from .parser import ParseError, parse, parse_stream
from .unparser import unparse, unparse_text
from .dot import to_dot, write_dot
from .dump import dump_tokens

__all__ = [
    "Atom", "List", "ParseOptions", "SExpr", "Token", "TokenKind",
    "Scanner", "ScanError", "scan", "TokenStream",
    "ParseError", "parse", "parse_stream",
    "unparse", "unparse_text", "to_dot", "write_dot", "dump_tokens",
]
