import re
from pathlib import Path

import pytest
from sexpr.parser import ParseError, parse
from sexpr.scanner import scan
from sexpr.types import ParseOptions, TokenKind
from sexpr.unparser import unparse_text

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples" / "exprs"
ATOM_RUN = re.compile(r'"[^"]*"|[^\s()"]+')


def load(name: str) -> bytes:
    path = EXAMPLES_DIR / name
    if not path.exists():
        pytest.skip(f"example file not found: {path}")
    return path.read_bytes()


def test_nested_file():
    root = parse(load("nested.sexp"), "nested.sexp")
    assert unparse_text(root) == '(test (test2 "i am long" test3) blah)'


def test_multiline_file():
    root = parse(load("multiline.sexp"), "multiline.sexp")
    assert unparse_text(root) == '(define (square x) (* x x)) (square "twelve apples")'
    assert len(list(root.siblings())) == 2


def test_unterminated_file():
    data = load("unterminated.sexp")
    with pytest.raises(ParseError, match="unterminated quoted atom") as exc_info:
        parse(data, "unterminated.sexp")
    assert exc_info.value.end == len(data)


def test_unclosed_file():
    data = load("unclosed.sexp")
    with pytest.raises(ParseError, match="inside list"):
        parse(data)
    assert unparse_text(parse(data, options=ParseOptions(strict=False))) == "(a (b c))"


@pytest.mark.parametrize("name", ["nested.sexp", "multiline.sexp", "unclosed.sexp"])
def test_file_token_counts(name):
    text = load(name).decode("utf-8")
    parens = text.count("(") + text.count(")")
    runs = len(ATOM_RUN.findall(text))
    toks = list(scan(text))
    assert len(toks) == parens + runs + 1
    assert toks[-1].kind is TokenKind.END_OF_INPUT
