import pytest
from sexpr.parser import parse
from sexpr.types import Atom
from sexpr.unparser import unparse, unparse_text


@pytest.mark.parametrize("src", [
    '(test (test2 "i am long" test3) blah)',
    "()",
    "(() ())",
    "a b c",
    "(a (b (c)) d) e",
    '("" x)',
    "(héllo (wörld \"ünïcode text\"))",
])
def test_round_trip(src):
    assert unparse_text(parse(src)) == src


def test_whitespace_is_normalized():
    assert unparse_text(parse("  (a\n  b)\t\tc ")) == "(a b) c"


def test_none_root():
    assert list(unparse(None)) == []
    assert unparse_text(None) == ""


def test_unparse_is_lazy_bytes():
    chunks = unparse(parse("(a b)"))
    assert next(chunks) == b"("
    assert next(chunks) == b"a"
    assert b"".join(chunks) == b" b)"


def test_unparse_utf8():
    assert b"".join(unparse(Atom("é"))) == "é".encode("utf-8")


def test_unparse_rejects_unknown_nodes():
    with pytest.raises(AssertionError):
        list(unparse(object()))
