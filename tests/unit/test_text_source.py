from __future__ import annotations

import pytest

from text_source import (
    FilePath,
    InvalidInput,
    Raw,
    Tokens,
    is_alphabetic,
    resolve_source,
    tokenize,
)


def test_tokenize_splits_on_whitespace_runs():
    assert tokenize("a  b\tc\n\n d ") == ["a", "b", "c", "d"]


def test_tokenize_unicode_whitespace():
    assert tokenize("a\u00a0b\u2003c\u3000d") == ["a", "b", "c", "d"]


def test_tokenize_empty_and_blank():
    assert tokenize("") == []
    assert tokenize(" \t\n") == []


def test_tokenize_keeps_order_and_duplicates():
    assert tokenize("b a b , .") == ["b", "a", "b", ",", "."]


def test_token_sequence_is_not_retokenized():
    assert tokenize(["x", "y y", "x"]) == ["x", "y y", "x"]
    assert tokenize(("p", "q")) == ["p", "q"]


def test_tokenize_pathlike_reads_file(tmp_path):
    doc = tmp_path / "doc.txt"
    doc.write_text("Pierre Vinken ,\n61 years old", encoding="utf-8")
    assert tokenize(doc) == ["Pierre", "Vinken", ",", "61", "years", "old"]
    assert tokenize(FilePath(str(doc))) == tokenize(doc)


def test_plain_string_is_always_raw_text(tmp_path):
    doc = tmp_path / "doc.txt"
    doc.write_text("one two", encoding="utf-8")
    assert tokenize(str(doc)) == [str(doc)]


def test_resolve_source_variants(tmp_path):
    assert resolve_source("a b") == Raw("a b")
    assert resolve_source(["a", "b"]) == Tokens(("a", "b"))
    assert resolve_source(tmp_path) == FilePath(str(tmp_path))
    src = Raw("x")
    assert resolve_source(src) is src


@pytest.mark.parametrize("bad", [42, None, 3.5, {"a": 1}, ["a", 1]])
def test_invalid_input(bad):
    with pytest.raises(InvalidInput):
        tokenize(bad)


def test_missing_file_is_invalid_input(tmp_path):
    with pytest.raises(InvalidInput):
        tokenize(tmp_path / "missing.txt")
    with pytest.raises(InvalidInput):
        tokenize(tmp_path)


def test_is_alphabetic():
    assert is_alphabetic("hello")
    assert is_alphabetic("héllo")
    assert is_alphabetic("Привет")
    assert not is_alphabetic("abc1")
    assert not is_alphabetic(",")
    assert not is_alphabetic("don't")
    assert not is_alphabetic("")


def test_undecodable_file_is_invalid_input(tmp_path):
    doc = tmp_path / "latin1.txt"
    doc.write_bytes(b"caf\xe9 au lait")
    with pytest.raises(InvalidInput):
        tokenize(doc)
    assert tokenize(FilePath(str(doc), encoding="latin-1")) == ["café", "au", "lait"]


def test_is_alphabetic_rejects_trailing_newline():
    assert not is_alphabetic("abc\n")
    assert not is_alphabetic("\nabc")


def test_array_likes_are_token_sequences():
    np = pytest.importorskip("numpy")
    pd = pytest.importorskip("pandas")
    assert tokenize(pd.Series(["a", "b", "a"])) == ["a", "b", "a"]
    assert tokenize(np.array(["x", "y"])) == ["x", "y"]
    assert all(type(t) is str for t in tokenize(np.array(["x", "y"])))


def test_bytes_and_mappings_are_not_token_sequences():
    with pytest.raises(InvalidInput):
        tokenize(b"a b")
    with pytest.raises(InvalidInput):
        tokenize({"a": "b"})
