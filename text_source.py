# text_source.py
"""
Whitespace tokenizer for stylometric feature extraction.

A document reaches the lexical engine in one of three shapes:
    Raw(text)       -- a decoded string, split on Unicode whitespace
    Tokens(tokens)  -- an already tokenized sequence, used as is
    FilePath(path)  -- a file whose full contents are read, then split

`resolve_source` decides the shape once; nothing downstream re-checks it.
"""

import os
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import List, Tuple, Union

ENCODING = "utf-8"

ALPHA_WORD_REGEX = re.compile(r"[^\W\d_]+")


class InvalidInput(TypeError):
    """Input is neither a string, a token sequence nor a readable file."""


@dataclass(frozen=True)
class Raw:
    text: str


@dataclass(frozen=True)
class Tokens:
    tokens: Tuple[str, ...]


@dataclass(frozen=True)
class FilePath:
    path: str
    encoding: str = ENCODING


TextSource = Union[Raw, Tokens, FilePath]


def resolve_source(doc) -> TextSource:
    """
    Map a caller-supplied document onto one of the TextSource variants.

    Plain strings are always raw text; a file is only read when it is
    passed as an os.PathLike object (e.g. pathlib.Path) or wrapped in FilePath.
    Token sequences may be any sequence of strings, including array-likes
    with a `tolist` method (numpy arrays, pandas Series).
    """
    if isinstance(doc, (Raw, Tokens, FilePath)):
        return doc
    if isinstance(doc, str):
        return Raw(doc)
    if isinstance(doc, os.PathLike):
        return FilePath(os.fspath(doc))
    if hasattr(doc, "tolist") and not isinstance(doc, (bytes, Mapping)):
        doc = doc.tolist()
    if (
        isinstance(doc, Sequence)
        and not isinstance(doc, (str, bytes))
        and all(isinstance(t, str) for t in doc)
    ):
        return Tokens(tuple(str(t) for t in doc))
    raise InvalidInput(f"cannot tokenize object of type {type(doc).__name__}")


def split_words(text: str) -> List[str]:
    # str.split() with no separator drops empty fragments
    return text.split()


def tokenize(doc) -> List[str]:
    """
    Return the word tokens of `doc` in their original order.

    Raises InvalidInput for unsupported inputs and unreadable files.
    """
    source = resolve_source(doc)

    if isinstance(source, Raw):
        return split_words(source.text)
    if isinstance(source, Tokens):
        return list(source.tokens)

    if not os.path.isfile(source.path):
        raise InvalidInput(f"not a readable file: {source.path}")
    try:
        with open(source.path, "r", encoding=source.encoding) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidInput(f"not a readable file: {source.path}") from e
    return split_words(text)


def is_alphabetic(word: str) -> bool:
    """True if `word` is one or more Unicode letters and nothing else."""
    return bool(ALPHA_WORD_REGEX.fullmatch(word))
