# character_features.py
"""
Character-level stylometric features.

With a character class table:
    - per-class ratios (one feature per class name)
    - space features: ws, s2w, space, tab, newline
    - punctuation ratios: R:<ch> for each member of the `punctuation` class
    - alphabet ratios: alpha, R:<letter> for each member of the `lower` class

Without one, a raw per-character profile:
    - ws, R:<ch> for every distinct character of the document

Almost every ratio is normalized by M, the number of non-whitespace
characters, and is 0 when M is 0.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from char_classes import (
    LOWER_CLASS,
    PUNCTUATION_CLASS,
    SPACE_TYPES,
    ClassTable,
    freeze_classes,
    load_class_definitions,
)
from text_source import ENCODING

DEFAULT_ALPHABET = tuple("abcdefghijklmnopqrstuvwxyz")


@dataclass(frozen=True)
class CharacterConfig:
    """
    classes:  {class name: members}, or None for the per-character fallback
    encoding: used to decode bytes documents; counting is per code point
    """
    classes: Optional[ClassTable] = None
    encoding: str = ENCODING

    def __post_init__(self):
        if self.classes is not None:
            object.__setattr__(self, "classes", freeze_classes(self.classes))

    @classmethod
    def from_file(cls, path: str, encoding: str = ENCODING) -> "CharacterConfig":
        return cls(classes=load_class_definitions(path, encoding), encoding=encoding)


def non_space_char_count(text: str) -> int:
    return sum(1 for ch in text if not ch.isspace())


def space_char_count(text: str) -> int:
    return len(text) - non_space_char_count(text)


def char_frequencies(text: str) -> Counter:
    return Counter(text)


def alphabet_frequency(text: str, alphabet: Optional[Iterable[str]] = None) -> Dict[str, int]:
    """Occurrences of each letter of `alphabet` in the lowercased text."""
    counts = char_frequencies(text.lower())
    if not alphabet:
        alphabet = DEFAULT_ALPHABET
    return {letter: counts.get(letter, 0) for letter in alphabet}


def _ratio(num: float, den: float) -> float:
    return num / den if den != 0 else 0.0


class CharacterFeatures:

    def __init__(self, config: Optional[CharacterConfig] = None):
        self.config = config or CharacterConfig()
        self.spaces = SPACE_TYPES

    @property
    def classes(self) -> Optional[ClassTable]:
        return self.config.classes

    def decode(self, doc) -> str:
        if isinstance(doc, bytes):
            return doc.decode(self.config.encoding)
        return doc

    def compute_all(self, doc) -> Dict[str, float]:
        text = self.decode(doc)

        if not self.classes:
            return self.get_fallback_features(text)

        out: Dict[str, float] = {}
        out.update(self.get_char_class_ratios(text))
        out.update(self.get_space_features(text))
        out.update(self.get_punct_features(text))
        out.update(self.get_alphabet_features(text))
        return out

    def get_char_class_ratios(self, doc) -> Dict[str, float]:
        text = self.decode(doc)
        gr_cnt = non_space_char_count(text)  # M
        chf = char_frequencies(text)

        out = {}
        for name, members in (self.classes or {}).items():
            total = sum(chf.get(ch, 0) for ch in set(members))
            out[name] = _ratio(total, gr_cnt)
        return out

    def get_space_features(self, doc) -> Dict[str, float]:
        """
        ws:  whitespace characters to M
        s2w: space characters to whitespace characters
        space, tab, newline: each to M
        """
        text = self.decode(doc)
        gr_cnt = non_space_char_count(text)
        ws_cnt = space_char_count(text)
        chf = char_frequencies(text)

        out = {
            "ws": _ratio(ws_cnt, gr_cnt),
            "s2w": _ratio(chf.get(" ", 0), ws_cnt),
        }
        for name, ch in self.spaces.items():
            out[name] = _ratio(chf.get(ch, 0), gr_cnt)
        return out

    def get_punct_features(self, doc) -> Dict[str, float]:
        text = self.decode(doc)
        gr_cnt = non_space_char_count(text)
        chf = char_frequencies(text)

        out = {}
        for ch in (self.classes or {}).get(PUNCTUATION_CLASS, ()):
            out["R:" + ch] = _ratio(chf.get(ch, 0), gr_cnt)
        return out

    def get_alphabet_features(self, doc) -> Dict[str, float]:
        text = self.decode(doc)
        gr_cnt = non_space_char_count(text)
        letters = (self.classes or {}).get(LOWER_CLASS, ())
        alf = alphabet_frequency(text, letters) if letters else {}

        out = {"alpha": _ratio(sum(alf.values()), gr_cnt)}
        for letter, num in alf.items():
            out["R:" + letter] = _ratio(num, gr_cnt)
        return out

    def get_fallback_features(self, doc) -> Dict[str, float]:
        text = self.decode(doc)
        gr_cnt = non_space_char_count(text)
        ws_cnt = space_char_count(text)
        chf = char_frequencies(text)

        out = {"ws": _ratio(ws_cnt, gr_cnt)}
        for ch in sorted(chf):
            out["R:" + ch] = _ratio(chf[ch], gr_cnt)
        return out
