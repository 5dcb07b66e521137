# char_classes.py
"""
Character class definitions.

A definition source holds one class per line:

    <class name>\t<ch1> <ch2> <ch3> ...

Blank lines are skipped. Members are separated by whitespace runs and each
member is kept as one atomic string, even a multi-code-point one. Two
class names are reserved by the character engine: `punctuation` and
`lower` (the lowercase alphabet).
"""

from types import MappingProxyType
from typing import Dict, Mapping, Sequence, Tuple

from text_source import ENCODING

PUNCTUATION_CLASS = "punctuation"
LOWER_CLASS = "lower"

# Built in, never loaded from a definition source
SPACE_TYPES: Mapping[str, str] = MappingProxyType({
    "space": " ",
    "tab": "\t",
    "newline": "\n",
})

ClassTable = Mapping[str, Tuple[str, ...]]


class ClassDefinitionError(ValueError):
    """A definition line has no TAB between class name and members."""

    def __init__(self, line_no: int, line: str):
        self.line_no = line_no
        self.line = line
        super().__init__(f"line {line_no}: expected '<class>\\t<members>', got {line!r}")


def parse_class_definitions(text: str) -> ClassTable:
    """
    Parse definition text into an immutable {class name: members} table.

    A class defined twice keeps its last definition.
    """
    classes: Dict[str, Tuple[str, ...]] = {}
    for line_no, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        name, sep, members = line.partition("\t")
        if not sep:
            raise ClassDefinitionError(line_no, line)
        classes[name] = tuple(members.split())
    return MappingProxyType(classes)


def load_class_definitions(path: str, encoding: str = ENCODING) -> ClassTable:
    with open(path, "r", encoding=encoding) as f:
        return parse_class_definitions(f.read())


def freeze_classes(classes: Mapping[str, Sequence[str]]) -> ClassTable:
    """Copy any {name: members} mapping into the immutable table form."""
    return MappingProxyType({name: tuple(members) for name, members in classes.items()})
