from __future__ import annotations

import pytest

from char_classes import (
    SPACE_TYPES,
    ClassDefinitionError,
    load_class_definitions,
    parse_class_definitions,
)


def test_parse_one_class_per_line():
    table = parse_class_definitions("punctuation\t. , ;\n\nlower\ta b c\n")
    assert dict(table) == {
        "punctuation": (".", ",", ";"),
        "lower": ("a", "b", "c"),
    }
    assert list(table) == ["punctuation", "lower"]


def test_whitespace_runs_separate_members():
    table = parse_class_definitions("vowels\ta  e\t i   o　u\n")
    assert table["vowels"] == ("a", "e", "i", "o", "u")


def test_blank_lines_are_skipped():
    table = parse_class_definitions("\n   \n\t\nx\ta\n\n")
    assert dict(table) == {"x": ("a",)}


def test_multi_code_point_member_is_atomic():
    table = parse_class_definitions("emoji\t\U0001F44D\U0001F3FD x\n")
    assert table["emoji"] == ("\U0001F44D\U0001F3FD", "x")


def test_last_definition_wins():
    table = parse_class_definitions("x\ta\nx\tb c\n")
    assert table["x"] == ("b", "c")


def test_missing_tab_is_malformed():
    with pytest.raises(ClassDefinitionError) as exc:
        parse_class_definitions("punctuation\t. ,\n\nlower a b c\n")
    assert exc.value.line_no == 3
    assert exc.value.line == "lower a b c"
    assert isinstance(exc.value, ValueError)


def test_table_is_read_only():
    table = parse_class_definitions("x\ta\n")
    with pytest.raises(TypeError):
        table["y"] = ("b",)


def test_load_class_definitions(tmp_path):
    path = tmp_path / "chars.txt"
    path.write_text("punctuation\t« » ¿\n", encoding="utf-8")
    assert load_class_definitions(str(path))["punctuation"] == ("«", "»", "¿")


def test_builtin_space_types():
    assert dict(SPACE_TYPES) == {"space": " ", "tab": "\t", "newline": "\n"}
