"""Tests for the Reader layer."""

import logging

import pytest

from cfgtree.errors import ConfigLoadError, ValueParseError
from cfgtree.lines import StringLineSource
from cfgtree.model import Section
from cfgtree.reader import (
    ConfigReader,
    clean_line,
    section_header,
    split_assignment,
    strip_comment,
    trim,
)
from cfgtree.values import ValueType, VBool, VFloat, VInt, VString, VUnknown


# ---------------------------------------------------------------------------
# Line helpers
# ---------------------------------------------------------------------------

def test_strip_comment_inline():
    assert strip_comment("port = 80 // http") == "port = 80 "

def test_strip_comment_none():
    assert strip_comment("port = 80") == "port = 80"

def test_trim_all_whitespace_kinds():
    assert trim(" \t\r\f\vkey\n ") == "key"

def test_clean_line():
    assert clean_line("  name = x   // note") == "name = x"

def test_section_header():
    assert section_header("[a.b]") == "a.b"
    assert section_header("[]") == ""
    assert section_header("a = [1]") is None
    assert section_header("[") is None

def test_split_assignment_last_equals():
    assert split_assignment("expr = a=b") == ("expr = a", "b")

def test_split_assignment_trims():
    assert split_assignment("  key   =   value") == ("key", "value")

def test_split_assignment_without_equals():
    assert split_assignment("just words") is None

def test_split_assignment_empty_value():
    assert split_assignment("key =") == ("key", "")


# ---------------------------------------------------------------------------
# ConfigReader.feed
# ---------------------------------------------------------------------------

def _read(text, strict=False):
    root = Section()
    reader = ConfigReader(root, strict=strict)
    errors = reader.read(StringLineSource(text))
    return root, errors


def test_reference_document():
    root, errors = _read("top = 1\n[a]\nx = 2\n[a.b]\ny = true\n[SECTIONEND]\n")
    assert errors == []
    assert root.get("top").value == VInt(1)
    assert root.get("a.x").value == VInt(2)
    assert root.get("a.b.y").value == VBool(True)
    assert root.has_subsection("a.b")


def test_typed_values():
    root, _ = _read("i = -3\nf = 2.5\nb = False\ns = 'quoted'\nu =\n")
    assert root.get("i").value == VInt(-3)
    assert root.get("f").value == VFloat(2.5)
    assert root.get("b").value == VBool(False)
    assert root.get("s").value == VString("quoted")
    assert root.get("u").value == VUnknown("")
    assert root.get("u").type is ValueType.UNKNOWN


def test_comments_and_blank_lines_skipped():
    text = "// full line\n\n   // indented comment\nkey = 1 // trailing\n"
    root, _ = _read(text)
    assert [p.name for p in root.properties] == ["key"]
    assert root.get("key").value == VInt(1)


def test_lines_without_equals_skipped():
    root, errors = _read("garbage line\nk = v\n")
    assert errors == []
    assert [p.name for p in root.properties] == ["k"]


def test_value_may_contain_equals_before_last():
    # the last '=' separates key and value
    root, _ = _read("a=b = c\n")
    assert root.get("a=b").value == VString("c")


def test_sectionend_returns_to_root():
    root, _ = _read("[s]\nin = 1\n[SECTIONEND]\nout = 2\n")
    assert root.get("s.in").value == VInt(1)
    assert root.get("out").value == VInt(2)
    assert not root.has_subsection("SECTIONEND")


def test_headers_resolve_from_root():
    root, _ = _read("[a]\n[b]\nk = 1\n")
    assert root.has_subsection("b")
    assert not root.has_subsection("a.b")


def test_dotted_key_outside_section():
    root, _ = _read("db.host = localhost\n")
    assert root.get("db.host").value == VString("localhost")
    assert root.has_subsection("db")


def test_dotted_key_inside_section():
    root, _ = _read("[server]\ntls.enabled = true\n")
    assert root.get("server.tls.enabled").value == VBool(True)


def test_reopening_section_appends():
    root, _ = _read("[s]\na = 1\n[SECTIONEND]\n[s]\nb = 2\n")
    section = root.get_subsection("s")
    assert [p.name for p in section.properties] == ["a", "b"]


def test_duplicate_key_first_wins():
    root, _ = _read("k = 1\nk = 2\n")
    assert root.get("k").value == VInt(1)
    assert len(root.properties) == 1


def test_empty_header_means_root_scope():
    root, _ = _read("[s]\n[]\nk = 1\n")
    assert root.get("k").value == VInt(1)


def test_empty_key_skipped():
    root, _ = _read("= 5\n")
    assert root.properties == []


def test_feed_returns_stored_items():
    root = Section()
    reader = ConfigReader(root)
    section = reader.feed("[net]")
    assert section is root.get_subsection("net")
    prop = reader.feed("port = 22")
    assert prop is root.get("net.port")
    assert reader.feed("// comment") is None
    assert reader.feed("[SECTIONEND]") is None
    assert reader.scope is root


def test_url_value_loses_comment_tail():
    # '//' always starts a comment, even inside a value
    root, _ = _read("url = http://example.com\n")
    assert root.get("url").value == VString("http:")


# ---------------------------------------------------------------------------
# Error policy
# ---------------------------------------------------------------------------

def test_invalid_numbers_are_collected():
    root, errors = _read("ok = 1\nbad = -\nalso = 2\nworse = +\n")
    assert [e.line_no for e in errors] == [2, 4]
    assert all(isinstance(e, ValueParseError) for e in errors)
    assert root.has_property("ok")
    assert root.has_property("also")
    assert not root.has_property("bad")


def test_strict_raises_after_full_parse():
    root = Section()
    reader = ConfigReader(root, strict=True)
    with pytest.raises(ConfigLoadError) as info:
        reader.read(StringLineSource("bad = -\ngood = 1\n"))
    assert len(info.value.errors) == 1
    assert info.value.errors[0].line_no == 1
    assert root.get("good").value == VInt(1)


def test_invalid_number_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="cfgtree.reader"):
        _read("bad = +\n")
    assert "invalid literal" in caplog.text


def test_reset_clears_scope_and_errors():
    root = Section()
    reader = ConfigReader(root)
    reader.feed("[s]")
    reader.feed("x = -", 1)
    reader.reset()
    assert reader.current_section is None
    assert reader.errors == []
