"""Tests for dotted-path lookup."""

import pytest

from cfgtree.getter import (
    find_property,
    find_subsection,
    get_property,
    get_subsection,
    has_property,
    has_subsection,
    split_path,
)
from cfgtree.model import Property, Section
from cfgtree.values import VInt, VString


@pytest.fixture
def tree():
    root = Section()
    root.properties.append(Property("top", VInt(1)))
    a = Section("a")
    a.properties.append(Property("x", VInt(2)))
    b = Section("b")
    b.properties.append(Property("y", VString("deep")))
    a.subsections.append(b)
    root.subsections.append(a)
    return root


def test_split_path_first_delimiter():
    assert split_path("a.b.c") == ("a", "b.c")

def test_split_path_single():
    assert split_path("a") == ("a", None)

def test_split_path_trailing_dot():
    assert split_path("a.") == ("a", "")


def test_find_direct_children(tree):
    assert find_property(tree, "top").name == "top"
    assert find_property(tree, "a") is None
    assert find_subsection(tree, "a").name == "a"
    assert find_subsection(tree, "top") is None


def test_get_property_top(tree):
    assert get_property(tree, "top").value == VInt(1)

def test_get_property_nested(tree):
    assert get_property(tree, "a.x").value == VInt(2)
    assert get_property(tree, "a.b.y").value == VString("deep")

def test_get_property_missing_section(tree):
    assert get_property(tree, "nope.x") is None

def test_get_property_does_not_match_dotted_name(tree):
    # a literal property name never contains the delimiter
    tree.properties.append(Property("a.x", VInt(99)))
    assert get_property(tree, "a.x").value == VInt(2)

def test_get_property_on_section_name(tree):
    assert get_property(tree, "a") is None

def test_get_subsection(tree):
    assert get_subsection(tree, "a").name == "a"
    assert get_subsection(tree, "a.b").name == "b"
    assert get_subsection(tree, "a.b.y") is None
    assert get_subsection(tree, "a.") is None

def test_has_checks(tree):
    assert has_property(tree, "a.b.y")
    assert not has_property(tree, "a.b")
    assert has_subsection(tree, "a.b")
    assert not has_subsection(tree, "top")

def test_empty_path(tree):
    assert get_property(tree, "") is None
    assert get_subsection(tree, "") is None
    assert has_property(tree, "") is False
    assert has_subsection(tree, "") is False
