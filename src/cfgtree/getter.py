"""Dotted-path lookup on the section tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import Property, Section

PATH_DELIMITER = "."


def split_path(path: str) -> tuple[str, str | None]:
    """Split *path* at the first delimiter.

    ``"a.b.c"`` → ``("a", "b.c")``; ``"a"`` → ``("a", None)``.
    """
    head, sep, rest = path.partition(PATH_DELIMITER)
    if not sep:
        return head, None
    return head, rest


def find_property(section: Section, name: str) -> Property | None:
    """Direct child property called *name*, no path handling."""
    for prop in section.properties:
        if prop.name == name:
            return prop
    return None


def find_subsection(section: Section, name: str) -> Section | None:
    """Direct child section called *name*, no path handling."""
    for sub in section.subsections:
        if sub.name == name:
            return sub
    return None


def get_property(section: Section, path: str) -> Property | None:
    """Resolve *path* to a property below *section*.

    - No delimiter: own properties only
    - Otherwise: descend into the first segment's subsection
    - Empty path or missing subsection: None
    """
    if not path:
        return None
    head, rest = split_path(path)
    if rest is None:
        return find_property(section, head)
    child = find_subsection(section, head)
    if child is None:
        return None
    return get_property(child, rest)


def get_subsection(section: Section, path: str) -> Section | None:
    """Resolve *path* to a section below *section*."""
    if not path:
        return None
    head, rest = split_path(path)
    child = find_subsection(section, head)
    if rest is None or child is None:
        return child
    return get_subsection(child, rest)


def has_property(section: Section, path: str) -> bool:
    return get_property(section, path) is not None


def has_subsection(section: Section, path: str) -> bool:
    return get_subsection(section, path) is not None
