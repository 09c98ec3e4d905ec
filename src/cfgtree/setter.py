"""Dotted-path insertion on the section tree."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from .getter import find_property, find_subsection, split_path

if TYPE_CHECKING:
    from .model import Property, Section


def add_subsection(section: Section, path: str) -> Section | None:
    """Resolve-or-create the section at *path* below *section*.

    Returns the existing section when one is already there, and None for an
    empty path.
    """
    from .model import Section

    if not path:
        return None
    head, rest = split_path(path)
    child = find_subsection(section, head)
    if child is None:
        child = Section(head)
        section.subsections.append(child)
    if rest is None:
        return child
    return add_subsection(child, rest)


def add_property(section: Section, path: str, prop: Property) -> Property | None:
    """Insert *prop* at *path*, creating intermediate sections as needed.

    A copy of *prop* is stored under the last path segment; *prop* itself
    is left untouched. Nothing happens when the path is empty or a property
    already exists there (first write wins).
    Returns the stored property, or None when nothing was inserted.
    """
    if not path:
        return None
    head, rest = split_path(path)
    if rest is None:
        if find_property(section, head) is not None:
            return None
        stored = replace(prop, name=head)
        section.properties.append(stored)
        return stored
    child = add_subsection(section, head)
    if child is None:
        return None
    return add_property(child, rest, prop)
