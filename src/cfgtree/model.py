"""Data model for cfgtree: properties and the section tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .valueparser import from_python
from .values import Value, ValueType, VUnknown
from .getter import get_property, get_subsection, has_property, has_subsection
from .setter import add_property, add_subsection


# ---------------------------------------------------------------------------
# Property
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class Property:
    """A named leaf holding one typed value."""

    name: str
    value: Value = field(default_factory=VUnknown)

    @property
    def type(self) -> ValueType:
        return self.value.type

    def __eq__(self, other: object) -> bool:
        # Structural comparison only: payloads are ignored.
        if not isinstance(other, Property):
            return NotImplemented
        return self.name == other.name and self.type == other.type

    __hash__ = None  # type: ignore[assignment]


# ---------------------------------------------------------------------------
# Section
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class Section:
    """A named node owning properties and nested sections.

    Every path argument is a dotted path relative to this section. Paths are
    split at the first ``.``, so ``"a.b.c"`` means section ``a``, then
    ``"b.c"`` inside it.
    """

    name: str = ""
    properties: list[Property] = field(default_factory=list)
    subsections: list["Section"] = field(default_factory=list)

    # -- Lookup ---------------------------------------------------------

    def get(self, path: str) -> Property | None:
        return get_property(self, path)

    def get_subsection(self, path: str) -> "Section | None":
        return get_subsection(self, path)

    def has_property(self, path: str) -> bool:
        return has_property(self, path)

    def has_subsection(self, path: str) -> bool:
        return has_subsection(self, path)

    # -- Insertion ------------------------------------------------------

    def add_property(self, path: str, prop: Property) -> Property | None:
        return add_property(self, path, prop)

    def add_subsection(self, path: str) -> "Section | None":
        return add_subsection(self, path)

    def set(self, path: str, value) -> Property | None:
        """Store *value* (a Value or a plain scalar) at *path*, first write wins."""
        return self.add_property(path, Property(path, from_python(value)))

    # -- Traversal ------------------------------------------------------

    def walk(self, prefix: str = "") -> Iterator[tuple[str, Property]]:
        """Yield ``(dotted_path, property)`` depth-first, own properties first."""
        for prop in self.properties:
            yield _join(prefix, prop.name), prop
        for sub in self.subsections:
            yield from sub.walk(_join(prefix, sub.name))

    def section_paths(self, prefix: str = "") -> Iterator[str]:
        for sub in self.subsections:
            path = _join(prefix, sub.name)
            yield path
            yield from sub.section_paths(path)

    def clear(self) -> None:
        self.properties.clear()
        self.subsections.clear()

    # -- Comparison -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        # Shallow: name plus the number of direct children.
        if not isinstance(other, Section):
            return NotImplemented
        return (
            self.name == other.name
            and len(self.properties) == len(other.properties)
            and len(self.subsections) == len(other.subsections)
        )

    __hash__ = None  # type: ignore[assignment]


def _join(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name
