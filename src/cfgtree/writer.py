"""Writer layer: serializes the section tree back to config text."""

from __future__ import annotations

from .lines import LineSink
from .model import Property, Section
from .valueparser import format_value


def format_property(prop: Property) -> str:
    return f"{prop.name} = {format_value(prop.value)}"


def section_title(section: Section, prefix: str = "") -> str:
    return f"{prefix}.{section.name}" if prefix else section.name


def write_section(section: Section, sink: LineSink, prefix: str = "") -> None:
    """Write ``[prefix.Name]``, its properties, a blank line, then subsections.

    No closing ``[SECTIONEND]`` is written; nesting is carried by the
    dotted header alone.
    """
    title = section_title(section, prefix)
    sink.write_line(f"[{title}]")
    for prop in section.properties:
        sink.write_line(format_property(prop))
    sink.write_blank()
    for sub in section.subsections:
        write_section(sub, sink, title)


def write_root(root: Section, sink: LineSink) -> None:
    """Write top-level properties (plus one blank line if any), then sections."""
    for prop in root.properties:
        sink.write_line(format_property(prop))
    if root.properties:
        sink.write_blank()
    for section in root.subsections:
        write_section(section, sink)
