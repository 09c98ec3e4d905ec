"""Reader layer: turns config text lines into properties and sections."""

from __future__ import annotations

import logging

from .errors import ConfigLoadError, ValueParseError
from .lines import LineSource, iter_lines
from .model import Property, Section
from .valueparser import estimate_type, parse_value

logger = logging.getLogger(__name__)

COMMENT_MARKER = "//"
SECTION_END = "SECTIONEND"
WHITESPACE = " \t\n\r\f\v"


# ---------------------------------------------------------------------------
# Line cleaning helpers
# ---------------------------------------------------------------------------

def strip_comment(line: str) -> str:
    """Cut *line* at the first ``//``."""
    idx = line.find(COMMENT_MARKER)
    if idx == -1:
        return line
    return line[:idx]


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


def clean_line(line: str) -> str:
    return trim(strip_comment(line))


def section_header(line: str) -> str | None:
    """Return the text inside ``[...]``, or None if *line* is not a header."""
    if len(line) >= 2 and line[0] == "[" and line[-1] == "]":
        return line[1:-1]
    return None


def split_assignment(line: str) -> tuple[str, str] | None:
    """Split ``key = value`` at the last ``=``; None without any ``=``."""
    key, sep, value = line.rpartition("=")
    if not sep:
        return None
    return trim(key), trim(value)


# ---------------------------------------------------------------------------
# ConfigReader
# ---------------------------------------------------------------------------

class ConfigReader:
    """Feeds lines into a root section, tracking the current section scope.

    Usage::

        reader = ConfigReader(root)
        reader.feed("[server]")
        reader.feed("port = 8080")
        root.get("server.port")   # → Property(name='port', value=VInt(8080))

    Value errors are collected in ``errors`` and the offending line is left
    out of the tree; see ``read()`` for the strict variant.
    """

    def __init__(self, root: Section, strict: bool = False) -> None:
        self.root = root
        self.strict = strict
        self.current_section: Section | None = None
        self.errors: list[ValueParseError] = []

    @property
    def scope(self) -> Section:
        return self.current_section if self.current_section is not None else self.root

    def reset(self) -> None:
        self.current_section = None
        self.errors = []

    def feed(self, line: str, line_no: int | None = None) -> Property | Section | None:
        """Process one physical line.

        Returns the section entered or the property stored, or None when the
        line was skipped or closed a section.
        """
        if not line:
            return None
        if line.startswith(COMMENT_MARKER):
            return None

        cleaned = clean_line(line)
        if not cleaned:
            return None

        header = section_header(cleaned)
        if header is not None:
            return self._enter_section(header, line_no)

        parts = split_assignment(cleaned)
        if parts is None:
            logger.debug("Skipping line %s without '=': %r", line_no, cleaned)
            return None
        key, raw = parts

        try:
            value = parse_value(raw, estimate_type(raw))
        except ValueParseError as exc:
            error = exc.at_line(line_no) if line_no is not None else exc
            logger.warning("Skipping %s: %s", key, error)
            self.errors.append(error)
            return None

        stored = self.scope.add_property(key, Property(key, value))
        if stored is None:
            logger.debug("Ignoring '%s' on line %s: empty or already set", key, line_no)
        return stored

    def _enter_section(self, path: str, line_no: int | None) -> Section | None:
        if path == SECTION_END:
            self.current_section = None
            return None
        # Headers always resolve from the root, never from the current scope.
        self.current_section = self.root.add_subsection(path)
        logger.debug("Line %s: entering section %r", line_no, path)
        return self.current_section

    def read(self, source: LineSource) -> list[ValueParseError]:
        """Feed every line of *source* and return the collected errors.

        With ``strict=True`` a ConfigLoadError is raised instead, after the
        whole source has been consumed.
        """
        for line_no, line in enumerate(iter_lines(source), start=1):
            self.feed(line, line_no)
        if self.strict and self.errors:
            raise ConfigLoadError(self.errors)
        return list(self.errors)
