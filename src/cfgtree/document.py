"""ConfigRoot — the unnamed top of a configuration tree, with load/save."""

from __future__ import annotations

import logging
import os

from .errors import ConfigLoadError, ValueParseError
from .lines import (
    FileLineSink,
    FileLineSource,
    LineSink,
    LineSource,
    StringLineSink,
    StringLineSource,
)
from .model import Section
from .reader import ConfigReader
from .writer import write_root

logger = logging.getLogger(__name__)


def _is_path(target) -> bool:
    return isinstance(target, (str, os.PathLike))


class ConfigRoot(Section):
    """Holds top-level properties and sections of one configuration.

    Usage::

        cfg = ConfigRoot()
        cfg.open("app.cfg")
        cfg.get("server.port").value      # → VInt(8080)
        cfg.set("server.host", "0.0.0.0")
        cfg.save("app.cfg")
    """

    def __init__(self) -> None:
        super().__init__(name="")

    # -- Construction ---------------------------------------------------

    @classmethod
    def from_file(cls, path, strict: bool = False) -> "ConfigRoot":
        root = cls()
        root.open(path, strict=strict)
        return root

    @classmethod
    def from_string(cls, text: str, strict: bool = False) -> "ConfigRoot":
        root = cls()
        root.loads(text, strict=strict)
        return root

    # -- Section-named aliases ------------------------------------------

    @property
    def sections(self) -> list[Section]:
        return self.subsections

    def add_section(self, path: str) -> Section | None:
        return self.add_subsection(path)

    def get_section(self, path: str) -> Section | None:
        return self.get_subsection(path)

    def has_section(self, path: str) -> bool:
        return self.has_subsection(path)

    # -- Lifecycle ------------------------------------------------------

    def close(self) -> None:
        """Drop every property and section. Does not save."""
        self.clear()

    def _adopt(self, other: Section) -> None:
        self.properties[:] = other.properties
        self.subsections[:] = other.subsections

    def replace_from(self, source: LineSource, strict: bool = False) -> list[ValueParseError] | None:
        """Replace the tree with the contents of *source*.

        The source is parsed into a fresh tree which is swapped in only once
        the whole source has been read. Returns None, leaving the tree
        untouched, when *source* is not ready or cannot be decoded.
        Otherwise returns the value errors; with *strict* they are raised
        together as a ConfigLoadError after the swap.
        """
        if not source.ready():
            logger.warning("Config source not ready; keeping current contents")
            return None
        fresh = Section()
        try:
            errors = ConfigReader(fresh, strict=strict).read(source)
        except ConfigLoadError:
            self._adopt(fresh)
            raise
        except (UnicodeDecodeError, OSError) as exc:
            logger.warning("Config source unreadable (%s); keeping current contents", exc)
            return None
        self._adopt(fresh)
        logger.info(
            "Loaded %d properties in %d sections (%d errors)",
            sum(1 for _ in self.walk()),
            sum(1 for _ in self.section_paths()),
            len(errors),
        )
        return errors

    def load(self, source: LineSource, strict: bool = False) -> list[ValueParseError]:
        """Like ``replace_from``, but an unreadable source reports no errors."""
        errors = self.replace_from(source, strict=strict)
        return errors if errors is not None else []

    def open(self, target, strict: bool = False) -> list[ValueParseError]:
        """Load from a file path or a LineSource (see ``load``)."""
        if not _is_path(target):
            return self.load(target, strict=strict)
        source = FileLineSource(target)
        try:
            return self.load(source, strict=strict)
        finally:
            source.close()

    def dump(self, sink: LineSink) -> bool:
        """Write the tree to *sink*; False if the sink is not ready."""
        if not sink.ready():
            logger.warning("Config sink not ready; nothing written")
            return False
        write_root(self, sink)
        return True

    def save(self, target) -> bool:
        """Write to a file path or a LineSink, closing it afterwards."""
        sink = FileLineSink(target) if _is_path(target) else target
        try:
            written = self.dump(sink)
        finally:
            sink.close()
        if written:
            logger.info("Saved configuration to %s", getattr(sink, "path", "sink"))
        return written

    # -- In-memory text -------------------------------------------------

    def loads(self, text: str, strict: bool = False) -> list[ValueParseError]:
        return self.load(StringLineSource(text), strict=strict)

    def dumps(self) -> str:
        sink = StringLineSink()
        self.dump(sink)
        return sink.getvalue()
