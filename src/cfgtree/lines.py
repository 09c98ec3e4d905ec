"""Line-oriented sources and sinks consumed by the reader and writer.

The tree code only sees the two protocols below. File-backed and in-memory
implementations are provided for everyday use.
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Iterator
from typing import IO, Protocol, Union, runtime_checkable

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------

@runtime_checkable
class LineSource(Protocol):
    """Yields one line at a time, without the trailing newline."""

    def ready(self) -> bool: ...

    def at_end(self) -> bool: ...

    def read_line(self) -> str: ...

    def close(self) -> None: ...


@runtime_checkable
class LineSink(Protocol):
    """Accepts lines one at a time."""

    def ready(self) -> bool: ...

    def write_line(self, text: str) -> None: ...

    def write_blank(self) -> None: ...

    def close(self) -> None: ...


def iter_lines(source: LineSource) -> Iterator[str]:
    while not source.at_end():
        yield source.read_line()


# ---------------------------------------------------------------------------
# Stream-backed implementations
# ---------------------------------------------------------------------------

class StreamLineSource:
    """LineSource over an already-open text stream."""

    def __init__(self, stream: IO[str] | None) -> None:
        self._stream = stream
        self._pending: str | None = None
        self._eof = stream is None

    def ready(self) -> bool:
        return self._stream is not None

    def _fill(self) -> None:
        if self._pending is None and not self._eof:
            line = self._stream.readline()
            if line == "":
                self._eof = True
            else:
                self._pending = line

    def at_end(self) -> bool:
        self._fill()
        return self._pending is None

    def read_line(self) -> str:
        self._fill()
        if self._pending is None:
            return ""
        line, self._pending = self._pending, None
        return line.rstrip("\r\n")

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None
        self._eof = True
        self._pending = None


class StreamLineSink:
    """LineSink over an already-open text stream."""

    def __init__(self, stream: IO[str] | None) -> None:
        self._stream = stream

    def ready(self) -> bool:
        return self._stream is not None

    def write_line(self, text: str) -> None:
        self._stream.write(text + "\n")

    def write_blank(self) -> None:
        self.write_line("")

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

class FileLineSource(StreamLineSource):
    """Reads lines from a file; not ready if the file cannot be opened."""

    def __init__(self, path: PathLike, encoding: str = "utf-8") -> None:
        self.path = os.fspath(path)
        try:
            stream = open(self.path, encoding=encoding)
        except OSError as exc:
            logger.warning("Cannot open '%s' for reading: %s", self.path, exc)
            stream = None
        super().__init__(stream)


class FileLineSink(StreamLineSink):
    """Writes lines to a file, truncating it; not ready if it cannot be opened."""

    def __init__(self, path: PathLike, encoding: str = "utf-8") -> None:
        self.path = os.fspath(path)
        try:
            stream = open(self.path, "w", encoding=encoding)
        except OSError as exc:
            logger.warning("Cannot open '%s' for writing: %s", self.path, exc)
            stream = None
        super().__init__(stream)


# ---------------------------------------------------------------------------
# In-memory
# ---------------------------------------------------------------------------

class StringLineSource(StreamLineSource):
    def __init__(self, text: str) -> None:
        super().__init__(io.StringIO(text))


class StringLineSink(StreamLineSink):
    """Collects written lines; ``getvalue()`` stays valid after close()."""

    def __init__(self) -> None:
        self._buffer = io.StringIO()
        self._text = ""
        super().__init__(self._buffer)

    def getvalue(self) -> str:
        if self._stream is not None:
            return self._buffer.getvalue()
        return self._text

    def close(self) -> None:
        if self._stream is not None:
            self._text = self._buffer.getvalue()
        super().close()
