"""ConfigShell — interactive editing of a configuration tree.

Also provides the ``cfgtree`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import IO

from .document import ConfigRoot
from .errors import ConfigLoadError, ValueParseError
from .lines import FileLineSource
from .model import Property, Section
from .reader import ConfigReader
from .writer import format_property

LOG_LEVEL_ENV = "CFGTREE_LOG_LEVEL"


# ---------------------------------------------------------------------------
# ConfigShell class (programmatic use)
# ---------------------------------------------------------------------------

class ConfigShell:
    """Stateful shell that builds and edits one ConfigRoot line by line.

    Usage::

        shell = ConfigShell()
        shell.feed("[server]")
        shell.feed("port = 8080")
        shell.lookup("server.port")   # → Property(name='port', ...)

        shell.root     # the tree being edited
        shell.reset()  # clear state
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict
        self.root = ConfigRoot()
        self.reader = ConfigReader(self.root, strict=strict)

    def feed(self, line: str) -> Property | Section | None:
        """Treat *line* as config text in the current section scope.

        In strict mode an invalid number raises ValueParseError right away.
        """
        count = len(self.reader.errors)
        result = self.reader.feed(line)
        if self.strict and len(self.reader.errors) > count:
            raise self.reader.errors[-1]
        return result

    def lookup(self, path: str) -> Property | Section | None:
        """Property at *path*, else the section at *path*, else None."""
        prop = self.root.get(path)
        if prop is not None:
            return prop
        return self.root.get_subsection(path)

    def open(self, path: str) -> list:
        """Load *path*; the section scope is kept if the file could not be read."""
        source = FileLineSource(path)
        try:
            errors = self.root.replace_from(source, strict=self.strict)
        except ConfigLoadError:
            self.reader.reset()
            raise
        finally:
            source.close()
        if errors is None:
            return []
        self.reader.reset()
        return errors

    def save(self, path: str) -> bool:
        return self.root.save(path)

    def reset(self) -> None:
        """Clear the tree and return to root scope."""
        self.root.close()
        self.reader.reset()


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_inspect(item: Property | Section | None) -> str:
    """Pretty-print a property or a section for inspect() / i()."""
    if item is None:
        return "(not found)"
    if isinstance(item, Property):
        return f"{format_property(item)}  ({item.type.name.lower()})"

    lines = [f"Section({item.name}) {{"]
    if item.properties:
        width = max(len(p.name) for p in item.properties)
        for prop in item.properties:
            lines.append(f"  {prop.name:<{width}} : {prop.value}  ({prop.type.name.lower()})")
    for sub in item.subsections:
        lines.append(f"  [{sub.name}]")
    lines.append("}")
    return "\n".join(lines)


def _show_props(shell: ConfigShell, dest: IO[str]) -> None:
    entries = list(shell.root.walk())
    if not entries:
        print("  (no properties defined)", file=dest)
        return
    width = max(len(path) for path, _ in entries)
    for path, prop in entries:
        print(f"  {path:<{width}} = {prop.value}", file=dest)


def _show_sections(shell: ConfigShell, dest: IO[str]) -> None:
    paths = list(shell.root.section_paths())
    if not paths:
        print("  (no sections defined)", file=dest)
        return
    for path in paths:
        print(f"  [{path}]", file=dest)


def _dump(shell: ConfigShell, dest: IO[str]) -> None:
    text = shell.root.dumps()
    if text:
        print(text, end="", file=dest)


def _get_expr(shell: ConfigShell, path: str, dest: IO[str]) -> None:
    prop = shell.root.get(path)
    if prop is None:
        print("(not found)", file=dest)
    else:
        print(str(prop.value), file=dest)


def _run_file(shell: ConfigShell, filepath: str, dest: IO[str]) -> None:
    try:
        with open(filepath, encoding="utf-8") as fh:
            for file_line in fh:
                _process_line(shell, file_line.rstrip("\n"), dest)
    except OSError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)


def _process_line(shell: ConfigShell, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":props":
        _show_props(shell, dest)
        return True

    if line == ":sections":
        _show_sections(shell, dest)
        return True

    if line == ":dump":
        _dump(shell, dest)
        return True

    if line == ":reset":
        shell.reset()
        return True

    if line.startswith(":open "):
        filepath = line[6:].strip()
        try:
            errors = shell.open(filepath)
        except ConfigLoadError as exc:
            print(f"Error loading '{filepath}': {exc}", file=sys.stderr)
            return True
        for err in errors:
            print(f"  {err}", file=dest)
        return True

    if line.startswith(":save "):
        filepath = line[6:].strip()
        if not shell.save(filepath):
            print(f"Error writing '{filepath}'", file=sys.stderr)
        return True

    # ── inspect() / i() ───────────────────────────────────────────────────
    for prefix in ("inspect(", "i("):
        if line.startswith(prefix) and line.endswith(")"):
            path = line[len(prefix):-1].strip()
            print(_fmt_inspect(shell.lookup(path)), file=dest)
            return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        _run_file(shell, line[4:].strip(), dest)
        return True

    # ── ? path ────────────────────────────────────────────────────────────
    if line.startswith("? "):
        _get_expr(shell, line[2:].strip(), dest)
        return True

    # ── Regular config text ───────────────────────────────────────────────
    try:
        shell.feed(line)
    except ValueParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cfgtree", description="Edit a cfgtree configuration file.")
    parser.add_argument("file", nargs="?", help="configuration file to load first")
    parser.add_argument("--strict", action="store_true", help="fail on invalid numeric values")
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help=f"logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Interactive config shell (``cfgtree`` / ``python -m cfgtree.repl``)."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s - %(name)s - %(message)s",
    )

    shell = ConfigShell(strict=args.strict)
    dest: IO[str] = sys.stdout

    if args.file:
        _process_line(shell, f":open {args.file}", dest)

    print("cfgtree  (:q to quit  |  :props  :sections  :dump  :reset  |  ? <path>  inspect(<path>))")

    while True:
        try:
            line = input("cfg> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not line:
            continue

        if not _process_line(shell, line, dest):
            break


if __name__ == "__main__":
    main()
