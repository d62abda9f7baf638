"""Locate the Go package that generated files are written into."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Iterator, Sequence

from .shared.errors import ConfigError

_PACKAGE_CLAUSE: Final = re.compile(r"^package\s+([A-Za-z_][A-Za-z0-9_]*)", re.MULTILINE)


@dataclass(frozen=True, slots=True)
class GoPackage:
    """A Go package name and the directory its files live in."""

    name: str
    directory: Path


def collect_go_files(inputs: Sequence[Path]) -> list[Path]:
    """Collect the buildable Go files from directories and file paths.

    Directories contribute their ``.go`` files in sorted order, excluding
    ``_test.go`` files.

    Raises:
        FileNotFoundError: If any input path doesn't exist.
    """

    def _iter_paths() -> Iterator[Path]:
        for raw in inputs:
            path = raw.resolve()
            if not path.exists():
                raise FileNotFoundError(f"Path '{raw}' does not exist")
            if path.is_dir():
                yield from sorted(
                    p
                    for p in path.iterdir()
                    if p.is_file() and p.suffix == ".go" and not p.name.endswith("_test.go")
                )
            elif path.suffix == ".go":
                yield path

    # Use dict to preserve order while deduplicating
    seen: dict[Path, None] = {}
    for path in _iter_paths():
        seen.setdefault(path, None)

    return list(seen.keys())


def read_package_name(path: Path) -> str | None:
    """Return the package clause name of a Go file, if it has one."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read Go file: {e}", str(path)) from e
    match = _PACKAGE_CLAUSE.search(content)
    return match.group(1) if match else None


def find_package(inputs: Sequence[Path]) -> GoPackage:
    """Find the Go package for a directory or a list of Go files.

    The output directory is the first input when it is a directory, and the
    directory of the first file otherwise.

    Raises:
        ConfigError: If no Go file with a package clause is found.
    """
    if not inputs:
        raise ConfigError("No directory or Go files given for package discovery")

    first = inputs[0].resolve()
    directory = first if first.is_dir() else first.parent

    for path in collect_go_files(inputs):
        name = read_package_name(path)
        if name:
            return GoPackage(name=name, directory=directory)

    raise ConfigError("No buildable Go files with a package clause", str(directory))
