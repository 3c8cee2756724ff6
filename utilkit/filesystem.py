"""Filesystem helpers: recursive scanning, path normalisation and simple file IO."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Iterator

from .config import FILESYSTEM_CONFIG
from .core.exceptions import InvalidArgumentError, UtilityRuntimeError
from .strings import random_string
from .utils.formatting import natural_sort_key
from .utils.io import count_non_empty_lines, read_text
from .utils.validation import (
    is_readable_directory,
    is_readable_file,
    require_directory,
    require_file,
)

__all__ = [
    "walk_files",
    "line_counter",
    "directory_size",
    "directory_list",
    "normalize_file_path",
    "is_really_writable",
    "file_read",
    "file_write",
    "is_file",
    "is_directory",
]

LOGGER = logging.getLogger(__name__)

PathLike = os.PathLike[str] | str


def is_file(path: PathLike) -> bool:
    """Return whether ``path`` is a regular file that can be read."""
    return is_readable_file(path)


def is_directory(path: PathLike) -> bool:
    """Return whether ``path`` is a directory that can be read."""
    return is_readable_directory(path)


def _is_ignored(path: str, fragments: tuple[str, ...]) -> bool:
    lowered = path.lower()
    return any(fragment in lowered for fragment in fragments)


def walk_files(
    directory: PathLike,
    ignore: Iterable[str] = (),
    extensions: Iterable[str] = (),
    *,
    follow_symlinks: bool | None = None,
) -> Iterator[Path]:
    """Yield the regular files below ``directory``, depth first.

    ``ignore`` holds path fragments; a directory or file whose full path
    contains one of them (case-insensitively) is skipped, and an ignored
    directory is not descended into. When ``extensions`` is non-empty only
    files whose suffix (``".txt"``, leading dot, case-sensitive) is listed
    are yielded. Entries are visited in name order. Every physical directory
    is entered at most once, so symlink cycles terminate.

    Raises :class:`InvalidArgumentError` when ``directory`` is not a readable
    directory.
    """

    root = require_directory(directory)
    fragments = tuple(fragment.lower() for fragment in ignore if fragment)
    allowed = frozenset(extensions)
    if follow_symlinks is None:
        follow_symlinks = FILESYSTEM_CONFIG.follow_symlinks

    visited: set[tuple[int, int]] = set()

    def _walk(current: str) -> Iterator[Path]:
        if _is_ignored(current, fragments):
            LOGGER.debug("Ignoring directory %s", current)
            return
        info = os.stat(current)
        key = (info.st_dev, info.st_ino)
        if key in visited:
            LOGGER.debug("Already visited %s, skipping", current)
            return
        visited.add(key)

        try:
            with os.scandir(current) as iterator:
                entries = sorted(iterator, key=lambda entry: entry.name)
        except PermissionError as exc:
            LOGGER.warning("Cannot read directory %s: %s", current, exc)
            return

        for entry in entries:
            if entry.is_dir(follow_symlinks=follow_symlinks):
                yield from _walk(entry.path)
                continue
            if not entry.is_file():
                continue
            if _is_ignored(entry.path, fragments):
                continue
            if allowed and os.path.splitext(entry.name)[1] not in allowed:
                continue
            yield Path(entry.path)

    yield from _walk(str(root))


def line_counter(
    directory: PathLike,
    ignore: Iterable[str] = (),
    extensions: Iterable[str] = (),
    only_line_count: bool = False,
    *,
    encoding: str | None = None,
) -> dict[str, dict[str, int]] | int:
    """Count the non-empty lines of every file below ``directory``.

    Returns ``{directory_path: {file_name: count}}`` or, with
    ``only_line_count``, the total number of lines.
    """

    lines: dict[str, dict[str, int]] = {}
    total = 0
    for path in walk_files(directory, ignore, extensions):
        count = count_non_empty_lines(path, encoding)
        total += count
        if not only_line_count:
            lines.setdefault(str(path.parent), {})[path.name] = count

    if only_line_count:
        return total
    return lines


def directory_size(directory: PathLike, ignore: Iterable[str] = (), extensions: Iterable[str] = ()) -> int:
    """Return the total size in bytes of the files below ``directory``."""
    return sum(path.stat().st_size for path in walk_files(directory, ignore, extensions))


def directory_list(directory: PathLike, ignore: Iterable[str] = (), extensions: Iterable[str] = ()) -> list[str]:
    """Return the absolute paths of the files below ``directory`` in natural order."""

    paths = [str(path.absolute()) for path in walk_files(directory, ignore, extensions)]
    return sorted(paths, key=natural_sort_key)


def normalize_file_path(path: str, separator: str = "/") -> str:
    """Normalise a path without touching the filesystem.

    Both slash styles are accepted, runs of separators collapse, ``.``
    segments are dropped and each ``..`` removes the preceding segment.

    >>> normalize_file_path("/a/b/../c")
    '/a/c'
    >>> normalize_file_path("C:\\\\temp\\\\.\\\\logs\\\\")
    'C:/temp/logs'
    """

    unified = path.replace("\\", "/")
    leading = separator if unified.startswith("/") else ""

    segments: list[str] = []
    for segment in unified.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if segments:
                segments.pop()
            continue
        segments.append(segment)

    return leading + separator.join(segments)


def is_really_writable(path: PathLike) -> bool:
    """Check whether ``path`` can really be written to.

    On POSIX systems the access bits are authoritative. On Windows, where
    they are not, a directory is probed with a temporary file and a file is
    opened for appending.
    """

    if not os.path.exists(path):
        raise UtilityRuntimeError(
            "Invalid file or directory specified",
            details={"path": str(path)},
        )

    if sys.platform != "win32":
        return os.access(path, os.W_OK)

    try:
        if os.path.isdir(path):
            probe = Path(path) / f"{random_string()}.txt"
            probe.write_text("tmpData")
            probe.unlink()
        else:
            with open(path, "a"):
                pass
    except OSError:
        return False
    return True


def file_read(path: PathLike, encoding: str | None = None) -> str:
    """Return the contents of an existing file.

    ``encoding="auto"`` detects the encoding with chardet.
    """

    return read_text(require_file(path), encoding)


def file_write(path: PathLike, data: str = "", append: bool = False, *, encoding: str | None = None) -> int:
    """Write ``data`` to an existing file and return the number of characters written."""

    target = require_file(path)
    if not is_really_writable(target):
        raise InvalidArgumentError(f"File '{path}' is not writable.", details={"path": str(path)})

    write_encoding = encoding or FILESYSTEM_CONFIG.read_encoding
    if write_encoding == "auto":
        write_encoding = "utf-8"

    mode = "a" if append else "w"
    with target.open(mode, encoding=write_encoding, newline="") as handle:
        return handle.write(data)
