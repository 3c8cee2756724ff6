"""Argument validation shared by the filesystem, image and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path

from ..core.exceptions import InvalidArgumentError


def is_readable_file(path: os.PathLike[str] | str) -> bool:
    return os.path.isfile(path) and os.access(path, os.R_OK)


def is_readable_directory(path: os.PathLike[str] | str) -> bool:
    return os.path.isdir(path) and os.access(path, os.R_OK)


def require_file(path: os.PathLike[str] | str, *, argument: str = "path") -> Path:
    """Return ``path`` as a :class:`Path` or raise if it is not a readable file."""

    if not is_readable_file(path):
        raise InvalidArgumentError(
            f"File '{path}' does not exist or is not readable.",
            details={"argument": argument, "path": str(path)},
        )
    return Path(path)


def require_directory(path: os.PathLike[str] | str, *, argument: str = "directory") -> Path:
    """Return ``path`` as a :class:`Path` or raise if it is not a readable directory."""

    if not is_readable_directory(path):
        raise InvalidArgumentError(
            f"Invalid {argument} specified: '{path}'",
            details={"argument": argument, "path": str(path)},
        )
    return Path(path)


def require_non_empty(value: str, *, argument: str) -> str:
    """Return ``value`` stripped, raising when nothing is left."""

    stripped = value.strip() if value else ""
    if not stripped:
        raise InvalidArgumentError(f"{argument} must not be empty", details={"argument": argument})
    return stripped
