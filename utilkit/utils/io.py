"""File IO utilities."""

from __future__ import annotations

import io
import os

import chardet

from ..config import FILESYSTEM_CONFIG


def detect_encoding(raw: bytes, fallback: str = "utf-8") -> str:
    """Detect the encoding of a byte string."""

    if not raw:
        return fallback
    detection = chardet.detect(raw)
    return detection.get("encoding") or fallback


def read_text(path: os.PathLike[str] | str, encoding: str | None = None) -> str:
    """Read a text file, detecting its encoding when ``encoding`` is ``"auto"``."""

    encoding = encoding or FILESYSTEM_CONFIG.read_encoding
    with open(path, "rb") as handle:
        raw = handle.read()
    if encoding == "auto":
        encoding = detect_encoding(raw)
    return raw.decode(encoding, errors="replace")


def count_non_empty_lines(path: os.PathLike[str] | str, encoding: str | None = None) -> int:
    """Count the lines of a text file that are not empty once the newline is dropped."""

    encoding = encoding or FILESYSTEM_CONFIG.read_encoding
    if encoding == "auto":
        handle = io.StringIO(read_text(path, "auto"), newline=None)
    else:
        handle = open(path, "r", encoding=encoding, errors="replace", newline=None)
    with handle:
        return sum(1 for line in handle if line.rstrip("\n"))
