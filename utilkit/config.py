"""Runtime configuration for utilkit.

Defaults are read from the environment once at import time. The string
encoding used by :mod:`utilkit.strings` is held in a context variable so
callers can change it for a narrow scope without touching other threads or
tasks.
"""

from __future__ import annotations

import codecs
import logging
import os
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from .core.exceptions import InvalidArgumentError

LOGGER = logging.getLogger(__name__)

ENCODING_ENV_VAR = "UTILKIT_ENCODING"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class StringConfig:
    """Defaults for the string helpers."""

    encoding: str = "utf-8"


@dataclass(frozen=True)
class FilesystemConfig:
    """Defaults for the filesystem helpers."""

    read_encoding: str = "utf-8"
    follow_symlinks: bool = True


STRING_CONFIG = StringConfig(
    encoding=os.environ.get(ENCODING_ENV_VAR, StringConfig.encoding),
)
FILESYSTEM_CONFIG = FilesystemConfig(
    read_encoding=os.environ.get("UTILKIT_READ_ENCODING", FilesystemConfig.read_encoding),
    follow_symlinks=os.environ.get("UTILKIT_FOLLOW_SYMLINKS", "1").strip().lower() in _TRUTHY,
)

_ENCODING: ContextVar[str] = ContextVar("utilkit_encoding", default=STRING_CONFIG.encoding)


def validate_encoding(name: str) -> str:
    """Return ``name`` if it is a registered codec, raise otherwise."""

    if not name:
        raise InvalidArgumentError("Encoding name must not be empty")
    try:
        codecs.lookup(name)
    except LookupError as exc:
        raise InvalidArgumentError(f"Unknown encoding: {name!r}") from exc
    return name


def get_encoding() -> str:
    """Return the encoding currently used by the string helpers."""
    return _ENCODING.get()


def set_encoding(name: str = "", *, update_environment: bool = False) -> str:
    """Set the encoding used by the string helpers and return it.

    An empty ``name`` keeps the current encoding, which is useful together
    with ``update_environment`` to publish the active value to
    ``UTILKIT_ENCODING`` for child processes.
    """

    if name:
        _ENCODING.set(validate_encoding(name))
    encoding = _ENCODING.get()
    if update_environment:
        os.environ[ENCODING_ENV_VAR] = encoding
        LOGGER.debug("Exported %s=%s", ENCODING_ENV_VAR, encoding)
    return encoding


@contextmanager
def encoding_scope(name: str) -> Iterator[str]:
    """Temporarily switch the string encoding within a ``with`` block."""

    token = _ENCODING.set(validate_encoding(name))
    try:
        yield name
    finally:
        _ENCODING.reset(token)
