"""Image type detection."""

from __future__ import annotations

import logging
import mimetypes
import os
from pathlib import Path
from typing import Callable, Optional

from .core.exceptions import UtilityRuntimeError
from .utils.validation import require_file

__all__ = [
    "IMAGE_TYPES",
    "guess_image_type",
    "is_jpg",
    "is_gif",
    "is_png",
    "is_webp",
]

LOGGER = logging.getLogger(__name__)

IMAGE_TYPES: dict[str, tuple[str, ...]] = {
    "jpg": ("image/jpg", "image/jpeg"),
    "gif": ("image/gif",),
    "png": ("image/png",),
    "webp": ("image/webp",),
}

_HEADER_SIZE = 32

_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"BM", "image/bmp"),
    (b"II*\x00", "image/tiff"),
    (b"MM\x00*", "image/tiff"),
    (b"\x00\x00\x01\x00", "image/vnd.microsoft.icon"),
    (b"8BPS", "image/vnd.adobe.photoshop"),
)


def _guess_from_signature(path: Path) -> Optional[str]:
    """Identify the image from the magic bytes at the start of the file."""

    with path.open("rb") as handle:
        header = handle.read(_HEADER_SIZE)

    if header[:4] == b"RIFF" and header[8:12] == b"WEBP":
        return "image/webp"
    if header[4:12] in (b"ftypavif", b"ftypavis"):
        return "image/avif"
    for signature, mime in _SIGNATURES:
        if header.startswith(signature):
            return mime
    return None


def _guess_from_extension(path: Path) -> Optional[str]:
    mime, _ = mimetypes.guess_type(path.name)
    if mime and mime.startswith("image/"):
        return mime
    return None


_STRATEGIES: tuple[tuple[str, Callable[[Path], Optional[str]]], ...] = (
    ("signature", _guess_from_signature),
    ("extension", _guess_from_extension),
)


def guess_image_type(image_path: os.PathLike[str] | str) -> Optional[str]:
    """Return the MIME type of an image, or ``None`` if it cannot be determined.

    Strategies are tried in order of reliability: the file signature first,
    then the file extension. ``None`` is only returned once every strategy
    has come up empty.
    """

    path = require_file(image_path, argument="image_path")

    for name, strategy in _STRATEGIES:
        try:
            mime = strategy(path)
        except OSError as exc:
            LOGGER.debug("Image type strategy %s failed for %s: %s", name, path, exc)
            continue
        if mime is not None:
            return mime
        LOGGER.debug("Image type strategy %s could not identify %s", name, path)
    return None


def _is_type(image_path: os.PathLike[str] | str, kind: str) -> bool:
    image_type = guess_image_type(image_path)
    if image_type is None:
        raise UtilityRuntimeError(
            "Unable to determine the image type. Is it a valid image file?",
            details={"path": str(image_path)},
        )
    return image_type in IMAGE_TYPES[kind]


def is_jpg(image_path: os.PathLike[str] | str) -> bool:
    return _is_type(image_path, "jpg")


def is_gif(image_path: os.PathLike[str] | str) -> bool:
    return _is_type(image_path, "gif")


def is_png(image_path: os.PathLike[str] | str) -> bool:
    return _is_type(image_path, "png")


def is_webp(image_path: os.PathLike[str] | str) -> bool:
    return _is_type(image_path, "webp")
