from __future__ import annotations

from pathlib import Path

import pytest

from utilkit import image
from utilkit.core import InvalidArgumentError, UtilityRuntimeError

PNG_HEADER = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"
GIF_HEADER = b"GIF89a\x01\x00\x01\x00"
JPEG_HEADER = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00"
WEBP_HEADER = b"RIFF\x24\x00\x00\x00WEBPVP8 "


def write_file(directory: Path, name: str, content: bytes) -> Path:
    path = directory / name
    path.write_bytes(content + b"\x00" * 32)
    return path


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        (PNG_HEADER, "image/png"),
        (GIF_HEADER, "image/gif"),
        (JPEG_HEADER, "image/jpeg"),
        (WEBP_HEADER, "image/webp"),
    ],
)
def test_guess_image_type_reads_signature(tmp_path: Path, header: bytes, expected: str):
    # extension deliberately misleading
    path = write_file(tmp_path, "image.dat", header)

    assert image.guess_image_type(path) == expected


def test_guess_image_type_falls_back_to_extension(tmp_path: Path):
    path = write_file(tmp_path, "photo.jpg", b"not really a jpeg")

    assert image.guess_image_type(path) == "image/jpeg"
    assert image.is_jpg(path)


def test_guess_image_type_returns_none_when_unknown(tmp_path: Path):
    path = write_file(tmp_path, "notes.txt", b"plain text")

    assert image.guess_image_type(path) is None


def test_type_checks(tmp_path: Path):
    png = write_file(tmp_path, "a.png", PNG_HEADER)
    gif = write_file(tmp_path, "b.gif", GIF_HEADER)
    webp = write_file(tmp_path, "c.webp", WEBP_HEADER)

    assert image.is_png(png)
    assert not image.is_jpg(png)
    assert image.is_gif(gif)
    assert not image.is_png(gif)
    assert image.is_webp(webp)
    assert not image.is_gif(webp)


def test_type_checks_raise_when_type_is_unknown(tmp_path: Path):
    path = write_file(tmp_path, "data.bin", b"\x01\x02\x03")

    with pytest.raises(UtilityRuntimeError):
        image.is_jpg(path)


def test_missing_image_is_rejected(tmp_path: Path):
    with pytest.raises(InvalidArgumentError):
        image.guess_image_type(tmp_path / "missing.png")
