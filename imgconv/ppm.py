"""Binary PPM (P6) images with a maximum colour value of 255."""

from __future__ import annotations

import os
import re
from pathlib import Path

from imgconv.image import Color, Image, ImageError

PPM_SIGNATURE = b"P6"
PPM_MAX = 255

_HEADER = re.compile(rb"\s*(\S+)\s+([+-]?\d+)\s+([+-]?\d+)\s+([+-]?\d+)")


def _rgb_bytes(row: list[Color]) -> bytes:
    return bytes(component for pixel in row for component in (pixel.r, pixel.g, pixel.b))


def _pixels_from_rgb(chunk: bytes) -> list[Color]:
    return [Color(r, g, b) for r, g, b in zip(chunk[0::3], chunk[1::3], chunk[2::3])]


def save_ppm(path: str | os.PathLike, image: Image) -> None:
    """Write image to path as a P6 file."""
    try:
        with open(path, "wb") as out:
            out.write(b"%s\n%d %d\n%d\n" % (PPM_SIGNATURE, image.width, image.height, PPM_MAX))
            for row in image.rows():
                out.write(_rgb_bytes(row))
    except OSError as exc:
        raise ImageError(f"cannot write {path}: {exc}") from exc


def load_ppm(path: str | os.PathLike) -> Image:
    """Read a P6 file with maximum colour value 255."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ImageError(f"cannot read {path}: {exc}") from exc

    match = _HEADER.match(data)
    if match is None:
        raise ImageError(f"{path}: malformed PPM header")
    signature = match.group(1)
    width, height, color_max = (int(match.group(i)) for i in (2, 3, 4))
    if signature != PPM_SIGNATURE or color_max != PPM_MAX:
        raise ImageError(f"{path}: only P6 images with maximum value {PPM_MAX} are supported")
    if data[match.end():match.end() + 1] != b"\n":
        raise ImageError(f"{path}: header must end with a newline")
    if width < 0 or height < 0:
        raise ImageError(f"{path}: negative image size")

    row_size = width * 3
    start = match.end() + 1
    pixels = data[start:start + row_size * height]
    if len(pixels) < row_size * height:
        raise ImageError(f"{path}: pixel data is truncated")

    image = Image(width, height, Color.black())
    for y, row in enumerate(image.rows()):
        row[:] = _pixels_from_rgb(pixels[y * row_size:(y + 1) * row_size])
    return image