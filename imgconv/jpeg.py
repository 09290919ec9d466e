"""JPEG images, read and written through Pillow."""

from __future__ import annotations

import os

from PIL import Image as PILImage

from imgconv.image import Color, Image, ImageError


def _to_pillow(image: Image) -> PILImage.Image:
    data = b"".join(
        bytes(component for pixel in row for component in (pixel.r, pixel.g, pixel.b))
        for row in image.rows()
    )
    return PILImage.frombytes("RGB", (image.width, image.height), data)


def save_jpeg(path: str | os.PathLike, image: Image) -> None:
    """Write image to path as a baseline RGB JPEG with default settings."""
    if not image:
        raise ImageError(f"cannot write {path}: image is empty")
    try:
        _to_pillow(image).save(path, format="JPEG")
    except (OSError, ValueError) as exc:
        raise ImageError(f"cannot write {path}: {exc}") from exc


def load_jpeg(path: str | os.PathLike) -> Image:
    """Read a JPEG file, decoding it to RGB with opaque pixels."""
    try:
        with PILImage.open(path) as source:
            if source.format != "JPEG":
                raise ImageError(f"{path}: not a JPEG file")
            rgb = source.convert("RGB")
    except ImageError:
        raise
    except (OSError, ValueError) as exc:
        raise ImageError(f"cannot read {path}: {exc}") from exc

    width, height = rgb.size
    data = rgb.tobytes()
    row_size = width * 3
    image = Image(width, height, Color.black())
    for y, row in enumerate(image.rows()):
        chunk = data[y * row_size:(y + 1) * row_size]
        row[:] = [Color(r, g, b) for r, g, b in zip(chunk[0::3], chunk[1::3], chunk[2::3])]
    return image