"""Command that converts an image between JPEG, PPM and BMP by file extension."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from enum import Enum
from pathlib import Path

from imgconv.bmp import load_bmp, save_bmp
from imgconv.image import Image, ImageError
from imgconv.jpeg import load_jpeg, save_jpeg
from imgconv.ppm import load_ppm, save_ppm


class Format(Enum):
    """Image file formats known to the converter."""

    JPEG = "jpeg"
    PPM = "ppm"
    BMP = "bmp"
    UNKNOWN = "unknown"


_EXTENSIONS = {
    ".jpg": Format.JPEG,
    ".jpeg": Format.JPEG,
    ".ppm": Format.PPM,
    ".bmp": Format.BMP,
}

_CODECS: dict[Format, tuple[Callable[[os.PathLike], Image], Callable[[os.PathLike, Image], None]]] = {
    Format.JPEG: (load_jpeg, save_jpeg),
    Format.PPM: (load_ppm, save_ppm),
    Format.BMP: (load_bmp, save_bmp),
}


def format_for_path(path: str | os.PathLike) -> Format:
    """The format implied by the file's extension (case-sensitive)."""
    return _EXTENSIONS.get(Path(path).suffix, Format.UNKNOWN)


def _codec(path: str | os.PathLike):
    fmt = format_for_path(path)
    if fmt is Format.UNKNOWN:
        raise ImageError(f"unknown format of {path}")
    return _CODECS[fmt]


def load_image(path: str | os.PathLike) -> Image:
    """Load an image in the format given by its extension."""
    loader, _ = _codec(path)
    return loader(path)


def save_image(path: str | os.PathLike, image: Image) -> None:
    """Save an image in the format given by the path's extension."""
    _, saver = _codec(path)
    saver(path, image)


def main(argv: Sequence[str] | None = None) -> int:
    """Convert <in_file> to <out_file>; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: imgconv <in_file> <out_file>", file=sys.stderr)
        return 1

    in_path, out_path = Path(args[0]), Path(args[1])
    if format_for_path(in_path) is Format.UNKNOWN:
        print("Unknown format of the input file", file=sys.stderr)
        return 2
    if format_for_path(out_path) is Format.UNKNOWN:
        print("Unknown format of the output file", file=sys.stderr)
        return 3

    try:
        image = load_image(in_path)
    except ImageError:
        image = Image()
    if not image:
        print("Loading failed", file=sys.stderr)
        return 4

    try:
        save_image(out_path, image)
    except ImageError:
        print("Saving failed", file=sys.stderr)
        return 5

    print("Successfully converted")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())