"""Uncompressed 24-bit BMP images."""

from __future__ import annotations

import os
import struct

from imgconv.image import Color, Image, ImageError

BMP_SIGNATURE = b"BM"
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
HEADERS_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE
DPI_300 = 11811
COMPRESSION = 0
PLANE_COUNT = 1
BITS_PER_PIXEL = 24
SIGNIFICANT_COLORS_COUNT = 0x10000000

# signature, total size, reserved, offset of pixel data
_FILE_HEADER = struct.Struct("<2sIII")
# header size, width, height, planes, bits per pixel, compression, data size,
# horizontal density, vertical density, used colours, significant colours
_INFO_HEADER = struct.Struct("<IiiHHIIIIII")


def bmp_stride(width: int) -> int:
    """Bytes in one stored row: three per pixel, padded to a multiple of four."""
    return 4 * ((width * 3 + 3) // 4)


def _bgr_bytes(row: list[Color]) -> bytes:
    return bytes(component for pixel in row for component in (pixel.b, pixel.g, pixel.r))


def _pixels_from_bgr(chunk: bytes) -> list[Color]:
    return [Color(r, g, b) for b, g, r in zip(chunk[0::3], chunk[1::3], chunk[2::3])]


def save_bmp(path: str | os.PathLike, image: Image) -> None:
    """Write image to path as a 24-bit BMP."""
    stride = bmp_stride(image.width)
    data_size = stride * image.height
    file_header = _FILE_HEADER.pack(BMP_SIGNATURE, HEADERS_SIZE + data_size, 0, HEADERS_SIZE)
    info_header = _INFO_HEADER.pack(
        INFO_HEADER_SIZE,
        image.width,
        image.height,
        PLANE_COUNT,
        BITS_PER_PIXEL,
        COMPRESSION,
        data_size,
        DPI_300,
        DPI_300,
        0,
        SIGNIFICANT_COLORS_COUNT,
    )
    padding = bytes(stride - image.width * 3)
    try:
        with open(path, "wb") as out:
            out.write(file_header)
            out.write(info_header)
            for row in reversed(list(image.rows())):
                out.write(_bgr_bytes(row) + padding)
    except OSError as exc:
        raise ImageError(f"cannot write {path}: {exc}") from exc


def load_bmp(path: str | os.PathLike) -> Image:
    """Read a 24-bit BMP whose pixel data follows the headers."""
    try:
        with open(path, "rb") as src:
            raw = src.read(FILE_HEADER_SIZE)
            if len(raw) < FILE_HEADER_SIZE:
                raise ImageError(f"{path}: file header is truncated")
            signature, _total, _reserved, _offset = _FILE_HEADER.unpack(raw)
            if signature != BMP_SIGNATURE:
                raise ImageError(f"{path}: not a BMP file")

            raw = src.read(INFO_HEADER_SIZE)
            if len(raw) < INFO_HEADER_SIZE:
                raise ImageError(f"{path}: info header is truncated")
            head_size, width, height, *_rest = _INFO_HEADER.unpack(raw)
            if head_size != INFO_HEADER_SIZE:
                raise ImageError(f"{path}: unsupported info header size {head_size}")
            if width < 0 or height < 0:
                raise ImageError(f"{path}: negative image size")

            stride = bmp_stride(width)
            image = Image(width, height, Color.black())
            for y in reversed(range(height)):
                chunk = src.read(stride)
                if len(chunk) < stride:
                    raise ImageError(f"{path}: pixel data is truncated")
                image.line(y)[:] = _pixels_from_bgr(chunk[:width * 3])
    except OSError as exc:
        raise ImageError(f"cannot read {path}: {exc}") from exc
    return image