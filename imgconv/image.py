"""In-memory raster images made of RGBA pixels."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


class ImageError(Exception):
    """Raised when an image cannot be loaded or saved."""


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit components."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"colour component {name}={value!r} is not in 0..255")

    @staticmethod
    def black() -> Color:
        """Opaque black."""
        return Color(0, 0, 0, 255)


class Image:
    """A rectangular grid of colours, addressed as image[x, y]."""

    def __init__(self, width: int = 0, height: int = 0, fill: Color | None = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"image size {width}x{height} is negative")
        if fill is None:
            fill = Color.black()
        self._width = width
        self._height = height
        self._rows = [[fill] * width for _ in range(height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self._width}x{self._height} image")

    def __getitem__(self, key: tuple[int, int]) -> Color:
        x, y = key
        self._check(x, y)
        return self._rows[y][x]

    def __setitem__(self, key: tuple[int, int], value: Color) -> None:
        x, y = key
        self._check(x, y)
        self._rows[y][x] = value

    def line(self, y: int) -> list[Color]:
        """The row at height y; changes to the list change the image."""
        if not 0 <= y < self._height:
            raise IndexError(f"line {y} is outside an image of height {self._height}")
        return self._rows[y]

    def rows(self) -> Iterator[list[Color]]:
        """Rows from top to bottom."""
        return iter(self._rows)

    def __bool__(self) -> bool:
        return self._width > 0 and self._height > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._rows == other._rows
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Image(width={self._width}, height={self._height})"