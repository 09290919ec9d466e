"""Read, write and convert PPM, BMP and JPEG images."""

__version__ = "0.1.0"
__all__ = ["__version__"]