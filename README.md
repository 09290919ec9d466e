# imgconv

A small image library and command-line converter for PPM (binary P6, maximum
value 255), BMP (24-bit, uncompressed) and JPEG files. JPEG files are read
and written through Pillow.

## Installation

```
pip install .
```

## Command line

```
imgconv <in_file> <out_file>
```

The same command is available as `python -m imgconv.cli <in_file> <out_file>`.

The format of each file is taken from its extension. Extensions are matched
exactly, so `.JPG` or `.BMP` are not recognised:

| Extension        | Format |
|------------------|--------|
| `.jpg`, `.jpeg`  | JPEG   |
| `.ppm`           | PPM    |
| `.bmp`           | BMP    |

On success the tool prints `Successfully converted` and exits with status 0.
Otherwise it prints a message to standard error and exits with one of these
codes:

| Code | Meaning                                          |
|------|--------------------------------------------------|
| 1    | wrong number of arguments                        |
| 2    | unknown format of the input file                 |
| 3    | unknown format of the output file                |
| 4    | the input could not be loaded, or it is empty    |
| 5    | the output image could not be saved              |

## Library use

```python
from imgconv.image import Color, Image
from imgconv.bmp import save_bmp, load_bmp

image = Image(4, 3, Color.black())
image[1, 2] = Color(255, 0, 0)
save_bmp("out.bmp", image)

copy = load_bmp("out.bmp")
assert copy[1, 2].r == 255
assert copy == image
```

### `imgconv.image`

- `Color(r, g, b, a=255)` is an immutable colour; each component must be an
  integer in 0..255, otherwise `ValueError` is raised. `Color.black()` is
  opaque black.
- `Image(width=0, height=0, fill=None)` is a grid of colours filled with
  `fill` (black by default). Pixels are read and written as `image[x, y]`;
  coordinates outside the image raise `IndexError`. `width` and `height` are
  read-only properties, `line(y)` returns the row at `y` as a list whose
  changes show in the image, and `rows()` iterates over the rows from top to
  bottom. An image is true when both its width and height are positive, and
  two images are equal when their sizes and pixels match.
- `ImageError` is raised by every loader and saver when a file cannot be
  read, written or understood.

### Formats

- `imgconv.ppm`: `save_ppm(path, image)` and `load_ppm(path)`.
- `imgconv.bmp`: `save_bmp(path, image)`, `load_bmp(path)` and
  `bmp_stride(width)`, the padded size in bytes of one stored row.
- `imgconv.jpeg`: `save_jpeg(path, image)` and `load_jpeg(path)`. Saving an
  empty image raises `ImageError`.

### Choosing a format by extension

`imgconv.cli` offers `Format`, `format_for_path(path)`, `load_image(path)`
and `save_image(path, image)`. The last two pick the format from the file's
extension and raise `ImageError` for an unknown one.

## Limitations

- Only the three formats above are handled.
- Transparency is not stored: all formats are written as RGB, and loaded
  pixels are always opaque.
- PPM support covers only binary P6 files whose maximum colour value is 255;
  BMP support covers only 24-bit files with the 40-byte info header whose
  pixel data follows the headers directly. Top-down (negative height) BMPs
  are rejected.
- JPEG files are saved with Pillow's default quality settings; there is no
  option to change them.