# Decoder for uncompressed true-color Windows bitmaps. Only the BI_RGB
# encoding with 24 or 32 bits per pixel is understood, everything else is
# rejected instead of being approximated.
# <https://en.wikipedia.org/wiki/BMP_file_format>
# <https://learn.microsoft.com/en-us/windows/win32/api/wingdi/ns-wingdi-bitmapinfoheader>

import io
import struct
from typing import IO, Any, NamedTuple, TypedDict

from .errors import FormatError

Color = tuple[int, int, int]

SIGNATURE = b"BM"
FILE_HEADER_SIZE = 14
# BITMAPINFOHEADER and the later header versions, which only append fields
DIB_HEADER_SIZES = (40, 52, 56, 108, 124)
SUPPORTED_BPP = (24, 32)
BI_RGB = 0


class FileHeader(TypedDict):
  size: int
  reserved: int
  offset: int


class DibHeader(TypedDict):
  header_size: int
  width: int
  height: int
  planes: int
  bpp: int
  compression: int
  image_size: int
  ppm_x: int
  ppm_y: int
  colors: int
  important_colors: int


class RawImage(NamedTuple):
  width: int
  height: int
  pixels: tuple[Color, ...]


def struct_read(file: IO[bytes], fmt: str, section: str) -> tuple[Any, ...]:
  size = struct.calcsize(fmt)
  data = file.read(size)
  if len(data) != size:
    raise FormatError(f"unexpected end of file in {section}")
  return struct.unpack(fmt, data)


def read_file_header(file: IO[bytes]) -> FileHeader:
  signature, size, reserved, offset = struct_read(file, "<2sIII", "file header")
  if signature != SIGNATURE:
    raise FormatError(f"invalid signature {signature!r} in file header (expected {SIGNATURE!r})")
  return {"size": size, "reserved": reserved, "offset": offset}


def read_dib_header(file: IO[bytes]) -> DibHeader:
  (header_size,) = struct_read(file, "<I", "DIB header")
  if header_size not in DIB_HEADER_SIZES:
    raise FormatError(
      f"unsupported DIB header of {header_size} bytes (only BITMAPINFOHEADER and its extensions)"
    )

  (
    width, height, planes, bpp, compression, image_size, ppm_x, ppm_y, colors, important_colors
  ) = struct_read(file, "<iiHHIIiiII", "DIB header")
  # Color masks and color space fields of the V4/V5 headers, unused with BI_RGB
  struct_read(file, f"<{header_size - 40}x", "DIB header")

  return {
    "header_size": header_size,
    "width": width,
    "height": height,
    "planes": planes,
    "bpp": bpp,
    "compression": compression,
    "image_size": image_size,
    "ppm_x": ppm_x,
    "ppm_y": ppm_y,
    "colors": colors,
    "important_colors": important_colors,
  }


def read_headers(data: bytes) -> tuple[FileHeader, DibHeader]:
  file = io.BytesIO(data)
  return read_file_header(file), read_dib_header(file)


def row_stride(width: int, bpp: int) -> int:
  """Length of a stored row in bytes, rows are padded to a multiple of 4."""
  return -(width * bpp // -32) * 4


def row_order(height: int) -> range:
  """Storage index of each row, listed from the top row of the picture down.

  A positive height means the rows are stored bottom-up, a negative one means
  they are stored top-down.
  """
  if height > 0:
    return range(height - 1, -1, -1)
  return range(-height)


def decode_row(row: bytes, width: int, bytes_per_pixel: int) -> list[Color]:
  # Pixels are stored as BGR or BGRX, trailing padding is never looked at
  return [
    (row[i + 2], row[i + 1], row[i])
    for i in range(0, width * bytes_per_pixel, bytes_per_pixel)
  ]


def decode(data: bytes) -> RawImage:
  file_header, dib = read_headers(data)
  width, height, bpp = dib["width"], dib["height"], dib["bpp"]

  if width <= 0:
    raise FormatError(f"invalid width {width}")
  if height == 0:
    raise FormatError("invalid height 0")
  if dib["planes"] != 1:
    raise FormatError(f"invalid number of color planes {dib['planes']} (must be 1)")
  if bpp not in SUPPORTED_BPP:
    raise FormatError(f"unsupported bits per pixel {bpp} (only 24 and 32 are supported)")
  if dib["compression"] != BI_RGB:
    raise FormatError(
      f"unsupported compression method {dib['compression']} (only uncompressed BI_RGB)"
    )

  stride = row_stride(width, bpp)
  rows = abs(height)
  pixel_data_size = stride * rows
  if dib["image_size"] not in (0, pixel_data_size):
    raise FormatError(
      f"declared pixel data size {dib['image_size']} does not match "
      f"{width}x{rows} at {bpp} bpp ({pixel_data_size} bytes)"
    )

  offset = file_header["offset"]
  if offset < FILE_HEADER_SIZE + dib["header_size"]:
    raise FormatError(f"pixel data offset {offset} points into the headers")
  pixel_data = data[offset:offset + pixel_data_size]
  if len(pixel_data) != pixel_data_size:
    raise FormatError(
      f"truncated pixel data: expected {pixel_data_size} bytes at offset {offset}, "
      f"got {len(pixel_data)}"
    )

  pixels: list[Color] = []
  for y in row_order(height):
    pixels.extend(decode_row(pixel_data[y * stride:(y + 1) * stride], width, bpp // 8))

  return RawImage(width, rows, tuple(pixels))
