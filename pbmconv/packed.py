# The packed bitmap format: a 12-byte header followed by one palette index per
# pixel, row-major from the top-left corner. The palette is not stored, every
# file refers to the VGA default palette.
#
#   offset  size  field
#   0       4     magic, "PBM\0"
#   4       4     width, u32 little-endian
#   8       4     height, u32 little-endian
#   12      w*h   indices

import struct

from .errors import FormatError
from .quantize import IndexImage

MAGIC = b"PBM\0"
HEADER_FORMAT = "<4sII"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)


def encode(image: IndexImage) -> bytes:
  return struct.pack(HEADER_FORMAT, MAGIC, image.width, image.height) + bytes(image.indices)


def decode(data: bytes) -> IndexImage:
  if len(data) < HEADER_SIZE:
    raise FormatError(f"unexpected end of file in header ({len(data)} of {HEADER_SIZE} bytes)")
  magic, width, height = struct.unpack_from(HEADER_FORMAT, data)
  if magic != MAGIC:
    raise FormatError(f"invalid magic {magic!r} (expected {MAGIC!r})")
  if width == 0 or height == 0:
    raise FormatError(f"invalid dimensions {width}x{height}")

  indices = data[HEADER_SIZE:]
  if len(indices) != width * height:
    raise FormatError(
      f"pixel data of {len(indices)} bytes does not match {width}x{height} ({width * height} bytes)"
    )
  return IndexImage(width, height, bytes(indices))
