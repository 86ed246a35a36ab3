from .bitmap import RawImage
from .convert import convert, convert_file
from .errors import FormatError
from .packed import HEADER_SIZE, MAGIC
from .palette import VGA_PALETTE
from .quantize import IndexImage, nearest_index, quantize

__version__ = "0.1.0"

__all__ = [
  "HEADER_SIZE",
  "MAGIC",
  "VGA_PALETTE",
  "FormatError",
  "IndexImage",
  "RawImage",
  "convert",
  "convert_file",
  "nearest_index",
  "quantize",
]
