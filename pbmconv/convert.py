from pathlib import Path

from . import bitmap, packed
from .quantize import IndexImage, quantize


def convert_image(data: bytes) -> IndexImage:
  return quantize(bitmap.decode(data))


def convert(data: bytes) -> bytes:
  return packed.encode(convert_image(data))


def convert_file(input_path: Path, output_path: Path) -> IndexImage:
  # Nothing is written unless the whole conversion went through
  image = convert_image(input_path.read_bytes())
  output_path.write_bytes(packed.encode(image))
  return image
