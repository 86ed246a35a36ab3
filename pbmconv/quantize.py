from typing import NamedTuple

from .bitmap import Color, RawImage
from .palette import VGA_PALETTE


class IndexImage(NamedTuple):
  width: int
  height: int
  indices: bytes


def nearest_index(color: Color) -> int:
  """Index of the palette entry closest to the color in RGB space.

  Distances are compared squared, in integers. Of several equally close
  entries the one with the lowest index wins.
  """
  r, g, b = color
  best_index = 0
  best_distance = 3 * 256 * 256
  for i, (pr, pg, pb) in enumerate(VGA_PALETTE):
    distance = (r - pr) ** 2 + (g - pg) ** 2 + (b - pb) ** 2
    if distance < best_distance:
      best_distance = distance
      best_index = i
  return best_index


def quantize(image: RawImage) -> IndexImage:
  # Real pictures repeat colors a lot, the cache skips the scan for those
  cache: dict[Color, int] = {}
  indices = bytearray()
  for color in image.pixels:
    index = cache.get(color)
    if index is None:
      index = cache[color] = nearest_index(color)
    indices.append(index)
  return IndexImage(image.width, image.height, bytes(indices))
