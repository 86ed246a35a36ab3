import struct

RED = (255, 0, 0)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BLUE = (0, 0, 255)


def build_bmp(
  rows: list[list[tuple[int, int, int]]],
  bpp: int = 24,
  top_down: bool = False,
  compression: int = 0,
  image_size=None,
  dib_size: int = 40,
  planes: int = 1,
) -> bytes:
  """Writes a bitmap the way common encoders do, `rows` are listed top first.

  Below 24 bpp the pixels are still stored as BGR, only the headers of such
  files are looked at.
  """
  height, width = len(rows), len(rows[0])
  stride = -(width * bpp // -32) * 4

  pixel_data = bytearray()
  for row in rows if top_down else rows[::-1]:
    line = bytearray()
    for r, g, b in row:
      line += bytes((b, g, r))
      if bpp == 32:
        line.append(0xff)
    line += bytes(max(0, stride - len(line)))
    pixel_data += line

  if image_size is None:
    image_size = len(pixel_data)
  offset = 14 + dib_size
  dib = struct.pack(
    "<IiiHHIIiiII", dib_size, width, -height if top_down else height, planes, bpp, compression,
    image_size, 2835, 2835, 0, 0
  ) + bytes(dib_size - 40)
  header = struct.pack("<2sIII", b"BM", offset + len(pixel_data), 0, offset)
  return header + dib + bytes(pixel_data)
