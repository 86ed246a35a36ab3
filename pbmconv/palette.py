# The default palette the VGA BIOS loads into the DAC when switching to mode
# 13h. The DAC takes 6-bit components, here they are widened to 8 bits by
# repeating the top bits, so that 0x3f becomes 0xff.
# <https://en.wikipedia.org/wiki/Mode_13h>

VGA_PALETTE: tuple[tuple[int, int, int], ...] = (
  # EGA-compatible colors
  (0, 0, 0), (0, 0, 170), (0, 170, 0), (0, 170, 170),
  (170, 0, 0), (170, 0, 170), (170, 85, 0), (170, 170, 170),
  (85, 85, 85), (85, 85, 255), (85, 255, 85), (85, 255, 255),
  (255, 85, 85), (255, 85, 255), (255, 255, 85), (255, 255, 255),
  # Gray ramp
  (0, 0, 0), (20, 20, 20), (32, 32, 32), (44, 44, 44),
  (56, 56, 56), (69, 69, 69), (81, 81, 81), (97, 97, 97),
  (113, 113, 113), (130, 130, 130), (146, 146, 146), (162, 162, 162),
  (182, 182, 182), (203, 203, 203), (227, 227, 227), (255, 255, 255),
  # High intensity: full, medium and low saturation
  (0, 0, 255), (65, 0, 255), (125, 0, 255), (190, 0, 255),
  (255, 0, 255), (255, 0, 190), (255, 0, 125), (255, 0, 65),
  (255, 0, 0), (255, 65, 0), (255, 125, 0), (255, 190, 0),
  (255, 255, 0), (190, 255, 0), (125, 255, 0), (65, 255, 0),
  (0, 255, 0), (0, 255, 65), (0, 255, 125), (0, 255, 190),
  (0, 255, 255), (0, 190, 255), (0, 125, 255), (0, 65, 255),
  (125, 125, 255), (158, 125, 255), (190, 125, 255), (223, 125, 255),
  (255, 125, 255), (255, 125, 223), (255, 125, 190), (255, 125, 158),
  (255, 125, 125), (255, 158, 125), (255, 190, 125), (255, 223, 125),
  (255, 255, 125), (223, 255, 125), (190, 255, 125), (158, 255, 125),
  (125, 255, 125), (125, 255, 158), (125, 255, 190), (125, 255, 223),
  (125, 255, 255), (125, 223, 255), (125, 190, 255), (125, 158, 255),
  (182, 182, 255), (199, 182, 255), (219, 182, 255), (235, 182, 255),
  (255, 182, 255), (255, 182, 235), (255, 182, 219), (255, 182, 199),
  (255, 182, 182), (255, 199, 182), (255, 219, 182), (255, 235, 182),
  (255, 255, 182), (235, 255, 182), (219, 255, 182), (199, 255, 182),
  (182, 255, 182), (182, 255, 199), (182, 255, 219), (182, 255, 235),
  (182, 255, 255), (182, 235, 255), (182, 219, 255), (182, 199, 255),
  # Medium intensity
  (0, 0, 113), (28, 0, 113), (56, 0, 113), (85, 0, 113),
  (113, 0, 113), (113, 0, 85), (113, 0, 56), (113, 0, 28),
  (113, 0, 0), (113, 28, 0), (113, 56, 0), (113, 85, 0),
  (113, 113, 0), (85, 113, 0), (56, 113, 0), (28, 113, 0),
  (0, 113, 0), (0, 113, 28), (0, 113, 56), (0, 113, 85),
  (0, 113, 113), (0, 85, 113), (0, 56, 113), (0, 28, 113),
  (56, 56, 113), (69, 56, 113), (85, 56, 113), (97, 56, 113),
  (113, 56, 113), (113, 56, 97), (113, 56, 85), (113, 56, 69),
  (113, 56, 56), (113, 69, 56), (113, 85, 56), (113, 97, 56),
  (113, 113, 56), (97, 113, 56), (85, 113, 56), (69, 113, 56),
  (56, 113, 56), (56, 113, 69), (56, 113, 85), (56, 113, 97),
  (56, 113, 113), (56, 97, 113), (56, 85, 113), (56, 69, 113),
  (81, 81, 113), (89, 81, 113), (97, 81, 113), (105, 81, 113),
  (113, 81, 113), (113, 81, 105), (113, 81, 97), (113, 81, 89),
  (113, 81, 81), (113, 89, 81), (113, 97, 81), (113, 105, 81),
  (113, 113, 81), (105, 113, 81), (97, 113, 81), (89, 113, 81),
  (81, 113, 81), (81, 113, 89), (81, 113, 97), (81, 113, 105),
  (81, 113, 113), (81, 105, 113), (81, 97, 113), (81, 89, 113),
  # Low intensity
  (0, 0, 65), (16, 0, 65), (32, 0, 65), (48, 0, 65),
  (65, 0, 65), (65, 0, 48), (65, 0, 32), (65, 0, 16),
  (65, 0, 0), (65, 16, 0), (65, 32, 0), (65, 48, 0),
  (65, 65, 0), (48, 65, 0), (32, 65, 0), (16, 65, 0),
  (0, 65, 0), (0, 65, 16), (0, 65, 32), (0, 65, 48),
  (0, 65, 65), (0, 48, 65), (0, 32, 65), (0, 16, 65),
  (32, 32, 65), (40, 32, 65), (48, 32, 65), (56, 32, 65),
  (65, 32, 65), (65, 32, 56), (65, 32, 48), (65, 32, 40),
  (65, 32, 32), (65, 40, 32), (65, 48, 32), (65, 56, 32),
  (65, 65, 32), (56, 65, 32), (48, 65, 32), (40, 65, 32),
  (32, 65, 32), (32, 65, 40), (32, 65, 48), (32, 65, 56),
  (32, 65, 65), (32, 56, 65), (32, 48, 65), (32, 40, 65),
  (44, 44, 65), (48, 44, 65), (52, 44, 65), (60, 44, 65),
  (65, 44, 65), (65, 44, 60), (65, 44, 52), (65, 44, 48),
  (65, 44, 44), (65, 48, 44), (65, 52, 44), (65, 60, 44),
  (65, 65, 44), (60, 65, 44), (52, 65, 44), (48, 65, 44),
  (44, 65, 44), (44, 65, 48), (44, 65, 52), (44, 65, 60),
  (44, 65, 65), (44, 60, 65), (44, 52, 65), (44, 48, 65),
  # Unused, black
  (0, 0, 0), (0, 0, 0), (0, 0, 0), (0, 0, 0),
  (0, 0, 0), (0, 0, 0), (0, 0, 0), (0, 0, 0),
)


def palette_bytes() -> bytes:
  return bytes(component for color in VGA_PALETTE for component in color)
