# Renders packed bitmaps back into regular images, which is the only way to look
# at them on a machine without a VGA adapter.

import argparse
import sys
from pathlib import Path
from typing import Optional

from PIL import Image

from . import packed
from .errors import FormatError
from .palette import palette_bytes
from .quantize import IndexImage


def render(image: IndexImage) -> Image.Image:
  img = Image.frombytes("P", (image.width, image.height), image.indices)
  img.putpalette(palette_bytes())
  return img


def pbm_to_png(input_path: Path, output_path: Path) -> None:
  image = packed.decode(input_path.read_bytes())
  render(image).save(output_path, format="PNG")


def main(argv: Optional[list[str]] = None) -> int:
  parser = argparse.ArgumentParser(prog="pbm2png", description="Render a packed bitmap to PNG.")
  parser.add_argument("input", type=Path, help="packed bitmap")
  parser.add_argument("output", type=Path, help="PNG file to write")
  args = parser.parse_args(argv)

  try:
    pbm_to_png(args.input, args.output)
  except FormatError as e:
    print(f"error: {args.input}: {e}", file=sys.stderr)
    return 1
  except OSError as e:
    print(f"error: {e}", file=sys.stderr)
    return 1
  return 0


if __name__ == "__main__":
  sys.exit(main())
