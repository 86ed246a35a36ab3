import argparse
import sys
from pathlib import Path
from typing import Optional

from . import preview
from .convert import convert_file
from .errors import FormatError
from .packed import HEADER_SIZE


def main(argv: Optional[list[str]] = None) -> int:
  parser = argparse.ArgumentParser(
    prog="pbmconv",
    description="Convert an uncompressed 24 or 32-bit BMP into a packed bitmap using the VGA palette.",
  )
  parser.add_argument("input", type=Path, help="source bitmap")
  parser.add_argument("output", type=Path, help="packed bitmap to write")
  parser.add_argument("--preview", type=Path, metavar="PNG", help="also render the result to a PNG")
  parser.add_argument("-q", "--quiet", action="store_true", help="do not print a summary")
  args = parser.parse_args(argv)

  try:
    image = convert_file(args.input, args.output)
  except FormatError as e:
    print(f"error: {args.input}: {e}", file=sys.stderr)
    return 1
  except OSError as e:
    print(f"error: {e}", file=sys.stderr)
    return 1

  if not args.quiet:
    print(
      f"{args.input} -> {args.output}: {image.width}x{image.height}, "
      f"{HEADER_SIZE + len(image.indices)} bytes",
      file=sys.stderr,
    )

  if args.preview is not None:
    try:
      preview.render(image).save(args.preview, format="PNG")
    except OSError as e:
      print(f"error: {args.output} was written, but the preview was not: {e}", file=sys.stderr)
      return 1
  return 0


if __name__ == "__main__":
  sys.exit(main())
