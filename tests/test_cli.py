import struct

from PIL import Image

from pbmconv import preview
from pbmconv.__main__ import main
from pbmconv.packed import MAGIC, encode
from pbmconv.quantize import IndexImage

from helpers import RED


def test_convert(tmp_path, capsys, sample_bmp):
  src, dst = tmp_path / "in.bmp", tmp_path / "out.pbm"
  src.write_bytes(sample_bmp)
  assert main([str(src), str(dst)]) == 0
  assert dst.read_bytes()[12:] == bytes([40, 0, 15, 32])
  assert "2x2, 16 bytes" in capsys.readouterr().err


def test_quiet(tmp_path, capsys, sample_bmp):
  src, dst = tmp_path / "in.bmp", tmp_path / "out.pbm"
  src.write_bytes(sample_bmp)
  assert main(["-q", str(src), str(dst)]) == 0
  assert capsys.readouterr().err == ""


def test_preview(tmp_path, sample_bmp):
  src, dst, png = tmp_path / "in.bmp", tmp_path / "out.pbm", tmp_path / "out.png"
  src.write_bytes(sample_bmp)
  assert main(["-q", str(src), str(dst), "--preview", str(png)]) == 0
  with Image.open(png) as img:
    assert img.convert("RGB").getpixel((0, 0)) == RED


def test_format_error(tmp_path, capsys, make_bmp):
  src, dst = tmp_path / "in.bmp", tmp_path / "out.pbm"
  src.write_bytes(make_bmp([[RED]], bpp=8))
  assert main([str(src), str(dst)]) == 1
  err = capsys.readouterr().err
  assert err.startswith(f"error: {src}: ")
  assert "unsupported bits per pixel 8" in err
  assert not dst.exists()


def test_missing_input(tmp_path, capsys):
  assert main([str(tmp_path / "missing.bmp"), str(tmp_path / "out.pbm")]) == 1
  assert capsys.readouterr().err.startswith("error: ")


def test_pbm2png(tmp_path, capsys):
  src, dst = tmp_path / "in.pbm", tmp_path / "out.png"
  src.write_bytes(encode(IndexImage(1, 1, bytes([40]))))
  assert preview.main([str(src), str(dst)]) == 0
  with Image.open(dst) as img:
    assert img.convert("RGB").getpixel((0, 0)) == RED

  src.write_bytes(b"garbage")
  assert preview.main([str(src), str(dst)]) == 1
  assert "unexpected end of file" in capsys.readouterr().err


def test_preview_failure_keeps_output(tmp_path, capsys, sample_bmp):
  src, dst = tmp_path / "in.bmp", tmp_path / "out.pbm"
  src.write_bytes(sample_bmp)
  # A directory cannot be opened as the PNG file
  assert main(["-q", str(src), str(dst), "--preview", str(tmp_path)]) == 1
  assert dst.read_bytes()[12:] == bytes([40, 0, 15, 32])
  assert f"error: {dst} was written, but the preview was not" in capsys.readouterr().err


def test_pbm2png_empty_image(tmp_path, capsys):
  src, dst = tmp_path / "in.pbm", tmp_path / "out.png"
  for width, height in [(0, 0), (0, 0xffffffff)]:
    src.write_bytes(MAGIC + struct.pack("<II", width, height))
    assert preview.main([str(src), str(dst)]) == 1
    assert f"invalid dimensions {width}x{height}" in capsys.readouterr().err
  assert not dst.exists()
