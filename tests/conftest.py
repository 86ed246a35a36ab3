import pytest

from helpers import BLACK, BLUE, RED, WHITE, build_bmp


@pytest.fixture
def make_bmp():
  return build_bmp


@pytest.fixture
def sample_bmp() -> bytes:
  return build_bmp([[RED, BLACK], [WHITE, BLUE]])
