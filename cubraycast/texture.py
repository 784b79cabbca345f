"""Wall textures loaded from XPM images."""

from __future__ import annotations

import os
from dataclasses import dataclass

from PIL import Image

from .errors import CubeError, ErrorKind
from .textutil import has_suffix

TEXTURE_SUFFIX = ".xpm"


@dataclass(frozen=True)
class Texture:
    """A decoded image whose pixels are 0xRRGGBB integers, row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("texture size must not be negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


def _from_image(image: Image.Image) -> Texture:
    rgb = image.convert("RGB")
    data = iter(rgb.tobytes())
    pixels = tuple(
        (red << 16) | (green << 8) | blue for red, green, blue in zip(data, data, data)
    )
    return Texture(rgb.width, rgb.height, pixels)


def load_texture(path: str | os.PathLike[str] | None) -> Texture | None:
    """Load an XPM texture.

    Returns ``None`` when ``path`` is missing, does not end in ``.xpm`` or
    cannot be opened. Raises :class:`CubeError` with
    ``ErrorKind.INVALID_TEXTURE`` when the file exists but cannot be decoded.
    """
    if path is None:
        return None
    name = os.fspath(path)
    if not has_suffix(name, TEXTURE_SUFFIX):
        return None
    try:
        with open(name, "rb"):
            pass
    except OSError:
        return None
    try:
        with Image.open(name) as image:
            return _from_image(image)
    except (OSError, SyntaxError, ValueError) as exc:
        raise CubeError(ErrorKind.INVALID_TEXTURE) from exc