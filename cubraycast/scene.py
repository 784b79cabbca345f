"""Reading a scene description: wall textures, colours and the map rows."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .errors import CubeError, ErrorKind
from .texture import Texture, load_texture
from .textutil import read_lines, split_fields, strip_chars, trim_spaces

WALL_IDENTIFIERS = ("NO", "SO", "WE", "EA")
ELEMENT_COUNT = 6
_DIGITS = frozenset("0123456789")
_MAX_COMPONENT = 255

TextureLoader = Callable[[str], "Texture | None"]


def create_rgb(red: int, green: int, blue: int) -> int:
    """Pack three colour components into a 0xRRGGBB integer."""
    return red << 16 | green << 8 | blue


def parse_component(text: str) -> int:
    """Parse one colour component: decimal digits only, at most 255."""
    if not text or not set(text) <= _DIGITS:
        raise ValueError(f"invalid colour component: {text!r}")
    value = int(text)
    if value > _MAX_COMPONENT:
        raise ValueError(f"colour component out of range: {text!r}")
    return value


def parse_rgb(text: str) -> int:
    """Parse ``R,G,B`` into a packed colour."""
    if text.count(",") >= 3:
        raise ValueError(f"too many separators in colour: {text!r}")
    fields = split_fields(text, ",")
    if len(fields) != 3:
        raise ValueError(f"colour needs three components: {text!r}")
    red, green, blue = (parse_component(part) for part in fields)
    return create_rgb(red, green, blue)


@dataclass
class Scene:
    """Everything a scene file describes."""

    rows: list[str] = field(default_factory=list)
    width: int = 0
    textures: dict[str, Texture] = field(default_factory=dict)
    texture_paths: dict[int, str | None] = field(default_factory=dict)
    floor: int | None = None
    ceiling: int | None = None

    @property
    def height(self) -> int:
        """Number of map rows."""
        return len(self.rows)


class _SceneReader:
    def __init__(self, texture_loader: TextureLoader) -> None:
        self._loader = texture_loader
        self._elements = -1
        self._slot = 0
        self._textures_ok = True
        self.scene = Scene()

    def feed(self, raw: str) -> None:
        line = strip_chars(raw, "\n")
        if self._elements < 4:
            line = trim_spaces(line)
        if line:
            self._elements += 1
            if self._elements < ELEMENT_COUNT:
                self._element(line, self._slot)
                self._slot += 1
            else:
                self.scene.rows.append(line)
        elif self._elements >= ELEMENT_COUNT:
            self.scene.rows.append(line)
        self.scene.width = max(self.scene.width, len(line))

    def _element(self, line: str, slot: int) -> None:
        fields = split_fields(line, " ")
        if not fields:
            raise CubeError(ErrorKind.INVALID_MAP)
        ident = fields[0]
        value = fields[1] if len(fields) > 1 else None
        scene = self.scene
        if ident in WALL_IDENTIFIERS:
            self._wall(ident, value, slot)
        elif (ident == "F" and scene.floor is None) or (
            ident == "C" and scene.ceiling is None
        ):
            self._colour(ident, value)
        else:
            raise CubeError(ErrorKind.INVALID_MAP)

    def _wall(self, ident: str, path: str | None, slot: int) -> None:
        texture = None
        found = False
        if path is not None:
            try:
                texture = self._loader(path)
                found = texture is not None
            except CubeError as exc:
                if exc.kind is not ErrorKind.INVALID_TEXTURE:
                    raise
                found = True
                self._textures_ok = False
        # A repeated wall texture that loads does not use up an element line.
        if found and ident in self.scene.textures:
            self._elements -= 1
        if texture is not None:
            self.scene.textures.setdefault(ident, texture)
        self.scene.texture_paths[slot] = path

    def _colour(self, ident: str, value: str | None) -> None:
        if value is None:
            return
        try:
            colour = parse_rgb(value)
        except ValueError:
            return
        if ident == "F":
            self.scene.floor = colour
        else:
            self.scene.ceiling = colour

    def finish(self) -> Scene:
        scene = self.scene
        if self._elements == -1:
            raise CubeError(ErrorKind.EMPTY_FILE)
        if not self._textures_ok:
            raise CubeError(ErrorKind.INVALID_TEXTURE)
        if any(ident not in scene.textures for ident in WALL_IDENTIFIERS):
            raise CubeError(ErrorKind.INVALID_TEXTURE)
        if scene.floor is None or scene.ceiling is None:
            raise CubeError(ErrorKind.INVALID_COLOR)
        return scene


def parse_scene(lines: Iterable[str], texture_loader: TextureLoader) -> Scene:
    """Build a :class:`Scene` from the lines of a scene file.

    The first six non-empty lines are elements (wall textures ``NO``, ``SO``,
    ``WE``, ``EA`` and colours ``F``, ``C``); every later line is a map row.
    """
    reader = _SceneReader(texture_loader)
    for raw in lines:
        reader.feed(raw)
    return reader.finish()


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read and parse the scene file at ``path``."""
    try:
        lines = list(read_lines(path))
    except OSError as exc:
        raise CubeError(ErrorKind.INVALID_FILE, os.fspath(path)) from exc
    return parse_scene(lines, load_texture)