"""Ray casting of the map grid into a frame of pixels."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from .player import TILE_SIZE, Player
from .texture import Texture

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 1000
FIELD_OF_VIEW = 60
RAY_STEPS_PER_UNIT = 9
WALL_SCALE = 30000
_MIN_DISTANCE = 1e-6


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def _cell(value: float) -> int:
    return _trunc_div(int(value), TILE_SIZE)


def _at(grid: Sequence[str], x: float, y: float) -> str:
    """Map character under world point (x, y); outside the grid counts as wall."""
    row, col = _cell(y), _cell(x)
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return "1"


@dataclass
class Frame:
    """A width x height image of 0xRRGGBB pixels."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("frame size must be positive")
        self.pixels = [0] * (self.width * self.height)

    def put(self, x: int, y: int, color: int) -> None:
        """Set one pixel; points outside the frame are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get(self, x: int, y: int) -> int:
        """Return the pixel at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall and the wall slice it projects to."""

    x: float
    y: float
    distance: float
    wall_height: float
    start: int
    end: int


def cast_ray(
    grid: Sequence[str], x: float, y: float, angle: float, player_angle: float
) -> RayHit:
    """March a ray from (x, y) at ``angle`` degrees until it enters a wall."""
    rad = angle * math.pi / 180
    dx = math.cos(rad) / RAY_STEPS_PER_UNIT
    dy = math.sin(rad) / RAY_STEPS_PER_UNIT
    ray_x, ray_y = x, y
    while _at(grid, ray_x, ray_y) != "1":
        ray_x += dx
        ray_y += dy
    euclid = math.hypot(ray_y - y, ray_x - x)
    distance = euclid * math.cos((angle - player_angle) * math.pi / 180)
    distance = max(distance, _MIN_DISTANCE)
    wall_height = WALL_SCALE / distance
    start = int(WINDOW_HEIGHT / 2 - wall_height / 2)
    end = int(start + wall_height)
    return RayHit(ray_x, ray_y, distance, wall_height, start, end)


def texture_color(
    ray_x: float,
    ray_y: float,
    texture: Texture,
    wall_height: float,
    start: int,
    y: int,
) -> int:
    """Colour of the wall slice at screen row ``y``; 0 outside the texture."""
    wall = int(wall_height)
    if wall == 0:
        return 0
    tex_x = _trunc_div(
        _trunc_mod(int(ray_x + ray_y), TILE_SIZE) * texture.width, TILE_SIZE
    )
    tex_y = _trunc_div((y - start) * texture.height, wall)
    if 0 <= tex_x < texture.width and 0 <= tex_y < texture.height:
        return texture.pixel(tex_x, tex_y)
    return 0


def _choose_texture(
    grid: Sequence[str], ray_x: float, ray_y: float, textures: Sequence[Texture]
) -> Texture:
    if _at(grid, ray_x, ray_y - 1) == "1" and _at(grid, ray_x, ray_y + 1) == "0":
        return textures[0]
    right = _at(grid, ray_x + 1, ray_y)
    left = _at(grid, ray_x - 1, ray_y)
    if right == "1" and left == "0":
        return textures[1]
    if right == "0" and left == "1":
        return textures[2]
    return textures[3]


def render_frame(
    frame: Frame,
    grid: Sequence[str],
    player: Player,
    textures: Sequence[Texture],
    floor: int,
    ceiling: int,
) -> Frame:
    """Draw one view of ``grid`` as seen by ``player`` into ``frame``."""
    if len(textures) != 4:
        raise ValueError("exactly four wall textures are needed")
    step = FIELD_OF_VIEW / frame.width
    ray_angle = player.angle - FIELD_OF_VIEW / 2
    for column in range(frame.width):
        hit = cast_ray(grid, player.x, player.y, ray_angle, player.angle)
        for row in range(0, min(hit.start, frame.height)):
            frame.put(column, row, ceiling)
        texture = _choose_texture(grid, hit.x, hit.y, textures)
        wall = int(hit.wall_height)
        for row in range(max(hit.start, 0), min(hit.end, frame.height)):
            frame.put(
                column, row, texture_color(hit.x, hit.y, texture, wall, hit.start, row)
            )
        for row in range(max(hit.end, 0), frame.height):
            frame.put(column, row, floor)
        ray_angle += step
    return frame