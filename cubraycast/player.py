"""The player: position in world units, view angle and keyboard handling."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from .validate import StartPosition

TILE_SIZE = 50
STEP = 5
TURN = 150 * math.pi / 180
MOUSE_TURN = 200 * math.pi / 180
MOUSE_DEADZONE = 4

_ANGLES = {"N": 0.0, "E": 90.0, "W": -90.0, "S": 180.0}


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 0
    S = 1
    D = 2
    W = 13
    ESCAPE = 53
    LEFT = 123
    RIGHT = 124


def initial_angle(direction: str) -> float:
    """View angle in degrees for a start letter; unknown letters give 0."""
    return _ANGLES.get(direction, 0.0)


def _cell(value: float) -> int:
    whole = int(value)
    quotient = abs(whole) // TILE_SIZE
    return quotient if whole >= 0 else -quotient


def _is_wall(grid: Sequence[str], x: float, y: float) -> bool:
    row, col = _cell(y), _cell(x)
    if not 0 <= row < len(grid) or not 0 <= col < len(grid[row]):
        return True
    return grid[row][col] == "1"


def _rad(degrees: float) -> float:
    return degrees * math.pi / 180


@dataclass
class Player:
    """Position in world units and view angle in degrees."""

    x: float
    y: float
    angle: float = 0.0
    mouse_x: int = 0

    @classmethod
    def from_start(cls, start: StartPosition, direction: str | None = None) -> Player:
        """Place the player in the middle-left corner of its start cell."""
        letter = start.direction if direction is None else direction
        return cls(
            x=float(start.x * TILE_SIZE),
            y=float(start.y * TILE_SIZE),
            angle=initial_angle(letter),
        )

    def _forward(self, grid: Sequence[str]) -> None:
        rad = _rad(self.angle)
        side = _rad(self.angle + _rad(1000) * 3)
        if _is_wall(grid, self.x + math.cos(rad) * STEP, self.y + math.sin(rad) * STEP):
            return
        if _is_wall(grid, self.x + math.cos(side) * STEP, self.y + math.sin(side) * STEP):
            return
        self.x += math.cos(rad) * STEP
        self.y += math.sin(rad) * STEP

    def _backward(self, grid: Sequence[str]) -> None:
        rad = _rad(self.angle)
        if _is_wall(grid, self.x - math.cos(rad) * STEP, self.y - math.sin(rad) * STEP):
            return
        self.x -= math.cos(rad) * STEP
        self.y -= math.sin(rad) * STEP

    def _left(self, grid: Sequence[str]) -> None:
        probe = _rad(self.angle - math.pi)
        if _is_wall(grid, self.x + math.sin(probe) * STEP, self.y - math.cos(probe) * STEP):
            return
        rad = _rad(self.angle)
        self.x += math.sin(rad) * STEP
        self.y -= math.cos(rad) * STEP

    def _right(self, grid: Sequence[str]) -> None:
        probe = _rad(self.angle + math.pi)
        if _is_wall(grid, self.x - math.sin(probe) * STEP, self.y + math.cos(probe) * STEP):
            return
        rad = _rad(self.angle)
        self.x -= math.sin(rad) * STEP
        self.y += math.cos(rad) * STEP

    def handle_key(self, key: int, grid: Sequence[str]) -> bool:
        """React to a key press; return False when the game should end."""
        try:
            code = Key(key)
        except ValueError:
            return True
        if code is Key.ESCAPE:
            return False
        if code is Key.LEFT:
            self.angle -= TURN
        elif code is Key.RIGHT:
            self.angle += TURN
        elif code is Key.W:
            self._forward(grid)
        elif code is Key.S:
            self._backward(grid)
        elif code is Key.A:
            self._left(grid)
        elif code is Key.D:
            self._right(grid)
        return True

    def on_mouse_move(self, x: int) -> None:
        """Turn when the pointer moved more than a few pixels sideways."""
        delta = x - self.mouse_x
        if delta > MOUSE_DEADZONE:
            self.angle += MOUSE_TURN
        elif delta < -MOUSE_DEADZONE:
            self.angle -= MOUSE_TURN
        self.mouse_x = x