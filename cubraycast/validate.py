"""Checks on the map grid: shape, closing walls and the starting position."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .errors import CubeError, ErrorKind

PLAYER_CHARS = "NSWE"
FLOOR_CHARS = "01"


@dataclass(frozen=True)
class StartPosition:
    """Cell the player starts on and the letter that marked it."""

    x: int
    y: int
    direction: str


def square_map(rows: Iterable[str], width: int) -> list[str]:
    """Pad every row with spaces on the right to exactly ``width`` characters."""
    return [row[:width].ljust(width) for row in rows]


def fill_spaces(rows: Iterable[str]) -> list[str]:
    """Turn every space of the map into a wall."""
    return [row.replace(" ", "1") for row in rows]


def _check_row_edges(row: str, border: bool) -> None:
    first = len(row) - len(row.lstrip(" "))
    last = max(len(row.rstrip(" ")) - 1, 0)
    if border:
        if any(cell not in " 1" for cell in row):
            raise CubeError(ErrorKind.INVALID_WALL)
    elif last > first and (row[first] != "1" or row[last] != "1"):
        raise CubeError(ErrorKind.INVALID_WALL)


def _check_walls(rows: Sequence[str], i: int, j: int) -> None:
    for dj in (-1, 0, 1):
        r = j + dj
        if not 0 <= r < len(rows):
            continue
        row = rows[r]
        for di in (-1, 0, 1):
            if dj == 0 and di == 0:
                continue
            c = i + di
            if 0 <= c < len(row) and row[c] == "0":
                raise CubeError(ErrorKind.INVALID_WALL)


def _check_elements(rows: Sequence[str]) -> StartPosition | None:
    start: StartPosition | None = None
    height = len(rows)
    for j, row in enumerate(rows):
        last_row = j == height - 1
        for i, cell in enumerate(row):
            if cell == " ":
                _check_walls(rows, i, j)
                continue
            if cell in PLAYER_CHARS:
                if start is not None:
                    raise CubeError(ErrorKind.INVALID_PLAYER)
                start = StartPosition(i, j, cell)
            elif cell not in FLOOR_CHARS:
                raise CubeError(ErrorKind.INVALID_CHARACTER)
            if last_row and start is None:
                raise CubeError(ErrorKind.INVALID_PLAYER)
    return start


def check_map(rows: Iterable[str], width: int) -> StartPosition:
    """Validate a squared map and return where the player starts.

    Every row must already be ``width`` characters long (see
    :func:`square_map`). Raises :class:`CubeError` when the map is empty,
    not closed by walls, holds an unknown character or has not exactly one
    player.
    """
    grid = list(rows)
    if any(len(row) != width for row in grid):
        raise ValueError(f"every map row must be {width} characters long")
    height = len(grid)
    for j, row in enumerate(grid):
        if not row:
            raise CubeError(ErrorKind.INVALID_MAP)
        _check_row_edges(row, j in (0, height - 1))
    start = _check_elements(grid)
    if not grid:
        raise CubeError(ErrorKind.INVALID_MAP)
    if start is None:
        raise CubeError(ErrorKind.INVALID_PLAYER)
    return start