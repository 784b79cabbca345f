"""Error kinds reported while loading and running a scene."""

from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    """Every reason the program can stop for."""

    END = auto()
    INVALID_ARGC = auto()
    INVALID_EXTENSION = auto()
    INVALID_FILE = auto()
    EMPTY_FILE = auto()
    NO_MEMORY = auto()
    INVALID_WALL = auto()
    INVALID_MAP = auto()
    INVALID_CHARACTER = auto()
    INVALID_PLAYER = auto()
    INVALID_TEXTURE = auto()
    INVALID_PWD = auto()
    INVALID_COLOR = auto()


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_ARGC: "invalid number of arguments",
    ErrorKind.INVALID_PWD: "cub3d must be in root of the project",
    ErrorKind.INVALID_CHARACTER: "invalid character",
    ErrorKind.INVALID_MAP: "invalid map",
    ErrorKind.INVALID_WALL: "map not surrounded by walls",
    ErrorKind.INVALID_FILE: "error opening file",
    ErrorKind.INVALID_EXTENSION: "must end with .cub",
    ErrorKind.INVALID_TEXTURE: "invalid texture",
    ErrorKind.INVALID_COLOR: "invalid color",
    ErrorKind.INVALID_PLAYER: "invalid number of players",
    ErrorKind.EMPTY_FILE: "empty file",
}


def error_message(kind: ErrorKind) -> str:
    """Return the human-readable message for ``kind`` (empty if it has none)."""
    return _MESSAGES.get(kind, "")


class CubeError(Exception):
    """Raised when the scene or the command line cannot be used."""

    def __init__(self, kind: ErrorKind, param: str | None = None) -> None:
        self.kind = kind
        self.param = param
        super().__init__(kind, param)

    @property
    def exit_code(self) -> int:
        """Process exit status for this error: 0 for a normal end, 1 otherwise."""
        return 0 if self.kind is ErrorKind.END else 1

    def __str__(self) -> str:
        message = error_message(self.kind)
        text = message if self.kind is ErrorKind.END else f"cub3d: {message}"
        if self.param:
            return f"{text}\n{self.param}" if text else self.param
        return text