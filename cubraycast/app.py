"""Command-line entry point and the interactive game window."""

from __future__ import annotations

import sys
from array import array
from collections.abc import Sequence
from dataclasses import dataclass, field

from .errors import CubeError, ErrorKind
from .player import Key, Player
from .render import Frame, render_frame
from .scene import Scene, load_scene
from .texture import Texture, load_texture
from .textutil import has_suffix
from .validate import check_map, fill_spaces, square_map

SCENE_SUFFIX = ".cub"
TITLE = "Cub3d"


def check_arguments(argv: Sequence[str]) -> str:
    """Return the scene path named by the command line, or raise CubeError."""
    args = list(argv)
    if len(args) != 1:
        raise CubeError(ErrorKind.INVALID_ARGC)
    path = args[0]
    if not has_suffix(path, SCENE_SUFFIX):
        raise CubeError(ErrorKind.INVALID_EXTENSION)
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise CubeError(ErrorKind.INVALID_FILE, path) from exc
    return path


def _wall_textures(scene: Scene) -> tuple[Texture, ...]:
    paths = [scene.texture_paths[slot] for slot in sorted(scene.texture_paths)][:4]
    if len(paths) != 4:
        raise CubeError(ErrorKind.INVALID_TEXTURE)
    textures = []
    for path in paths:
        texture = load_texture(path)
        if texture is None:
            raise CubeError(ErrorKind.INVALID_TEXTURE)
        textures.append(texture)
    return tuple(textures)


def _rgbx_bytes(frame: Frame) -> bytes:
    data = array(
        "I",
        (
            ((c & 0xFF) << 16) | (c & 0xFF00) | ((c >> 16) & 0xFF)
            for c in frame.pixels
        ),
    )
    if sys.byteorder == "big":
        data.byteswap()
    return data.tobytes()


@dataclass
class Game:
    """A validated map, the player on it and what is needed to draw it."""

    grid: list[str]
    player: Player
    textures: tuple[Texture, ...]
    floor: int
    ceiling: int
    frame: Frame = field(default_factory=Frame)

    def run(self) -> int:
        """Open the window and play until it is closed; return the exit status."""
        import pygame

        pygame.init()
        try:
            size = (self.frame.width, self.frame.height)
            screen = pygame.display.set_mode(size)
            pygame.display.set_caption(TITLE)
            pygame.key.set_repeat(200, 30)
            keys = {
                pygame.K_w: Key.W,
                pygame.K_s: Key.S,
                pygame.K_a: Key.A,
                pygame.K_d: Key.D,
                pygame.K_LEFT: Key.LEFT,
                pygame.K_RIGHT: Key.RIGHT,
                pygame.K_ESCAPE: Key.ESCAPE,
            }
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return 0
                    if event.type == pygame.KEYDOWN:
                        code = keys.get(event.key)
                        if code is not None and not self.player.handle_key(
                            code, self.grid
                        ):
                            return 0
                    elif event.type == pygame.MOUSEMOTION:
                        self.player.on_mouse_move(event.pos[0])
                render_frame(
                    self.frame,
                    self.grid,
                    self.player,
                    self.textures,
                    self.floor,
                    self.ceiling,
                )
                image = pygame.image.frombuffer(_rgbx_bytes(self.frame), size, "RGBX")
                screen.blit(image, (0, 0))
                pygame.display.flip()
        finally:
            pygame.quit()


def prepare_game(path: str) -> Game:
    """Load, validate and set up the scene at ``path``."""
    scene = load_scene(path)
    rows = square_map(scene.rows, scene.width)
    start = check_map(rows, scene.width)
    grid = fill_spaces(rows)
    textures = _wall_textures(scene)
    if scene.floor is None or scene.ceiling is None:
        raise CubeError(ErrorKind.INVALID_COLOR)
    return Game(
        grid=grid,
        player=Player.from_start(start),
        textures=textures,
        floor=scene.floor,
        ceiling=scene.ceiling,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the scene file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        game = prepare_game(check_arguments(args))
        return game.run()
    except CubeError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code


if __name__ == "__main__":
    raise SystemExit(main())