import pytest

from cubraycast.errors import CubeError, ErrorKind
from cubraycast.scene import (
    Scene,
    create_rgb,
    load_scene,
    parse_component,
    parse_rgb,
    parse_scene,
)
from cubraycast.texture import Texture

TEXTURES = {
    "n.xpm": Texture(1, 1, (1,)),
    "n2.xpm": Texture(1, 1, (5,)),
    "s.xpm": Texture(1, 1, (2,)),
    "w.xpm": Texture(1, 1, (3,)),
    "e.xpm": Texture(1, 1, (4,)),
}


def fake_loader(path):
    if path == "broken.xpm":
        raise CubeError(ErrorKind.INVALID_TEXTURE)
    return TEXTURES.get(path)


HEADER = [
    "NO n.xpm\n",
    "SO s.xpm\n",
    "WE w.xpm\n",
    "EA e.xpm\n",
    "\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
]
MAP = ["111111\n", "100101\n", "1N0001\n", "111111\n"]


def test_create_rgb_packs_components():
    assert create_rgb(255, 0, 0) == 0xFF0000
    assert create_rgb(0, 255, 0) == 0x00FF00
    assert create_rgb(0, 0, 255) == 0x0000FF


@pytest.mark.parametrize("text", ["", "-1", "256", "1a", " 1", "+3"])
def test_parse_component_rejects(text):
    with pytest.raises(ValueError):
        parse_component(text)


def test_parse_component_accepts_bounds():
    assert parse_component("0") == 0
    assert parse_component("255") == 255
    assert parse_component("0255") == 255


def test_parse_rgb_valid():
    assert parse_rgb("220,100,0") == create_rgb(220, 100, 0)


@pytest.mark.parametrize("text", ["1,2", "1,2,3,", "1,,2,3", "1,2,3,4", "1,2,x", "1,,2"])
def test_parse_rgb_rejects(text):
    with pytest.raises(ValueError):
        parse_rgb(text)


def test_parse_full_scene():
    scene = parse_scene(HEADER + MAP, fake_loader)
    assert isinstance(scene, Scene)
    assert scene.rows == [line.rstrip("\n") for line in MAP]
    assert scene.height == len(MAP)
    assert scene.floor == create_rgb(220, 100, 0)
    assert scene.ceiling == create_rgb(225, 30, 0)
    assert scene.textures["NO"] is TEXTURES["n.xpm"]
    assert scene.textures["EA"] is TEXTURES["e.xpm"]
    assert scene.width == len("F 220,100,0")
    assert scene.texture_paths[0] == "n.xpm"
    assert scene.texture_paths[3] == "e.xpm"


def test_blank_lines_inside_map_are_kept():
    scene = parse_scene(HEADER + MAP[:2] + ["\n"] + MAP[2:], fake_loader)
    assert scene.rows[2] == ""
    assert scene.height == len(MAP) + 1


def test_first_element_lines_are_trimmed():
    lines = ["  NO n.xpm \t\n", "\tSO s.xpm\n"] + HEADER[2:] + MAP
    scene = parse_scene(lines, fake_loader)
    assert scene.textures["NO"] is TEXTURES["n.xpm"]
    assert scene.textures["SO"] is TEXTURES["s.xpm"]


def test_repeated_texture_keeps_first_and_extra_line():
    lines = ["NO n.xpm\n", "NO n2.xpm\n"] + HEADER[1:] + MAP
    scene = parse_scene(lines, fake_loader)
    assert scene.textures["NO"] is TEXTURES["n.xpm"]
    assert scene.rows[0] == "111111"
    assert scene.texture_paths[1] == "n2.xpm"


def test_empty_input_raises_empty_file():
    with pytest.raises(CubeError) as info:
        parse_scene(["\n", "\n"], fake_loader)
    assert info.value.kind is ErrorKind.EMPTY_FILE


def test_unknown_identifier_raises_invalid_map():
    lines = ["XX thing\n"] + HEADER + MAP
    with pytest.raises(CubeError) as info:
        parse_scene(lines, fake_loader)
    assert info.value.kind is ErrorKind.INVALID_MAP


def test_second_floor_after_valid_one_is_invalid_map():
    lines = HEADER[:6] + ["F 1,2,3\n"] + MAP
    with pytest.raises(CubeError) as info:
        parse_scene(lines, fake_loader)
    assert info.value.kind is ErrorKind.INVALID_MAP


def test_bad_colour_raises_invalid_color():
    lines = HEADER[:5] + ["F 256,0,0\n"] + HEADER[6:] + MAP
    with pytest.raises(CubeError) as info:
        parse_scene(lines, fake_loader)
    assert info.value.kind is ErrorKind.INVALID_COLOR


def test_texture_without_path_raises_invalid_texture():
    lines = HEADER[:3] + ["EA\n"] + HEADER[4:] + MAP
    with pytest.raises(CubeError) as info:
        parse_scene(lines, fake_loader)
    assert info.value.kind is ErrorKind.INVALID_TEXTURE


def test_undecodable_texture_raises_invalid_texture():
    lines = ["NO broken.xpm\n"] + HEADER[1:] + MAP
    with pytest.raises(CubeError) as info:
        parse_scene(lines, fake_loader)
    assert info.value.kind is ErrorKind.INVALID_TEXTURE


def test_load_scene_missing_file(tmp_path):
    missing = tmp_path / "nothing.cub"
    with pytest.raises(CubeError) as info:
        load_scene(missing)
    assert info.value.kind is ErrorKind.INVALID_FILE
    assert info.value.param == str(missing)


def _write_xpm(path, colour):
    path.write_text(
        "/* XPM */\n"
        "static char *image[] = {\n"
        '"1 1 1 1",\n'
        f'"a c {colour}",\n'
        '"a"\n'
        "};\n"
    )


def test_load_scene_from_disk(tmp_path):
    names = {"NO": "n.xpm", "SO": "s.xpm", "WE": "w.xpm", "EA": "e.xpm"}
    for name in names.values():
        _write_xpm(tmp_path / name, "#00FF00")
    text = "".join(f"{ident} {tmp_path / name}\n" for ident, name in names.items())
    text += "F 1,2,3\nC 4,5,6\n\n" + "".join(MAP)
    cub = tmp_path / "level.cub"
    cub.write_text(text)
    scene = load_scene(cub)
    assert scene.textures["WE"].pixel(0, 0) == 0x00FF00
    assert scene.floor == create_rgb(1, 2, 3)
    assert scene.rows[-1] == "111111"