import pytest

from raycube.colors import rgb_to_int
from raycube.config import (
    INVALID_PATH,
    SceneConfig,
    check_texture_path,
    load_scene,
    parse_scene,
)
from raycube.mapcheck import find_spawn
from raycube.reader import CubError

TEXTURES = ["NO ./north.xpm", "SO ./south.xpm", "WE ./west.xpm", "EA ./east.xpm"]
COLORS = ["F 220,100,0", "C 225,30,0"]
GRID = ["111111", "100001", "10N001", "111111"]


def scene(textures=TEXTURES, colors=COLORS, grid=GRID):
    return [*textures, *colors, "", *grid]


def test_valid_scene_paths_and_colors():
    config = parse_scene(scene(), check_files=False)
    assert config.north == "./north.xpm"
    assert config.south == "./south.xpm"
    assert config.west == "./west.xpm"
    assert config.east == "./east.xpm"
    assert config.floor_color == rgb_to_int((220, 100, 0))
    assert config.ceiling_color == rgb_to_int((225, 30, 0))


def test_valid_scene_spawn_and_grid():
    config = parse_scene(scene(), check_files=False)
    assert config.spawn == find_spawn(list(GRID))
    assert len(config.grid) == len(GRID)
    assert all("N" not in row for row in config.grid)


def test_wall_textures_order():
    config = parse_scene(scene(), check_files=False)
    assert config.wall_textures == (config.west, config.east, config.north, config.south)


def test_single_letter_identifiers_accepted():
    lines = scene(textures=["N ./n.xpm", "S ./s.xpm", "W ./w.xpm", "E ./e.xpm"])
    config = parse_scene(lines, check_files=False)
    assert (config.north, config.south, config.west, config.east) == (
        "./n.xpm",
        "./s.xpm",
        "./w.xpm",
        "./e.xpm",
    )


def test_missing_direction():
    with pytest.raises(CubError, match="Missing direction information"):
        parse_scene(scene(textures=TEXTURES[:3]), check_files=False)


def test_duplicated_direction_leaves_one_missing():
    lines = scene(textures=[TEXTURES[0], TEXTURES[0], TEXTURES[1], TEXTURES[2]])
    with pytest.raises(CubError, match="Missing direction information"):
        parse_scene(lines, check_files=False)


def test_missing_floor():
    with pytest.raises(CubError, match="Missing floor color information"):
        parse_scene(scene(colors=["C 225,30,0"]), check_files=False)


def test_missing_ceiling():
    with pytest.raises(CubError, match="Missing ceiling color information"):
        parse_scene(scene(colors=["F 220,100,0"]), check_files=False)


def test_invalid_abbreviation():
    lines = scene(textures=["NX ./north.xpm", *TEXTURES[1:]])
    with pytest.raises(CubError, match="Invalid direction abbreviation"):
        parse_scene(lines, check_files=False)


def test_lines_without_identifiers_are_ignored():
    lines = scene(textures=["R 1920 1080", *TEXTURES])
    config = parse_scene(lines, check_files=False)
    assert config.north == "./north.xpm"


def test_later_color_wins():
    lines = scene(colors=["F 1,2,3", *COLORS])
    config = parse_scene(lines, check_files=False)
    assert config.floor_color == rgb_to_int((220, 100, 0))


def test_color_range_error_propagates():
    with pytest.raises(CubError, match="Invalid RGB range"):
        parse_scene(scene(colors=["F 256,0,0", "C 1,1,1"]), check_files=False)


def test_bad_texture_extension_in_scene():
    lines = scene(textures=["NO ./north.png", *TEXTURES[1:]])
    with pytest.raises(CubError) as info:
        parse_scene(lines, check_files=False)
    assert info.value.message == INVALID_PATH


def test_open_map_rejected():
    grid = ["111111", "100001", "10N00", "111111"]
    with pytest.raises(CubError, match="Map not surrounded by walls"):
        parse_scene(scene(grid=grid), check_files=False)


def test_no_map_rejected():
    with pytest.raises(CubError, match="no player start position"):
        parse_scene(scene(grid=[]), check_files=False)


@pytest.mark.parametrize("text", [" ./a.xpm", "./a.xpm  ", "./a.xp", "./a."])
def test_check_texture_path_accepts(text):
    assert check_texture_path(text, check_files=False) == text.strip(" ")


@pytest.mark.parametrize("text", ["", "   ", "\n", "./a.png", "noextension", "./a.xpmx"])
def test_check_texture_path_rejects(text):
    with pytest.raises(CubError) as info:
        check_texture_path(text, check_files=False)
    assert info.value.message == INVALID_PATH


def test_check_texture_path_missing_file(tmp_path):
    with pytest.raises(CubError) as info:
        check_texture_path(str(tmp_path / "absent.xpm"), check_files=True)
    assert info.value.message == INVALID_PATH


def test_check_texture_path_existing_file(tmp_path):
    target = tmp_path / "wall.xpm"
    target.write_text("x")
    assert check_texture_path(f"  {target}  ", check_files=True) == str(target)


def test_load_scene_round_trip(tmp_path):
    names = {"NO": "north.xpm", "SO": "south.xpm", "WE": "west.xpm", "EA": "east.xpm"}
    for name in names.values():
        (tmp_path / name).write_text("x")
    textures = [f"{key} {tmp_path / name}" for key, name in names.items()]
    scene_file = tmp_path / "level.cub"
    scene_file.write_text("\n".join(scene(textures=textures)) + "\n")
    config = load_scene(scene_file)
    assert isinstance(config, SceneConfig)
    assert config.north == str(tmp_path / "north.xpm")
    assert config.east == str(tmp_path / "east.xpm")
    assert config.spawn == find_spawn(list(GRID))


def test_load_scene_missing_texture(tmp_path):
    scene_file = tmp_path / "level.cub"
    scene_file.write_text("\n".join(scene(textures=[f"NO {tmp_path / 'gone.xpm'}"])))
    with pytest.raises(CubError) as info:
        load_scene(scene_file)
    assert info.value.message == INVALID_PATH


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(CubError, match="COULD NOT OPEN FILE"):
        load_scene(tmp_path / "absent.cub")