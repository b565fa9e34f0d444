"""Reading and validating a whole scene description."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .colors import parse_color, rgb_to_int
from .mapcheck import (
    Spawn,
    check_invalid_characters,
    check_map_closed,
    check_player_count,
    find_spawn,
)
from .reader import CubError, read_lines

INVALID_PATH = "Invalid texture path"
INVALID_ABBREVIATION = "Invalid direction abbreviation"
MISSING_DIRECTION = "Missing direction information"
MISSING_FLOOR = "Missing floor color information"
MISSING_CEILING = "Missing ceiling color information"

TEXTURE_EXTENSION = ".xpm"

# First letter of a wall identifier -> (accepted second letter, attribute).
# A blank is accepted as the second letter as well.
_IDENTIFIERS = {
    "N": ("O", "north"),
    "S": ("O", "south"),
    "W": ("E", "west"),
    "E": ("A", "east"),
}


@dataclass
class SceneConfig:
    """Everything a scene file describes: wall textures, colours and the map."""

    north: str
    south: str
    west: str
    east: str
    floor_color: int
    ceiling_color: int
    grid: List[str]
    spawn: Spawn

    @property
    def wall_textures(self) -> Tuple[str, str, str, str]:
        """Texture paths in drawing order: west, east, north, south."""
        return self.west, self.east, self.north, self.south


def check_texture_path(text: str, check_files: bool = True) -> str:
    """Validate the text following a wall identifier and return the texture path.

    The path must end in a prefix of ``.xpm`` after its last dot and, when
    ``check_files`` is true, must name something that can be opened for
    reading.  Raises CubError otherwise.
    """
    body = text.lstrip(" ")
    if not body or body.startswith("\n"):
        raise CubError(INVALID_PATH)
    dot = body.rfind(".")
    if dot == -1:
        raise CubError(INVALID_PATH)
    extension = body[dot:].strip(" \t")
    if not TEXTURE_EXTENSION.startswith(extension):
        raise CubError(INVALID_PATH)
    path = body.strip(" \t\n")
    if check_files:
        try:
            descriptor = os.open(path, os.O_RDONLY)
        except OSError as exc:
            raise CubError(INVALID_PATH) from exc
        os.close(descriptor)
    return path


def _starts_map(line: str) -> bool:
    body = line.strip(" \t\n")
    return bool(body) and all("0" <= char <= "9" for char in body)


def _color_kind(line: str) -> Optional[str]:
    body = line.lstrip(" ")
    if len(body) >= 2 and body[0] in "FC" and body[1] == " ":
        return body[0]
    return None


def _scan_texture(line: str, check_files: bool) -> Optional[Tuple[str, str]]:
    """Find the first wall identifier in a line and return (attribute, path)."""
    for index, char in enumerate(line):
        entry = _IDENTIFIERS.get(char)
        if entry is None:
            continue
        second, attribute = entry
        if line[index + 1 : index + 2] in (second, " "):
            return attribute, check_texture_path(line[index + 2 :], check_files)
        raise CubError(INVALID_ABBREVIATION)
    return None


def parse_scene(lines: Sequence[str], check_files: bool = True) -> SceneConfig:
    """Validate the lines of a scene file and build its configuration.

    The header runs up to the first line made only of digits; the rest is
    the map.  Raises CubError on the first problem found.
    """
    paths: Dict[str, str] = {}
    colors: Dict[str, int] = {}
    direction_lines = 0
    map_start = len(lines)
    for index, line in enumerate(lines):
        if _starts_map(line):
            map_start = index
            break
        kind = _color_kind(line)
        if kind is not None:
            colors[kind] = rgb_to_int(parse_color(line))
            continue
        found = _scan_texture(line, check_files)
        if found is not None:
            attribute, path = found
            paths[attribute] = path
            direction_lines += 1

    if direction_lines < 4 or len(paths) < 4:
        raise CubError(MISSING_DIRECTION)
    if "F" not in colors:
        raise CubError(MISSING_FLOOR)
    if "C" not in colors:
        raise CubError(MISSING_CEILING)

    grid = list(lines[map_start:])
    check_invalid_characters(grid)
    check_player_count(grid)
    check_map_closed(grid)
    spawn = find_spawn(grid)
    return SceneConfig(
        north=paths["north"],
        south=paths["south"],
        west=paths["west"],
        east=paths["east"],
        floor_color=colors["F"],
        ceiling_color=colors["C"],
        grid=grid,
        spawn=spawn,
    )


def load_scene(path: Union[str, "os.PathLike[str]"]) -> SceneConfig:
    """Read and validate a scene file, checking that its textures exist."""
    return parse_scene(read_lines(path), check_files=True)