"""Validation of the map grid and discovery of the player's start cell."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Sequence

from .reader import CubError

PLAYER_CHARS = "NSEW"
_ALLOWED = frozenset("NSEW \t\n01")
_FILL_STOPPERS = frozenset(" \t\n1F")

# Start cell character -> (view direction, camera plane).  The two vectors
# are always perpendicular.
_ORIENTATIONS = {
    "N": ((0.0, -1.0), (0.66, 0.0)),
    "S": ((0.0, 1.0), (-0.66, 0.0)),
    "W": ((-1.0, 0.0), (0.0, -0.66)),
    "E": ((1.0, 0.0), (0.0, 0.66)),
}


@dataclass(frozen=True)
class Spawn:
    """Where the player starts and which way it looks.

    ``x`` runs along the rows of the grid and ``y`` along the columns; both
    point at the centre of the start cell.
    """

    x: float
    y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float


def check_invalid_characters(grid: Sequence[str]) -> None:
    """Raise CubError if the grid holds anything but walls, floor, blanks or a start cell."""
    for row in grid:
        if any(char not in _ALLOWED for char in row):
            raise CubError("Invalid character in map")


def check_player_count(grid: Sequence[str]) -> None:
    """Raise CubError unless the grid holds exactly one start cell."""
    counts = Counter(char for row in grid for char in row if char in PLAYER_CHARS)
    total = sum(counts.values())
    if total == 0:
        raise CubError("There is no player start position in map")
    if total > 1:
        raise CubError("Duplicated player start positions in map")


def _cell(cells: List[List[str]], row: int, col: int) -> str:
    """Return the cell at (row, col), or '' when it lies outside the grid."""
    if row < 0 or col < 0 or row >= len(cells) or col >= len(cells[row]):
        return ""
    return cells[row][col]


def _touches_outside(cells: List[List[str]], row: int, col: int) -> bool:
    if row == 0 or col == 0:
        return True
    if row + 1 >= len(cells) or col + 1 >= len(cells[row]):
        return True
    neighbours = (
        _cell(cells, row, col + 1),
        _cell(cells, row, col - 1),
        _cell(cells, row + 1, col),
        _cell(cells, row - 1, col),
    )
    # A neighbour past the end of a shorter row counts as open space.
    return any(cell in ("", " ") for cell in neighbours)


def _region_is_closed(cells: List[List[str]], start_row: int, start_col: int) -> bool:
    closed = True
    stack = [(start_row, start_col)]
    while stack:
        row, col = stack.pop()
        cell = _cell(cells, row, col)
        if not cell or cell in _FILL_STOPPERS:
            continue
        if _touches_outside(cells, row, col):
            closed = False
        cells[row][col] = "F"
        stack.extend(
            ((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1))
        )
    return closed


def check_map_closed(grid: Sequence[str]) -> None:
    """Raise CubError if any floor cell can reach the edge of the map or a blank.

    Every region reachable from a '0' is filled; the grid itself is left
    untouched.
    """
    cells = [list(row) for row in grid]
    for row_index, row in enumerate(cells):
        for col_index in range(len(row)):
            if row[col_index] == "0" and not _region_is_closed(cells, row_index, col_index):
                raise CubError("Map not surrounded by walls")


def find_spawn(grid: List[str]) -> Spawn:
    """Locate the start cell, turn it into floor and return the player's spawn.

    ``grid`` is modified in place: every start cell becomes '0'.  When
    several are present the last one in reading order wins.
    """
    spawn = None
    for row_index, row in enumerate(grid):
        for col_index, char in enumerate(row):
            if char not in _ORIENTATIONS:
                continue
            (dir_x, dir_y), (plane_x, plane_y) = _ORIENTATIONS[char]
            spawn = Spawn(
                x=row_index + 0.5,
                y=col_index + 0.5,
                dir_x=dir_x,
                dir_y=dir_y,
                plane_x=plane_x,
                plane_y=plane_y,
            )
            grid[row_index] = row[:col_index] + "0" + row[col_index + 1 :]
            row = grid[row_index]
    if spawn is None:
        raise CubError("There is no player start position in map")
    return spawn