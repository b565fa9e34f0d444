"""Parsing of floor and ceiling colour lines."""

from __future__ import annotations

from typing import Sequence, Tuple

from .reader import CubError

INVALID_COLOR_FORMAT = "Invalid color format"
INVALID_RGB_RANGE = "Invalid RGB range"

_WHITESPACE = "\t\n\v\f\r "


def atoi(text: str) -> int:
    """Parse a leading integer: optional blanks, one sign, then digits.

    Parsing stops at the first non-digit; no digits gives zero.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for char in stripped:
        if not ("0" <= char <= "9"):
            break
        result = result * 10 + (ord(char) - ord("0"))
    return sign * result


def _digit_run(text: str) -> int:
    count = 0
    for char in text:
        if not ("0" <= char <= "9"):
            break
        count += 1
    if count == 0 or count > 3:
        raise CubError(INVALID_COLOR_FORMAT)
    return count


def parse_color(line: str) -> Tuple[int, int, int]:
    """Parse a line such as ``F 220,100,0`` into an (r, g, b) triple.

    The first non-blank character is the identifier and is skipped.  Each
    component has one to three digits; a comma before the second and third
    component is optional.  Raises CubError on a malformed line or a
    component outside 0..255.
    """
    body = line.lstrip(" ")[1:].strip(" \t\n")
    if body.startswith(","):
        raise CubError(INVALID_COLOR_FORMAT)
    rest = body
    components = []
    for _ in range(3):
        if rest.startswith(","):
            rest = rest[1:]
        rest = rest.lstrip(" ")
        width = _digit_run(rest)
        components.append(atoi(rest))
        rest = rest[width:].lstrip(" ")
    if rest.strip(" \t\n"):
        raise CubError(INVALID_COLOR_FORMAT)
    if any(not 0 <= value <= 255 for value in components):
        raise CubError(INVALID_RGB_RANGE)
    red, green, blue = components
    return red, green, blue


def rgb_to_int(rgb: Sequence[int]) -> int:
    """Pack an (r, g, b) triple into a 0xRRGGBB integer."""
    red, green, blue = rgb
    return (red << 16) | (green << 8) | blue