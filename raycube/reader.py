"""Line reading for scene description files."""

from __future__ import annotations

import os
from typing import IO, Iterator, List, Union

BUFFER_SIZE = 10


class CubError(Exception):
    """Raised when a scene file cannot be read or is not valid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def iter_lines(stream: IO[str], buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield the lines of a text stream, reading it in chunks of ``buffer_size``.

    Each line keeps its terminating newline; a final line without one is
    yielded as it is, and an empty tail yields nothing.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    pending = ""
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        pending += chunk
        while (cut := pending.find("\n")) != -1:
            yield pending[: cut + 1]
            pending = pending[cut + 1 :]
    if pending:
        yield pending


def read_lines(path: Union[str, "os.PathLike[str]"]) -> List[str]:
    """Read a whole file into a list of lines with their trailing newline removed."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            return [
                line[:-1] if line.endswith("\n") else line
                for line in iter_lines(handle)
            ]
    except OSError as exc:
        raise CubError("COULD NOT OPEN FILE") from exc