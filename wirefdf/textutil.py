"""Small text helpers used when reading height-map files."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator

BUFF_SIZE = 10
"""Default number of characters pulled from a stream per read."""

_SPACE = frozenset(" \t\n\v\f\r")


def is_space(char: str) -> bool:
    """Return True if *char* is one of the six ASCII white-space characters."""
    return char in _SPACE and len(char) == 1


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading white space is skipped, one optional sign is accepted and
    digits are read until the first non-digit. Text without digits gives 0.
    """
    stripped = text.lstrip("".join(_SPACE))
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    value = 0
    for char in stripped:
        if not ("0" <= char <= "9"):
            break
        value = value * 10 + (ord(char) - ord("0"))
    return sign * value


def word_count(text: str | None) -> int:
    """Count runs of non-white-space characters in *text*."""
    if not text:
        return 0
    count = 0
    previous_is_space = True
    for char in text:
        current_is_space = is_space(char)
        if not current_is_space and previous_is_space:
            count += 1
        previous_is_space = current_is_space
    return count


def split(text: str, delimiter: str) -> list[str]:
    """Split *text* on *delimiter*, dropping empty pieces."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return [piece for piece in text.split(delimiter) if piece]


def iter_lines(stream: IO[AnyStr], buffer_size: int = BUFF_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of *stream* without their trailing newline.

    The stream is read *buffer_size* characters (or bytes) at a time.
    Empty lines in the middle are yielded as empty strings; a final line
    without a newline is yielded too, but nothing follows a trailing newline.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    pending = None
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        newline = "\n" if isinstance(chunk, str) else b"\n"
        pending = chunk if pending is None else pending + chunk
        while newline in pending:
            line, pending = pending.split(newline, 1)
            yield line
    if pending:
        yield pending