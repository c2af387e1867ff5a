"""Reading height maps: whitespace separated integers, one grid row per line."""

from __future__ import annotations

import os

_LEADING_WHITESPACE = "\n \t\v\f\r"


class MapFileError(Exception):
    """Raised when a map file cannot be read or is malformed."""


def parse_int_prefix(text: str) -> int:
    """Parse the leading integer of ``text``; trailing garbage is ignored, no digits gives 0."""
    stripped = text.lstrip(_LEADING_WHITESPACE)
    sign = 1
    if stripped[:1] == "+":
        stripped = stripped[1:]
    elif stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def _tokens(line: str) -> list[str]:
    """Split a line on spaces, treating newlines as spaces and dropping empty fields."""
    return [field for field in line.replace("\n", " ").split(" ") if field]


def count_columns(line: str) -> int:
    """Number of space separated fields in ``line``."""
    return len(_tokens(line))


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_map(text: str) -> list[list[int]]:
    """Turn the contents of a map file into rows of heights.

    Every line must hold the same number of fields as the first one.
    """
    rows: list[list[int]] = []
    width: int | None = None
    for line in _lines(text):
        fields = _tokens(line)
        if width is not None and len(fields) != width:
            raise MapFileError("Found wrong line length.")
        width = len(fields)
        rows.append([parse_int_prefix(field) for field in fields])
    if not rows or not width:
        raise MapFileError("Map holds no points.")
    return rows


def load_map(path: str | os.PathLike[str]) -> list[list[int]]:
    """Read and parse the map file at ``path``."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MapFileError("Failed to open file") from exc
    return parse_map(data.decode("latin-1"))