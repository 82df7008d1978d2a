"""
Parse point files into Points.

One record per line: the first two whitespace-separated tokens are the x
and y coordinates; anything after them is ignored. Any malformed record
aborts the whole load.
"""

from pathlib import Path
from typing import Optional

from .point import Point


class PointFileError(ValueError):
    """Input file is missing or unreadable."""


class PointParseError(ValueError):
    """A record could not be parsed as a coordinate pair."""

    def __init__(self, message: str, path: Optional[Path], line_number: int, line: str):
        location = f"{path}:{line_number}" if path is not None else f"line {line_number}"
        super().__init__(f"{location}: {message}: {line!r}")
        self.path = path
        self.line_number = line_number
        self.line = line


def parse_record(line: str, line_number: int = 1, path: Optional[Path] = None) -> Point:
    """Parse a single `x y` record."""
    values = line.split()[:2]
    if len(values) < 2:
        raise PointParseError("expected two coordinates", path, line_number, line)

    # Digit separators are not part of a coordinate
    if any("_" in v for v in values):
        raise PointParseError("invalid number", path, line_number, line)

    try:
        x = float(values[0])
        y = float(values[1])
    except ValueError:
        raise PointParseError("invalid number", path, line_number, line) from None

    return Point(x, y)


def parse_points(text: str, path: Optional[Path] = None) -> list[Point]:
    """Parse every line of text into Points."""
    return [
        parse_record(line, i, path)
        for i, line in enumerate(text.splitlines(), start=1)
    ]


def load_points(path: Path) -> list[Point]:
    """
    Load and parse a point file.

    Args:
        path: Path to a text file of `x y` records

    Returns:
        Points in file order

    Raises:
        PointFileError: If the file is missing or unreadable
        PointParseError: If any record is malformed
    """
    path = Path(path)
    if not path.exists():
        raise PointFileError(f"Input file not found: {path}")

    try:
        with open(path) as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise PointFileError(f"Cannot read input file {path}: {e}") from e

    return parse_points(content, path)
