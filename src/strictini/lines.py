"""Classify and decode single lines of INI text.

Lines are classified by their shape alone (bracket and equals sign counts),
so everything here is a pure function of the line.
"""

import dataclasses
import enum

from .errors import EmptyKeyError, EmptySectionNameError, IniSyntaxError

SEPARATOR = "="
COMMENT = ";"


class LineKind(enum.Enum):
    """The shape of a line of INI text."""

    BLANK = enum.auto()
    SECTION = enum.auto()
    PROPERTY = enum.auto()
    COMMENT = enum.auto()
    INVALID = enum.auto()


@dataclasses.dataclass(slots=True)
class Section:
    """A decoded section header. The name has had every space removed."""

    name: str


@dataclasses.dataclass(slots=True)
class Property:
    """A decoded `key = value` line, with both sides trimmed."""

    key: str
    value: str


def is_section(line: str) -> bool:
    line = line.strip()

    return (
        line.startswith("[")
        and line.endswith("]")
        and line.count("[") == 1
        and line.count("]") == 1
    )


def is_property(line: str) -> bool:
    # Exactly one separator: "name====value" is not a property.
    return line.count(SEPARATOR) == 1


def is_comment(line: str) -> bool:
    return line.startswith(COMMENT)


def classify(line: str) -> LineKind:
    """Determine the shape of a line.

    The checks are made in order: blank, section, property, comment.
    A comment line that happens to contain one equals sign is therefore a property.

    Args:
        line: The line to classify, without a trailing newline.

    Returns:
        The kind of the line.
    """

    if not line:
        return LineKind.BLANK
    if is_section(line):
        return LineKind.SECTION
    if is_property(line):
        return LineKind.PROPERTY
    if is_comment(line):
        return LineKind.COMMENT

    return LineKind.INVALID


def decode_section(line: str) -> Section:
    """Extract the name from a section header.

    All spaces are removed from the name, so "[ my section ]" is named "mysection".

    Args:
        line: A line classified as a section header.

    Returns:
        The section.

    Raises:
        EmptySectionNameError: Nothing but whitespace is enclosed by the brackets.
    """

    name = line.replace(" ", "").strip().lstrip("[").rstrip("]").strip()
    if not name:
        raise EmptySectionNameError()

    return Section(name)


def decode_property(line: str) -> Property:
    """Split a property line into its key and value.

    Surrounding whitespace is trimmed from both.
    The value is kept as-is otherwise, quotes included.

    Args:
        line: A line classified as a property.

    Returns:
        The property.

    Raises:
        EmptyKeyError: Nothing precedes the equals sign.
    """

    key, _, value = line.partition(SEPARATOR)

    key = key.strip()
    if not key:
        raise EmptyKeyError()

    return Property(key=key, value=value.strip())


def parse(line: str) -> Section | Property | None:
    """Parse a line of INI text.

    Args:
        line: The line to parse, without a trailing newline.

    Returns:
        A section, a property, or None if the line is blank or a comment.

    Raises:
        EmptySectionNameError: The line is a section header without a name.
        EmptyKeyError: The line is a property without a key.
        IniSyntaxError: The line has no recognizable shape.
    """

    match classify(line):
        case LineKind.SECTION:
            return decode_section(line)
        case LineKind.PROPERTY:
            return decode_property(line)
        case LineKind.BLANK | LineKind.COMMENT:
            return None
        case LineKind.INVALID:
            raise IniSyntaxError()
