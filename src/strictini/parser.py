import logging
from collections.abc import Iterable

from . import lines
from .errors import GlobalPropertyError, ParseError

Sections = dict[str, dict[str, str]]

logger = logging.getLogger(__name__)


def load(file: Iterable[str]) -> Sections:
    """Parse INI lines into sections.

    Parsing stops at the first bad line. The sections parsed up to that point
    are attached to the raised error as `sections`.

    Args:
        file: The lines to parse. Trailing newlines are ignored.

    Returns:
        A dictionary of section names mapped to their properties.

    Raises:
        GlobalPropertyError: A property appears before the first section.
        EmptySectionNameError: A section header has no name.
        EmptyKeyError: A property has no key.
        IniSyntaxError: A line is neither blank, a comment, a section nor a property.
    """

    sections: Sections = {}
    current: dict[str, str] | None = None

    for n, line in enumerate(file, start=1):
        line = line.rstrip("\r\n")

        try:
            cfg = lines.parse(line)

            if isinstance(cfg, lines.Section):
                # A repeated header starts the section over.
                current = sections[cfg.name] = {}
                logger.debug("line %d: section '%s'", n, cfg.name)

            elif isinstance(cfg, lines.Property):
                if current is None:
                    raise GlobalPropertyError()

                current[cfg.key] = cfg.value

        except ParseError as e:
            logger.debug("line %d: %s", n, e.kind.name)
            e.at(n, line, sections)
            raise

    logger.debug("parsed %d section(s)", len(sections))

    return sections


def loads(text: str) -> Sections:
    """Parse INI text.

    Args:
        text: The text to parse.

    Returns:
        See load().

    Raises:
        See load().
    """

    # Only newlines end a line. A trailing carriage return is dropped by load(),
    # other line separators (form feeds, U+2028...) stay inside the value.
    return load(text.split("\n"))
