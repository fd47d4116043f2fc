import io
import logging
import pathlib
from typing import Self, TextIO

import attrs

from . import files, parser, serializer
from .errors import (
    HasNoDataError,
    KeyNotExistError,
    NullReferenceError,
    ParseError,
    SectionNotExistError,
)
from .parser import Sections

logger = logging.getLogger(__name__)


@attrs.define
class Document:
    """An INI document: named sections of key/value properties.

    A document created without sections is uninitialized:
    accessors raise NullReferenceError instead of treating it as empty.
    Use `Document.empty()` for an initialized document with no sections.

    Attributes:
        sections: Section names mapped to their properties, or None if uninitialized.
    """

    sections: Sections | None = None

    @classmethod
    def empty(cls) -> Self:
        """Create an initialized document without any sections."""

        return cls({})

    @classmethod
    def from_str(cls, text: str) -> Self:
        """Parse INI text into a document.

        Args:
            text: The text to parse.

        Returns:
            The document.

        Raises:
            ParseError: The text is not valid INI.
        """

        doc = cls.empty()
        doc.load_str(text)
        return doc

    @classmethod
    def from_file(cls, path: str | pathlib.Path, encoding: str | None = None) -> Self:
        """Parse an INI file into a document.

        Args:
            path: The file to parse.
            encoding: The file encoding. If None, it is detected.

        Returns:
            The document.

        Raises:
            InvalidFilePathError: The file could not be read.
            ParseError: The file is not valid INI.
        """

        doc = cls.empty()
        doc.load_file(path, encoding)
        return doc

    def load_str(self, text: str):
        """Replace the document's sections with those parsed from text.

        If parsing fails, the document keeps the sections parsed before the bad line.

        Args:
            text: The text to parse.

        Raises:
            ParseError: The text is not valid INI.
        """

        try:
            self.sections = parser.loads(text)
        except ParseError as e:
            self.sections = e.sections
            raise

    def load_file(self, path: str | pathlib.Path, encoding: str | None = None) -> str:
        """Replace the document's sections with those parsed from a file.

        Args:
            path: The file to parse.
            encoding: The file encoding. If None, it is detected.

        Returns:
            The raw text of the file.

        Raises:
            InvalidFilePathError: The file could not be read.
            ParseError: The file is not valid INI.
        """

        text = files.read_file(path, encoding)
        logger.debug("loading %s", path)

        self.load_str(text)
        return text

    def get_sections(self) -> Sections | None:
        """Return the sections, or None if the document is uninitialized.

        The mapping is not copied, so changes to it affect the document.
        """

        return self.sections

    def get_section_names(self) -> list[str]:
        """Return the section names in lexical order."""

        if self.sections is None:
            return []

        return sorted(self.sections)

    def get_section(self, section: str) -> dict[str, str]:
        """Return the properties of a section.

        Args:
            section: The name of the section.

        Returns:
            The keys of the section mapped to their values.

        Raises:
            NullReferenceError: The document is uninitialized.
            SectionNotExistError: The section does not exist.
        """

        if self.sections is None:
            raise NullReferenceError()

        try:
            return self.sections[section]
        except KeyError:
            raise SectionNotExistError(
                f"the section you tried to access doesn't exist: '{section}'"
            ) from None

    def get(self, section: str, key: str) -> str:
        """Get the value of a property.

        Args:
            section: The name of the section.
            key: The property key.

        Returns:
            The value.

        Raises:
            NullReferenceError: The document is uninitialized.
            SectionNotExistError: The section does not exist.
            KeyNotExistError: The key does not exist in the section.
        """

        properties = self.get_section(section)

        try:
            return properties[key]
        except KeyError:
            raise KeyNotExistError(
                f"the key you tried to access doesn't exist: '{section}.{key}'"
            ) from None

    def set(self, section: str, key: str, value: str):
        """Change the value of an existing property.

        Neither sections nor keys are ever created.

        Args:
            section: The name of the section.
            key: The property key.
            value: The new value.

        Raises:
            See get().
        """

        properties = self.get_section(section)

        if key not in properties:
            raise KeyNotExistError(
                f"the key you tried to access doesn't exist: '{section}.{key}'"
            )

        properties[key] = value

    def _check(self) -> Sections:
        if self.sections is None:
            raise NullReferenceError()
        if not self.sections:
            raise HasNoDataError()

        return self.sections

    def save(self, file: TextIO):
        """Save the document in INI format.

        Args:
            file: The file to save to.

        Raises:
            NullReferenceError: The document is uninitialized.
            HasNoDataError: The document has no sections.
        """

        serializer.dump(self._check(), file)

    def save_file(self, path: str | pathlib.Path, encoding: str = files.DEFAULT_ENCODING):
        """Save the document to an INI file, creating or truncating it.

        Nothing is written if the document can't be serialized.

        Args:
            path: The file to save to.
            encoding: The file encoding. Defaults to UTF-8.

        Raises:
            NullReferenceError: The document is uninitialized.
            HasNoDataError: The document has no sections.
            InvalidFilePathError: The file could not be written.
        """

        files.write_file(path, self.to_str(), encoding)

    def to_str(self) -> str:
        """Serialize the document to INI format.

        Returns:
            The serialized document as a string.

        Raises:
            See save().
        """

        with io.StringIO() as buf:
            self.save(buf)
            return buf.getvalue()

    def __len__(self) -> int:
        return len(self.sections or {})

    def __contains__(self, section: object) -> bool:
        return self.sections is not None and section in self.sections
