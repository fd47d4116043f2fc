import enum
from typing import Self


class ErrorKind(enum.Enum):
    """Every way an INI operation can fail, mapped to its default message."""

    INVALID_FILE_PATH = "couldn't find the file in the path you provided"
    NULL_REFERENCE = "you tried to access object that doesn't exist"
    SECTION_NOT_EXIST = "the section you tried to access doesn't exist"
    KEY_NOT_EXIST = "the key you tried to access doesn't exist"
    HAS_NO_DATA = "there is no data yet, you may didn't load data"
    GLOBAL_PROPERTY = "global keys are not allowed"
    EMPTY_SECTION_NAME = "you should provide sectionName"
    EMPTY_KEY = "you should provide key for the property"
    SYNTAX_ERROR = "syntax error, can't understand this line"


class IniError(Exception):
    """Base class for all errors raised by strictini.

    Attributes:
        kind: What went wrong.
        message: A human-readable description.
            Defaults to the kind's message.
    """

    kind: ErrorKind

    def __init__(self, message: str | None = None):
        self.message = message or self.kind.value

        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_kind(cls, kind: ErrorKind, message: str | None = None) -> "IniError":
        """Create the exception matching an error kind.

        Args:
            kind: The error kind.
            message: Optional diagnostic message.

        Returns:
            An instance of the exception class registered for the kind.
        """

        return _ERRORS[kind](message)


class InvalidFilePathError(IniError):
    kind = ErrorKind.INVALID_FILE_PATH


class NullReferenceError(IniError):
    kind = ErrorKind.NULL_REFERENCE


# KeyError quotes its argument in str(), so keep IniError's plain message.
class SectionNotExistError(IniError, KeyError):
    kind = ErrorKind.SECTION_NOT_EXIST

    __str__ = IniError.__str__


class KeyNotExistError(IniError, KeyError):
    kind = ErrorKind.KEY_NOT_EXIST

    __str__ = IniError.__str__


class HasNoDataError(IniError):
    kind = ErrorKind.HAS_NO_DATA


class ParseError(IniError, ValueError):
    """A line of INI text could not be parsed.

    Attributes:
        lineno: The 1-based number of the offending line, or None if unknown.
        line: The offending line.
        sections: The sections parsed before the failure.
    """

    kind = ErrorKind.SYNTAX_ERROR

    lineno: int | None
    line: str | None
    sections: dict[str, dict[str, str]]

    def __init__(self, message: str | None = None):
        self.lineno = None
        self.line = None
        self.sections = {}

        super().__init__(message)

    def at(
        self, lineno: int, line: str, sections: dict[str, dict[str, str]]
    ) -> Self:
        """Attach the location of the failure.

        Args:
            lineno: The 1-based line number.
            line: The raw line.
            sections: The partial sections parsed so far.

        Returns:
            The same error.
        """

        self.lineno = lineno
        self.line = line
        self.sections = sections

        return self

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message

        return f"{self.message} (line {self.lineno}: '{self.line}')"


class GlobalPropertyError(ParseError):
    kind = ErrorKind.GLOBAL_PROPERTY


class EmptySectionNameError(ParseError):
    kind = ErrorKind.EMPTY_SECTION_NAME


class EmptyKeyError(ParseError):
    kind = ErrorKind.EMPTY_KEY


class IniSyntaxError(ParseError):
    kind = ErrorKind.SYNTAX_ERROR


_ERRORS: dict[ErrorKind, type[IniError]] = {
    cls.kind: cls
    for cls in (
        InvalidFilePathError,
        NullReferenceError,
        SectionNotExistError,
        KeyNotExistError,
        HasNoDataError,
        GlobalPropertyError,
        EmptySectionNameError,
        EmptyKeyError,
        IniSyntaxError,
    )
}
