"""Read and write strict INI files: [sections] of key = value properties."""

from .document import Document
from .errors import (
    EmptyKeyError,
    EmptySectionNameError,
    ErrorKind,
    GlobalPropertyError,
    HasNoDataError,
    IniError,
    IniSyntaxError,
    InvalidFilePathError,
    KeyNotExistError,
    NullReferenceError,
    ParseError,
    SectionNotExistError,
)
from .files import read_file, write_file
from .parser import Sections, load, loads
from .serializer import dump, dumps
