import logging
import pathlib
from collections.abc import Iterable

import chardet

from .errors import InvalidFilePathError

DEFAULT_ENCODING = "utf-8"

logger = logging.getLogger(__name__)


def detect_encoding(data: Iterable[bytes]) -> str | None:
    """Determine the encoding of binary data.

    Args:
        data: The data to detect the encoding of, in chunks (i.e. lines).

    Returns:
        The encoding if detected successfully, otherwise None.
    """

    detector = chardet.UniversalDetector()

    for chunk in data:
        if detector.done:
            break

        detector.feed(chunk)

    result = detector.close()

    if encoding := result["encoding"]:
        return encoding.lower()

    return None


def guess_encoding(raw: bytes) -> str | None:
    """Guess the encoding of a file's contents.

    UTF-8 is preferred if the contents decode cleanly,
    since detection is unreliable on files as short as most INI files.

    Args:
        raw: The file contents.

    Returns:
        The encoding, or None if it could not be detected.
    """

    try:
        raw.decode(DEFAULT_ENCODING)
    except UnicodeDecodeError:
        return detect_encoding(raw.splitlines(keepends=True))

    return DEFAULT_ENCODING


def read_bytes(path: str | pathlib.Path) -> bytes:
    """Read a binary file.

    Raises:
        InvalidFilePathError: The file could not be read.
    """

    path = pathlib.Path(path)

    try:
        return path.read_bytes()
    except OSError as e:
        raise InvalidFilePathError(f"can't read '{path}': {e.strerror}") from e


def decode(
    raw: bytes, encoding: str | None = None, path: str | pathlib.Path = "<bytes>"
) -> tuple[str, str]:
    """Decode the contents of a text file.

    Args:
        raw: The file contents.
        encoding: The file encoding. If None, it is guessed.
        path: Where the contents came from, for error messages.

    Returns:
        The text and the encoding it was decoded with.

    Raises:
        InvalidFilePathError: The encoding is unknown, could not be guessed
            or does not match the contents.
    """

    if encoding is None:
        encoding = guess_encoding(raw)
        if encoding is None:
            raise InvalidFilePathError(f"failed to detect encoding for '{path}'")

        logger.debug("%s: guessed encoding %s", path, encoding)

    try:
        return raw.decode(encoding), encoding
    except (UnicodeDecodeError, LookupError) as e:
        raise InvalidFilePathError(f"can't decode '{path}' as {encoding}") from e


def read_file(path: str | pathlib.Path, encoding: str | None = None) -> str:
    """Read a text file.

    Args:
        path: The file to read.
        encoding: The file encoding. If None, it is guessed.

    Returns:
        The contents of the file.

    Raises:
        InvalidFilePathError: The file could not be read or decoded.
    """

    text, _ = decode(read_bytes(path), encoding, path)
    return text


def write_file(
    path: str | pathlib.Path, content: str, encoding: str = DEFAULT_ENCODING
):
    """Write a text file, creating or truncating it.

    Args:
        path: The file to write to.
        content: The text to write.
        encoding: The file encoding. Defaults to UTF-8.

    Raises:
        InvalidFilePathError: The file could not be written.
    """

    path = pathlib.Path(path)

    try:
        with path.open("w", encoding=encoding) as f:
            f.write(content)
    except OSError as e:
        raise InvalidFilePathError(f"can't write '{path}': {e.strerror}") from e

    logger.debug("wrote %d character(s) to %s", len(content), path)
