import io
from collections.abc import Mapping
from typing import TextIO

from .lines import SEPARATOR


def dump(sections: Mapping[str, Mapping[str, str]], file: TextIO):
    """Serialize sections as INI to a file.

    Sections and their keys are written in lexical order.

    Args:
        sections: The dictionary of section names mapped to properties.
        file: The file to serialize to.
    """

    for name in sorted(sections):
        print(f"[{name}]", file=file)

        properties = sections[name]
        for key in sorted(properties):
            print(f"{key} {SEPARATOR} {properties[key]}", file=file)


def dumps(sections: Mapping[str, Mapping[str, str]]) -> str:
    """Serialize sections as INI to a string.

    Args:
        sections: The dictionary of section names mapped to properties.

    Returns:
        The INI as a string.
    """

    with io.StringIO() as buf:
        dump(sections, buf)
        return buf.getvalue()
