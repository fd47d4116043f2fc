import pytest

from strictini import parser
from strictini.errors import (
    EmptyKeyError,
    EmptySectionNameError,
    ErrorKind,
    GlobalPropertyError,
    IniSyntaxError,
    ParseError,
)

from conftest import INI_CONTENT, SECTIONS


def test_loads():
    assert parser.loads(INI_CONTENT) == SECTIONS


def test_loads_empty():
    assert parser.loads("") == {}


def test_loads_blank_lines_and_comments():
    text = """; last modified 1 April 2001 by John Doe
[owner]
name = John Doe
organization = Acme Inc.


[database     ]
; use IP address in case network name resolution is not working



server = 192.0.2.62     
port = 143

;

file = "payroll.dat\""""

    assert parser.loads(text) == SECTIONS


@pytest.mark.parametrize(
    "text",
    [
        "[owner      ]\nname=salah",
        "[     owner    ]\nname=salah",
        "     [owner    ]    \nname=salah",
        "[owner]\nname    =salah",
        "[owner]\nname    =salah    ",
        "[owner]\n     name    =salah",
    ],
)
def test_loads_trims_spaces(text: str):
    assert parser.loads(text) == {"owner": {"name": "salah"}}


def test_load_lines_with_newlines():
    lines = ["[owner]\r\n", "name = John Doe\n", "\n", "; comment\n"]

    assert parser.load(lines) == {"owner": {"name": "John Doe"}}


def test_loads_crlf():
    assert parser.loads("[owner]\r\nname = x\r\n") == {"owner": {"name": "x"}}


@pytest.mark.parametrize(
    "separator", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028", "\u2029"]
)
def test_loads_splits_on_newlines_only(separator: str):
    text = f"[a]\nk = x{separator}y\nother = z"

    assert parser.loads(text) == {"a": {"k": f"x{separator}y", "other": "z"}}


def test_loads_form_feed_in_value():
    assert parser.loads("[a]\nk = x\x0cy") == {"a": {"k": "x\x0cy"}}


def test_loads_repeated_key():
    assert parser.loads("[owner]\nname = a\nname = b") == {"owner": {"name": "b"}}


def test_loads_repeated_section_resets():
    text = "[owner]\nname = a\n[database]\nport = 1\n[owner]\norganization = b"

    assert parser.loads(text) == {
        "owner": {"organization": "b"},
        "database": {"port": "1"},
    }


def test_loads_global_property():
    with pytest.raises(GlobalPropertyError) as e:
        parser.loads("name = value")

    assert e.value.kind is ErrorKind.GLOBAL_PROPERTY
    assert e.value.lineno == 1


def test_loads_global_property_after_comment():
    text = "; last modified 1 April 2001 by John Doe\nname = John Doe\n[owner]"

    with pytest.raises(GlobalPropertyError) as e:
        parser.loads(text)

    assert e.value.lineno == 2
    assert e.value.line == "name = John Doe"
    assert e.value.sections == {}


@pytest.mark.parametrize("text", ["[]\nname=value", "[   ]"])
def test_loads_empty_section_name(text: str):
    with pytest.raises(EmptySectionNameError):
        parser.loads(text)


def test_loads_empty_section_name_keeps_partial():
    text = "[owner]\nname = John Doe\n\n[]\nserver = 192.0.2.62\n"

    with pytest.raises(EmptySectionNameError) as e:
        parser.loads(text)

    assert e.value.lineno == 4
    assert e.value.sections == {"owner": {"name": "John Doe"}}


def test_loads_empty_key():
    with pytest.raises(EmptyKeyError):
        parser.loads("[owner]\n=value")


@pytest.mark.parametrize(
    "text",
    [
        "owner]\nname=salah",
        "[owner]\nname====salah",
        '{"name":"John"}',
        "[owner]\n   \nname=salah",
    ],
)
def test_loads_syntax_error(text: str):
    with pytest.raises(IniSyntaxError) as e:
        parser.loads(text)

    assert e.value.kind is ErrorKind.SYNTAX_ERROR


def test_loads_stops_at_first_error():
    text = "[owner]\nname = a\nbad line\n[database]\nport = 1"

    with pytest.raises(ParseError) as e:
        parser.loads(text)

    assert e.value.lineno == 3
    assert "database" not in e.value.sections
    assert "line 3" in str(e.value)
