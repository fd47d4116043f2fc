import pathlib

import pytest

DATA = pathlib.Path(__file__).parent / "data"

INI_CONTENT = """; last modified 1 April 2001 by John Doe
[owner]
name = John Doe
organization = Acme Inc.

[database]
; use IP address in case network name resolution is not working
server = 192.0.2.62
port = 143
file = "payroll.dat\""""

SECTIONS = {
    "owner": {"name": "John Doe", "organization": "Acme Inc."},
    "database": {"server": "192.0.2.62", "port": "143", "file": '"payroll.dat"'},
}


@pytest.fixture
def example_file() -> pathlib.Path:
    return DATA / "example.ini"

# Valid INI texts along with what they parse to, covering the parser's edge cases.
EDGE_CASES = {
    "empty value": ("[a]\nk =", {"a": {"k": ""}}),
    "empty section": ("[a]\n[b]\nk = v", {"a": {}, "b": {"k": "v"}}),
    "repeated section": (
        "[a]\nx = 1\n[b]\ny = 2\n[a]\nz = 3",
        {"a": {"z": "3"}, "b": {"y": "2"}},
    ),
    "repeated key": ("[a]\nk = 1\nk = 2", {"a": {"k": "2"}}),
    "comment-shaped key": ("[a]\n; a = b", {"a": {"; a": "b"}}),
    "separator in section name": ("[a=b]\nk = v", {"a=b": {"k": "v"}}),
    "spaces in section name": ("[my section]\nk = v", {"mysection": {"k": "v"}}),
    "non-ascii": ("[歌手]\n名前 = 重音テト", {"歌手": {"名前": "重音テト"}}),
    "quotes and brackets in value": (
        '[a]\nfile = "payroll.dat"\nlist = [1, 2]',
        {"a": {"file": '"payroll.dat"', "list": "[1, 2]"}},
    ),
    "form feed in value": ("[a]\nk = x\x0cy", {"a": {"k": "x\x0cy"}}),
    "line separator in value": ("[a]\nk = x\u2028y", {"a": {"k": "x\u2028y"}}),
    "crlf": ("[a]\r\nk = v\r\n", {"a": {"k": "v"}}),
    "example": (INI_CONTENT, SECTIONS),
}
