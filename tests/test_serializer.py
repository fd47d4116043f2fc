import io

import pytest

from strictini import parser, serializer

from conftest import EDGE_CASES, SECTIONS


def test_dumps():
    assert serializer.dumps(SECTIONS) == (
        "[database]\n"
        'file = "payroll.dat"\n'
        "port = 143\n"
        "server = 192.0.2.62\n"
        "[owner]\n"
        "name = John Doe\n"
        "organization = Acme Inc.\n"
    )


def test_dumps_empty_section():
    assert serializer.dumps({"empty": {}}) == "[empty]\n"


def test_dumps_empty_value():
    assert serializer.dumps({"owner": {"name": ""}}) == "[owner]\nname = \n"


def test_dump_file():
    with io.StringIO() as buf:
        serializer.dump({"owner": {"name": "x"}}, buf)
        assert buf.getvalue() == "[owner]\nname = x\n"


@pytest.mark.parametrize(
    "text, sections", list(EDGE_CASES.values()), ids=list(EDGE_CASES)
)
def test_round_trip(text: str, sections: dict[str, dict[str, str]]):
    parsed = parser.loads(text)
    assert parsed == sections

    assert parser.loads(serializer.dumps(parsed)) == sections
