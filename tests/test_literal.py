import json

import pytest

from emulated_devices.errors import DecodeError, MarkerNotFoundError
from emulated_devices.literal import extract, normalize, parse_literal


def test_extract_slices_array_literal(sample_source):
    literal = extract(sample_source)

    assert literal.startswith("[")
    assert literal.endswith("]")
    assert "Device A" in literal
    assert "DevicesMap" not in literal


def test_extract_missing_start_marker():
    with pytest.raises(MarkerNotFoundError) as excinfo:
        extract(b"const otherArray = [\n];\n")
    assert excinfo.value.marker == "start"


def test_extract_missing_end_marker():
    with pytest.raises(MarkerNotFoundError) as excinfo:
        extract(b"const deviceArray: Device[] = [\n  {name: 'x'},\n]\n")
    assert excinfo.value.marker == "end"


def test_extract_rejects_non_utf8():
    with pytest.raises(DecodeError):
        extract(b"\xff\xfe const deviceArray")


def test_normalize_sample_decodes(sample_source):
    payload = json.loads(normalize(extract(sample_source)))

    assert [d["name"] for d in payload] == ["Device A", "Device-B 2"]
    assert payload[0]["viewport"]["deviceScaleFactor"] == 2.625
    assert payload[1]["viewport"]["isLandscape"] is True


def test_parse_relaxed_syntax():
    text = """[
      /* block */ {a: 'it\\'s', "b": "say \\"hi\\"", c: [1, -2.5, 1e3,], d: null,},
      {e: undefined, f: 'caf\\u00e9', g: 'tab\\there'}, // trailing
    ]"""

    assert parse_literal(text) == [
        {"a": "it's", "b": 'say "hi"', "c": [1, -2.5, 1000.0], "d": None},
        {"e": None, "f": "café", "g": "tab\there"},
    ]


def test_parse_keeps_double_quotes_inside_single_quoted_strings():
    assert json.loads(normalize("[{name: 'a \"b\" c'}]")) == [{"name": 'a "b" c'}]


@pytest.mark.parametrize("text", [
    "[{name: 'unterminated}]",
    "[{name 'missing colon'}]",
    "[1 2]",
    "[{a: 1}] extra",
    "[{a: foo}]",
    "[",
    "[{a: 1e999}]",
    "[{a: -1e999}]",
])
def test_normalize_rejects_malformed(text):
    with pytest.raises(DecodeError):
        normalize(text)
