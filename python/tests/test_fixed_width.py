import pytest

from BrightStars.calc_utils import parse_int
from BrightStars.errors import FormatError
from BrightStars.fixed_width import (
    Field,
    char_at,
    decode_record,
    extract,
    extract_optional,
    required_length,
)

LINE = "  42  HD 1    -"


@pytest.mark.unit
def test_extract():
    assert extract(LINE, 0, 4) == "42"
    assert extract(LINE, 6, 4) == "HD 1"
    # the whole line is a valid field
    assert extract(LINE, 0, len(LINE)) == LINE.strip()


@pytest.mark.unit
def test_extract_short_line():
    with pytest.raises(FormatError):
        extract(LINE, 10, 10)
    with pytest.raises(FormatError):
        char_at(LINE, len(LINE))


@pytest.mark.unit
def test_extract_optional():
    assert extract_optional(LINE, 10, 4) is None
    assert extract_optional(LINE, 0, 4) == "42"


@pytest.mark.unit
def test_char_at():
    assert char_at(LINE, 14) == "-"
    assert char_at(LINE, 0) == " "


@pytest.mark.unit
class TestField:
    def test_required(self):
        assert Field("number", 0, 4, parse_int).decode(LINE) == 42

    def test_required_blank_numeric(self):
        with pytest.raises(FormatError):
            Field("number", 10, 4, parse_int).decode(LINE)

    def test_required_blank_text(self):
        assert Field("text", 10, 4).decode(LINE) == ""

    def test_optional(self):
        assert Field("number", 10, 4, parse_int, optional=True).decode(LINE) is None

    def test_optional_present(self):
        assert Field("number", 0, 6, parse_int, optional=True).decode(LINE) == 42

    def test_optional_too_short(self):
        with pytest.raises(FormatError):
            Field("number", 14, 4, parse_int, optional=True).decode(LINE)

    def test_raw(self):
        assert Field("name", 0, 6, raw=True).decode(LINE) == "  42  "

    def test_end(self):
        assert Field("x", 127, 20).end == 147


@pytest.mark.unit
def test_decode_record():
    fields = (
        Field("number", 0, 4, parse_int),
        Field("label", 6, 4),
        Field("missing", 10, 4, parse_int, optional=True),
        Field("sign", 14, 1, raw=True),
    )
    assert required_length(fields) == 15
    assert decode_record(LINE, fields) == {
        "number": 42,
        "label": "HD 1",
        "missing": None,
        "sign": "-",
    }


@pytest.mark.unit
def test_decode_record_names_field():
    fields = (Field("number", 0, 4, parse_int), Field("magnitude", 6, 4, parse_int))
    with pytest.raises(FormatError, match="magnitude"):
        decode_record(LINE, fields)
