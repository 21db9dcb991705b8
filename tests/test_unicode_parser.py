import pytest

from ischinese.core.unicode_parser import parse_unicode_string


@pytest.mark.parametrize(
    "s, expected",
    [
        ("U+3469", 0x3469),
        ("U+2966A", 0x2966A),
        ("U+295E1", 0x295E1),
        ("4E00", 0x4E00),
        ("U+0041", ord("A")),
        ("FFFFFFFF", 0xFFFFFFFF),
    ],
)
def test_parse_unicode_string(s, expected):
    assert parse_unicode_string(s) == expected


def test_parse_matches_character():
    assert chr(parse_unicode_string("U+3469")) == "㑩"
    assert chr(parse_unicode_string("U+2966A")) == "\U0002966A"


@pytest.mark.parametrize("s", ["FFFFFFFFF", "U+123456789", "G", "U+XYZ", "12 4", "U+4E0０"])
def test_parse_unicode_string_rejects_invalid(s):
    with pytest.raises(ValueError):
        parse_unicode_string(s)


def test_prefix_only_parses_as_zero():
    assert parse_unicode_string("U+") == 0
