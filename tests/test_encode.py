import pytest

from mdthat.asciiset import AsciiSet
from mdthat.encode import ENCODE_COMPONENT_CHARS, ENCODE_DEFAULT_CHARS, encode

SET = AsciiSet.from_chars(";/?:@&=+$,-_.!~*'()#")


@pytest.mark.parametrize(
    "source, expected",
    [
        ("%%%", "%25%25%25"),
        ("\r\n", "%0D%0A"),
        ("?#", "?#"),
        ("[]^", "%5B%5D%5E"),
        ("my url", "my%20url"),
        ("φου", "%CF%86%CE%BF%CF%85"),
        ("%FG", "%25FG"),
        ("%00%FF", "%00%FF"),
        ("\x00\x7f\u0080", "%00%7F%C2%80"),
        ("%20%2G", "%20%252G"),
    ],
)
def test_encode_keep_escaped(source, expected):
    assert encode(source, SET, True) == expected


def test_arguments_encode_string_unescapedset():
    assert encode("!@#$", AsciiSet.from_chars("@$"), True) == "%21@%23$"


def test_arguments_keepescaped_false():
    assert encode("%20%2G", SET, False) == "%2520%252G"


def test_default_chars_match_test_set():
    assert ENCODE_DEFAULT_CHARS == SET
    assert encode("[hello]", ENCODE_DEFAULT_CHARS, True) == "%5Bhello%5D"


def test_component_chars_escape_reserved():
    assert encode("a/b?c", ENCODE_COMPONENT_CHARS, True) == "a%2Fb%3Fc"


def test_short_percent_at_end_is_encoded():
    assert encode("a%2", SET, True) == "a%252"