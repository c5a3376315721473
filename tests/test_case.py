import pytest

from asciicase.case import to_upper


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello, World!", "HELLO, WORLD!"),
        ("hello, world!", "HELLO, WORLD!"),
        ("HELLO, WORLD!", "HELLO, WORLD!"),
        ("1234!@#$", "1234!@#$"),
        ("", ""),
        ("||", "||"),
    ],
)
def test_to_upper_cases(text, expected):
    assert to_upper(text) == expected


def test_to_upper_none_gives_none():
    assert to_upper(None) is None


def test_to_upper_leaves_non_ascii_letters_alone():
    assert to_upper("straße é") == "STRAßE é"


def test_to_upper_keeps_length():
    text = "Mixed 123 text\twith\ttabs\n"
    assert len(to_upper(text)) == len(text)


def test_to_upper_is_idempotent():
    once = to_upper("abc XYZ def")
    assert to_upper(once) == once == "ABC XYZ DEF"


def test_to_upper_boundary_characters():
    assert to_upper("`az{") == "`AZ{"