import pytest

from wodlib.strings import (
    Quantify,
    partition,
    quantify,
    quantify_irreg,
    rspan,
    rspan_some,
    span,
    span_some,
    starts_with_ignore_ascii_case,
    trim_string,
)


def is_ascii_digit(c: str) -> bool:
    return c in "0123456789"


def test_partition_matches():
    assert partition("abc-123-xyz", "-") == ("abc", "-", "123-xyz")


def test_partition_does_not_match():
    assert partition("abc-123-xyz", ":") is None


def test_partition_alternation_matches():
    assert partition("abc-123.xyz", [".", "-"]) == ("abc", "-", "123.xyz")


def test_partition_alternation_earliest_wins():
    assert partition("abc.123-xyz", ["-", "."]) == ("abc", ".", "123-xyz")


def test_partition_alternation_no_match():
    assert partition("abc_123_xyz", ["-", "."]) is None


def test_partition_multichar_separator():
    assert partition("key::value::more", "::") == ("key", "::", "value::more")


def test_quantify_one():
    assert str(quantify(1, "apple")) == "1 apple"


def test_quantify_zero():
    assert str(quantify(0, "apple")) == "0 apples"


def test_quantify_many():
    assert str(quantify(42, "apple")) == "42 apples"


def test_quantify_irreg_one():
    assert str(quantify_irreg(1, "mouse", "mice")) == "1 mouse"


def test_quantify_irreg_zero():
    assert str(quantify_irreg(0, "mouse", "mice")) == "0 mice"


def test_quantify_irreg_many():
    assert str(quantify_irreg(42, "mouse", "mice")) == "42 mice"


def test_quantify_equality():
    assert quantify(2, "cat") == Quantify(2, "cat", "s")


def test_rspan_half():
    assert rspan("abc123", is_ascii_digit) == ("abc", "123")


def test_rspan_all():
    assert rspan("123456", is_ascii_digit) == ("", "123456")


def test_rspan_none():
    assert rspan("123abc", is_ascii_digit) == ("123abc", "")


def test_rspan_some_half():
    assert rspan_some("abc123", is_ascii_digit) == ("abc", "123")


def test_rspan_some_all():
    assert rspan_some("123456", is_ascii_digit) == ("", "123456")


def test_rspan_some_none():
    assert rspan_some("123abc", is_ascii_digit) is None


def test_span_half():
    assert span("123abc", is_ascii_digit) == ("123", "abc")


def test_span_all():
    assert span("123456", is_ascii_digit) == ("123456", "")


def test_span_none():
    assert span("abc123", is_ascii_digit) == ("", "abc123")


def test_span_some_half():
    assert span_some("123abc", is_ascii_digit) == ("123", "abc")


def test_span_some_all():
    assert span_some("123456", is_ascii_digit) == ("123456", "")


def test_span_some_none():
    assert span_some("abc123", is_ascii_digit) is None


@pytest.mark.parametrize(
    "s, prefix, expected",
    [
        ("Hello, World!", "hello", True),
        ("Hello, World!", "HELLO", True),
        ("hello, world!", "HELLO", True),
        ("hello", "hello world", False),
        ("Hellö, World!", "hello", False),
        ("Hello, Wörld!", "hello", True),
        ("", "hello", False),
        ("Holla, World!", "hello", False),
        ("Hello", "hello", True),
        ("Hell", "hello", False),
    ],
)
def test_starts_with_ignore_ascii_case(s, prefix, expected):
    assert starts_with_ignore_ascii_case(s, prefix) is expected


@pytest.mark.parametrize(
    "before, after",
    [
        ("", ""),
        ("foo", "foo"),
        (" foo ", "foo"),
        ("foo ", "foo"),
        (" foo", "foo"),
        (" \t foo\r\n ", "foo"),
        (" t foo\n. ", "t foo\n."),
    ],
)
def test_trim_string(before, after):
    assert trim_string(before) == after