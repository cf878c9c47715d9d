import pytest

from aoc2023.scanner import AocError, Scanner


def test_read_signed_int():
    s = Scanner("-42x")
    assert s.read_int() == -42
    assert s.rest() == "x"


def test_read_unsigned_rejects_minus():
    s = Scanner("-42")
    assert s.read_int(signed=False) is None
    assert s.pos == 0


def test_read_int_nothing():
    s = Scanner("abc")
    assert s.read_int() is None
    assert s.rest() == "abc"


def test_read_int_overflow():
    with pytest.raises(AocError):
        Scanner("99999999999999999999").read_int()


def test_expect_int_fails():
    with pytest.raises(AocError):
        Scanner("x1").expect_int()


def test_expect_int_value():
    s = Scanner("123 rest")
    assert s.expect_int() == 123
    assert s.rest() == " rest"


def test_read_ints():
    s = Scanner("1 2  -3 x")
    assert s.read_ints() == [1, 2, -3]
    assert s.rest() == "x"


def test_skip_until():
    s = Scanner("ab:cd")
    assert s.skip_until(":") == 3
    assert s.rest() == "cd"


def test_skip_until_missing():
    s = Scanner("abc")
    assert s.skip_until(":") == 3
    assert s.at_end()


def test_skip_whitespace():
    s = Scanner(" \t x")
    assert s.skip_whitespace() == 3
    assert s.peek() == "x"


def test_take():
    s = Scanner("abcdef")
    assert s.take(3) == "abc"
    assert s.take(10) == "def"
    assert s.at_end()


def test_skip_char():
    s = Scanner(",x")
    assert s.skip_char(";") is False
    assert s.skip_char(",") is True
    assert s.rest() == "x"


def test_skip_prefix_and_expect():
    s = Scanner("seeds: 1")
    assert s.skip_prefix("nope") == 0
    assert s.skip_prefix("seeds:") == len("seeds:")
    with pytest.raises(AocError):
        s.expect("x")


def test_end_behaviour():
    s = Scanner("")
    assert s.peek() == ""
    assert s.advance() is False
    assert s.at_end()