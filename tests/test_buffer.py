import pytest

from nextline.buffer import extract_line, found_new_line, update_remainder


def test_found_new_line_none_is_false():
    assert found_new_line(None) is False


def test_found_new_line_without_newline():
    assert found_new_line(b"abc") is False


def test_found_new_line_with_newline():
    assert found_new_line(b"ab\ncd") is True


def test_extract_line_empty_and_none():
    assert extract_line(None) is None
    assert extract_line(b"") is None


def test_extract_line_keeps_newline():
    assert extract_line(b"ab\ncd") == b"ab\n"


def test_extract_line_without_newline_is_everything():
    assert extract_line(b"tail") == b"tail"


def test_update_remainder_returns_rest():
    assert update_remainder(b"ab\ncd") == b"cd"


def test_update_remainder_none_when_nothing_left():
    assert update_remainder(None) is None
    assert update_remainder(b"ab\n") is None
    assert update_remainder(b"tail") is None


@pytest.mark.parametrize(
    "data",
    [b"a\nb\nc", b"\n\n", b"one line\n", b"no newline", b"x\n\ny\n"],
)
def test_extract_and_update_split_losslessly(data):
    line = extract_line(data)
    rest = update_remainder(data) or b""
    assert line + rest == data
    assert line.count(b"\n") <= 1
    if b"\n" in line:
        assert line.endswith(b"\n")