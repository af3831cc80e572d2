import pytest

from commentwrap.utils.line_endings import apply_line_ending_mode, convert_line_endings, detect_line_ending


def test_detect_line_ending():
    assert detect_line_ending("a\r\nb") == "\r\n"
    assert detect_line_ending("a\nb") == "\n"
    assert detect_line_ending("") == "\n"


def test_convert_line_endings():
    assert convert_line_endings("a\r\nb\nc", "\r\n") == "a\r\nb\r\nc"
    assert convert_line_endings("a\r\nb\nc", "\n") == "a\nb\nc"


def test_modes():
    out = "a\nb\n"
    assert apply_line_ending_mode(out, "x\r\n", "auto") == "a\r\nb\r\n"
    assert apply_line_ending_mode(out, "x\n", "auto") == out
    assert apply_line_ending_mode(out, "x\r\n", "keep") == out
    assert apply_line_ending_mode("a\r\nb", "", "lf") == "a\nb"
    assert apply_line_ending_mode(out, "", "crlf") == "a\r\nb\r\n"


def test_unknown_mode():
    with pytest.raises(ValueError):
        apply_line_ending_mode("a", "a", "cr")
