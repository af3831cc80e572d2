from commentwrap.convert.breaker import break_to_width, is_block_opener
from commentwrap.convert.options import WrapOptions


def test_block_opener_detection():
    assert is_block_opener("/** ")
    assert is_block_opener("  /*")
    assert not is_block_opener(" * ")
    assert not is_block_opener("// ")


def test_continuation_repeats_first_indent():
    lines = break_to_width("one two three four", "// ", WrapOptions(width=12))
    assert lines == ["// one two", "// three", "// four"]


def test_block_opener_continuation():
    lines = break_to_width("  /* alpha beta gamma delta", "  /* ", WrapOptions(width=18))
    assert lines == ["  /* alpha beta", "   * gamma delta"]


def test_long_words_are_broken():
    assert break_to_width("abcdefghij", "", WrapOptions(width=4)) == ["abcd", "efgh", "ij"]


def test_effective_width_is_clamped():
    expected = ["////a", "////b", "////c"]
    assert break_to_width("abc", "////", WrapOptions(width=3)) == expected
    assert break_to_width("abc", "////", WrapOptions(width=0)) == expected


def test_hyphenated_words_are_not_split():
    lines = break_to_width("well-known fact", "", WrapOptions(width=12))
    assert lines == ["well-known", "fact"]


def test_long_word_moves_to_its_own_line():
    assert break_to_width("ab cdefghij", "", WrapOptions(width=4)) == ["ab", "cdef", "ghij"]


def test_url_is_not_split_after_a_short_word():
    lines = break_to_width("// see https://example.com/very/long/path here", "// ", WrapOptions(width=20))
    assert lines[0] == "// see"
    assert lines[1] == "// https://example.c"


def test_tabs_are_kept():
    assert break_to_width("a\tb", "# ", WrapOptions(width=10)) == ["# a\tb"]
