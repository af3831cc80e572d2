from commentwrap.convert.options import WrapOptions
from commentwrap.convert.paragraph import wrap_paragraph


def test_block_comment_keeps_opener_and_closer():
    out = wrap_paragraph("/**\n * alpha beta gamma delta\n */", WrapOptions(width=14))
    assert out == "/**\n * alpha beta\n * gamma delta\n */"


def test_marker_only_line_inside_paragraph_is_preserved():
    assert wrap_paragraph("# one\n#\n# two") == "# one\n#\n# two"


def test_plain_paragraph_is_joined():
    assert wrap_paragraph("a b\nc") == "a b c"


def test_crlf_input_emits_configured_separator():
    assert wrap_paragraph("/*\r\n * x\r\n */") == "/*\n * x\n */"


def test_empty_paragraph():
    assert wrap_paragraph("") == ""
