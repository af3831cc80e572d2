from __future__ import annotations

import re
from dataclasses import dataclass

from .options import DEFAULT_OPTIONS, WrapOptions


_line_terminators_re = re.compile(r"[\r\n]+")


@dataclass(frozen=True)
class LineParts:
    indent: str
    rest: str


def split_on_indent(text: str, options: WrapOptions = DEFAULT_OPTIONS) -> LineParts:
    """Split ``text`` into its indent (whitespace plus one comment marker) and the rest.

    Example: ``"  // Comment"`` -> ``LineParts("  // ", "Comment")``.

    Only the first indent-like run at the start is taken, so markers that
    appear inside a comment body are left alone.
    """
    m = options.indent_pattern.match(text)
    if not m or not m.group(0):
        return LineParts(indent="", rest=text)
    # "/*\n" style matches may carry the terminator along.
    indent = _line_terminators_re.sub("", m.group(0))
    return LineParts(indent=indent, rest=text[m.end():].strip())
