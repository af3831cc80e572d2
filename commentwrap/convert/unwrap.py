from __future__ import annotations

import re

from .indent import split_on_indent
from .options import DEFAULT_OPTIONS, WrapOptions


_line_split_re = re.compile(r"[\r\n]+")


def unwrap(text: str, options: WrapOptions = DEFAULT_OPTIONS) -> str:
    """Join a hard-wrapped chunk into one line, dropping indents and comment markers."""
    if not text:
        return text
    lines = _line_split_re.split(text)
    out = []
    after_gap = False
    for line in lines:
        if not line:
            after_gap = True
            continue
        token = split_on_indent(line, options).rest.strip()
        if not token:
            continue
        # Separate words that came from different physical lines.
        if out and not after_gap:
            out.append(" ")
        out.append(token)
        after_gap = False
    return "".join(out)
