from __future__ import annotations

from typing import List

from .breaker import break_to_width
from .indent import split_on_indent
from .options import DEFAULT_OPTIONS, WrapOptions


def _wrap_run(run: str, options: WrapOptions) -> List[str]:
    if not run.strip():
        return []
    indent = split_on_indent(run.lstrip("\r\n"), options).indent
    return break_to_width(run, indent, options)


def wrap_paragraph(paragraph: str, options: WrapOptions = DEFAULT_OPTIONS) -> str:
    """Wrap a single paragraph of text.

    Lines holding nothing but an indent or comment marker (a bare ``*`` inside
    a block comment, ``/**``, `` */``) are kept verbatim, and the text between
    them is reflowed run by run. The result carries no trailing separator.
    """
    lines: List[str] = []
    location = 0
    for m in options.empty_comment_pattern.finditer(paragraph):
        # A missing indent carries nothing worth preserving.
        if not m.group(0):
            continue
        lines.extend(_wrap_run(paragraph[location:m.start()], options))
        lines.append(m.group(0))
        location = m.end()
    lines.extend(_wrap_run(paragraph[location:], options))

    result = options.line_separator.join(lines)
    if options.line_separator and result.endswith(options.line_separator):
        result = result[: -len(options.line_separator)]
    return result
