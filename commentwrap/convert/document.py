from __future__ import annotations

from typing import Optional

from ..utils.logging import get_logger
from .options import DEFAULT_OPTIONS, WrapOptions
from .paragraph import wrap_paragraph


logger = get_logger(__name__)


def wrap(text: Optional[str], options: WrapOptions = DEFAULT_OPTIONS) -> str:
    """Reflow every paragraph of ``text`` to ``options.width``.

    Paragraphs are split on blank lines, optionally holding a lone comment
    marker. Those gaps are copied back verbatim between the wrapped
    paragraphs, and a trailing line separator on the input is kept.
    """
    if text is None:
        return ""

    out = []
    location = 0
    paragraphs = 0
    for m in options.paragraph_separator_pattern.finditer(text):
        out.append(wrap_paragraph(text[location:m.start()], options))
        out.append(m.group(0))
        location = m.end()
        paragraphs += 1

    if location < len(text):
        out.append(wrap_paragraph(text[location:], options))
        paragraphs += 1

    result = "".join(out)
    sep = options.line_separator
    if sep and text.endswith(sep) and not result.endswith(sep):
        result += sep
    logger.debug(f"Wrapped {paragraphs} paragraph(s) to width {options.width}")
    return result


def wrap_text(text: Optional[str], width: int = 80, line_separator: str = "\n") -> str:
    return wrap(text, WrapOptions(width=width, line_separator=line_separator))
