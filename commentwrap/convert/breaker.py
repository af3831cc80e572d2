from __future__ import annotations

import re
import textwrap
from typing import List

from .options import DEFAULT_OPTIONS, WrapOptions
from .unwrap import unwrap


BLOCK_CONTINUATION = " * "

_block_opener_re = re.compile(r"\s*/\*+")
_leading_ws_re = re.compile(r"\s*")


class _WordWrapper(textwrap.TextWrapper):
    def _handle_long_word(self, reversed_chunks, cur_line, cur_len, width):
        # Break at the preceding space first; the long word is split on a line of its own.
        if cur_line:
            return
        super()._handle_long_word(reversed_chunks, cur_line, cur_len, width)


def is_block_opener(indent: str) -> bool:
    return _block_opener_re.match(indent) is not None


def break_to_width(text: str, first_line_indent: str, options: WrapOptions = DEFAULT_OPTIONS) -> List[str]:
    """Reflow one chunk of ``text`` into lines that fit ``options.width``.

    The first line keeps ``first_line_indent``. Continuation lines repeat it,
    except after a block-comment opener (``/*``, ``/**``) where they get the
    opener's leading whitespace plus ``" * "``. Nothing smarter is inferred,
    so a continuation line may end up a little shorter or longer than the
    first one.
    """
    width = max(options.width - len(first_line_indent), 1)
    wrapper = _WordWrapper(
        width=width,
        break_long_words=True,
        break_on_hyphens=False,
        expand_tabs=False,
        replace_whitespace=False,
    )
    pieces = wrapper.wrap(unwrap(text, options)) or [""]

    continuation = first_line_indent
    if is_block_opener(first_line_indent):
        continuation = _leading_ws_re.match(first_line_indent).group(0) + BLOCK_CONTINUATION

    return [(first_line_indent if i == 0 else continuation) + piece for i, piece in enumerate(pieces)]
