from __future__ import annotations

import re
from dataclasses import dataclass, replace


COMMENT_PATTERN = r"(/\*+|\*/|\*|\.|#+|//+|;+)?"
NEWLINE_PATTERN = r"(\n|\r\n)"


@dataclass(frozen=True)
class WrapOptions:
    # Column budget for every produced line, indent included.
    width: int = 80
    # Terminator inserted between produced lines. Input terminators are
    # matched separately (\n or \r\n).
    line_separator: str = "\n"
    comment_pattern: str = COMMENT_PATTERN

    @property
    def indent_pattern(self) -> re.Pattern:
        return re.compile(r"^\s*" + self.comment_pattern + r"\s*")

    @property
    def paragraph_separator_pattern(self) -> re.Pattern:
        return re.compile(NEWLINE_PATTERN + r"\s*" + self.comment_pattern + r"\s*" + NEWLINE_PATTERN)

    @property
    def empty_comment_pattern(self) -> re.Pattern:
        # Horizontal whitespace only, so a match never spans two lines.
        return re.compile(
            r"^[^\S\r\n]*" + self.comment_pattern + r"[^\S\r\n]*(?=\r?$)",
            re.MULTILINE,
        )

    def with_width(self, width: int) -> "WrapOptions":
        return replace(self, width=width)


DEFAULT_OPTIONS = WrapOptions()
