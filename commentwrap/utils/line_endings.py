from __future__ import annotations

import re


CRLF = "\r\n"
LF = "\n"

_terminator_re = re.compile(r"\r\n|\n")


def detect_line_ending(text: str) -> str:
    return CRLF if CRLF in text else LF


def convert_line_endings(text: str, ending: str) -> str:
    return _terminator_re.sub(ending, text)


def apply_line_ending_mode(output: str, source: str, mode: str) -> str:
    """Post-process wrapped ``output``; the wrapper itself always emits its configured separator."""
    if mode == "keep":
        return output
    if mode == "lf":
        return convert_line_endings(output, LF)
    if mode == "crlf":
        return convert_line_endings(output, CRLF)
    if mode == "auto":
        if detect_line_ending(source) == CRLF:
            return convert_line_endings(output, CRLF)
        return output
    raise ValueError(f"Unknown line ending mode: {mode!r}")
