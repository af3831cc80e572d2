from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


STDIN_MARKER = "-"


@dataclass
class WriteResult:
    path: Path
    bytes_written: int


def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def read_text_file(path: Optional[Path], encoding: str = "utf-8") -> str:
    """Read ``path`` (or stdin for ``None``/``-``) without translating line terminators."""
    if path is None or str(path) == STDIN_MARKER:
        data = sys.stdin.buffer.read()
    else:
        data = path.read_bytes()
    return data.decode(encoding)


def write_text_file(path: Path, content: str, encoding: str = "utf-8") -> WriteResult:
    ensure_parent(path)
    data = content.encode(encoding)
    path.write_bytes(data)
    return WriteResult(path=path, bytes_written=len(data))
