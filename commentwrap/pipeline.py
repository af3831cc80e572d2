from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .utils.logging import get_logger
from .utils.io import STDIN_MARKER, read_text_file, write_text_file
from .utils.line_endings import apply_line_ending_mode
from .convert.options import WrapOptions
from .convert.document import wrap


LINE_ENDING_MODES = ("auto", "keep", "lf", "crlf")


@dataclass
class RunConfig:
    input: Optional[Path] = None  # None or "-" = stdin
    output: Optional[Path] = None  # None = stdout unless in_place
    width: int = 80
    line_ending: str = "auto"
    in_place: bool = False
    log_level: str = "INFO"

    def options(self) -> WrapOptions:
        return WrapOptions(width=self.width)


@dataclass
class RunResult:
    text: str
    path: Optional[Path]
    changed: bool


def _reads_stdin(cfg: RunConfig) -> bool:
    return cfg.input is None or str(cfg.input) == STDIN_MARKER


def _destination(cfg: RunConfig) -> Optional[Path]:
    if cfg.output:
        return cfg.output
    if cfg.in_place and not _reads_stdin(cfg):
        return cfg.input
    return None


def run(cfg: RunConfig) -> RunResult:
    logger = get_logger()
    if cfg.line_ending not in LINE_ENDING_MODES:
        logger.error(f"Unknown line ending mode: {cfg.line_ending}")
        raise SystemExit(2)
    if cfg.in_place and _reads_stdin(cfg):
        logger.warning("--in-place has no effect when reading stdin; writing to stdout.")

    source = "stdin" if _reads_stdin(cfg) else str(cfg.input)
    logger.info(f"Source: {source} (width={cfg.width})")
    try:
        text = read_text_file(None if _reads_stdin(cfg) else cfg.input)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {source}: {e}")
        raise SystemExit(1)

    wrapped = apply_line_ending_mode(wrap(text, cfg.options()), text, cfg.line_ending)
    changed = wrapped != text

    out_path = _destination(cfg)
    if out_path is None:
        return RunResult(text=wrapped, path=None, changed=changed)

    try:
        written = write_text_file(out_path, wrapped)
    except OSError as e:
        logger.error(f"Cannot write {out_path}: {e}")
        raise SystemExit(1)
    logger.info(f"Saved: {written.path} ({written.bytes_written} bytes)")
    return RunResult(text=wrapped, path=written.path, changed=changed)
