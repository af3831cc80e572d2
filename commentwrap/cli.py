from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .version import __version__
from .utils.logging import setup_logger
from .pipeline import LINE_ENDING_MODES, RunConfig, run


app = typer.Typer(add_completion=False, help="Reflow prose and source comments to a fixed column width.")


@app.command()
def main(
    source: str = typer.Argument("-", help="Input file, or - for stdin"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write the result here instead of stdout"),
    width: int = typer.Option(80, "-w", "--width", min=1, envvar="COMMENTWRAP_WIDTH", help="Column width"),
    line_ending: str = typer.Option("auto", "--line-ending", help="auto, keep, lf or crlf"),
    in_place: bool = typer.Option(False, "-i", "--in-place", help="Rewrite the input file"),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="COMMENTWRAP_LOG_LEVEL", help="Logging level"),
    version: bool = typer.Option(False, "--version", help="Print version and exit"),
):
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if line_ending not in LINE_ENDING_MODES:
        raise typer.BadParameter("must be one of auto, keep, lf, crlf", param_hint="--line-ending")

    setup_logger(log_level)
    cfg = RunConfig(
        input=Path(source),
        output=output,
        width=width,
        line_ending=line_ending,
        in_place=in_place,
        log_level=log_level,
    )
    result = run(cfg)
    if result.path is None:
        typer.echo(result.text, nl=False)


def entrypoint():
    app()

if __name__ == "__main__":
    entrypoint()
