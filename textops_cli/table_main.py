from __future__ import annotations

import sys
from pathlib import Path

import typer

from . import __version__
from .cli_shared import TEXTOPS_QUIET, UsageError, _global_opts, _run_cli, _status
from .table import parse_csv, read_csv_block, render_table

app = typer.Typer(
    name="textops-table",
    help="Render CSV data as a table.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"textops-table {__version__}")
        raise typer.Exit(code=0)


@app.command(help="Read CSV from --file or stdin (ends at the first empty line) and print it as a table.")
def render(
    file: Path | None = typer.Option(None, "--file", help="Path to a CSV file (default: read stdin)"),
    quiet: bool = typer.Option(False, "--quiet", help=f"Reduce stderr logging (env: {TEXTOPS_QUIET})"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    del version
    g = _global_opts(quiet=quiet)
    if file is not None:
        try:
            raw_text = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise UsageError(f"failed to read --file: {e}") from e
    else:
        _status(g, "Enter your CSV data (enter an empty line to finish):")
        raw_text = read_csv_block(sys.stdin)
    render_table(parse_csv(raw_text))


def main(argv: list[str] | None = None) -> int:
    return _run_cli(root_app=app, prog_name="textops-table", argv=argv)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
