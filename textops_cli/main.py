from __future__ import annotations

import sys

import typer

from . import __version__
from .cli_shared import (
    TEXTOPS_OPERATION,
    TEXTOPS_QUIET,
    UsageError,
    _global_opts,
    _print_json,
    _run_cli,
    _status,
)
from .operations import available_operations_text, list_kinds, parse_kind, transform

app = typer.Typer(
    name="textops",
    help="Apply a casing/formatting transform to one line of text.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"textops {__version__}")
        raise typer.Exit(code=0)


def _list_callback(value: bool) -> None:
    if value:
        for kind in list_kinds():
            typer.echo(kind.value)
        raise typer.Exit(code=0)


@app.command(help="Transform a line of text with the selected operation and print 'input -> output'.")
def run(
    operation: str | None = typer.Argument(
        None,
        help=f"Operation name, case-insensitive (env fallback: {TEXTOPS_OPERATION})",
        show_default=False,
    ),
    text: str | None = typer.Option(None, "--text", help="Input line (prompted for when omitted)"),
    json_output: bool = typer.Option(False, "--json", help="Emit the result as compact JSON"),
    quiet: bool = typer.Option(False, "--quiet", help=f"Reduce stderr logging (env: {TEXTOPS_QUIET})"),
    list_operations: bool = typer.Option(
        False,
        "--list",
        callback=_list_callback,
        is_eager=True,
        help="List available operations and exit",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    del list_operations, version
    g = _global_opts(quiet=quiet, plain_json=json_output)
    name = operation if operation is not None else g.default_operation
    if not str(name or "").strip():
        raise UsageError("an operation argument is required")
    kind = parse_kind(name)
    _status(g, f"Selected operation: {kind.value}")

    if text is None:
        raw = typer.prompt("Insert string to modify", default="", show_default=False, err=True)
        text = str(raw).strip()

    result = transform(kind, text)
    if g.plain_json:
        _print_json(result.to_doc())
    else:
        sys.stdout.write(result.render() + "\n")


def main(argv: list[str] | None = None) -> int:
    return _run_cli(
        root_app=app,
        prog_name="textops",
        argv=argv,
        usage_help=available_operations_text(),
    )


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
