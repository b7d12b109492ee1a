from __future__ import annotations

import importlib
import json
import os
import sys
from dataclasses import dataclass
from typing import Any

import click
import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

# Newer typer releases bundle their own click; accept exceptions from either copy.
_CLICK_EXCEPTION_MODULES = tuple({click.exceptions, importlib.import_module(typer.Abort.__module__)})
_EXIT_TYPES = (typer.Exit, *(m.Exit for m in _CLICK_EXCEPTION_MODULES))
_ABORT_TYPES = tuple(m.Abort for m in _CLICK_EXCEPTION_MODULES)
_CLICK_ERROR_TYPES = tuple(m.ClickException for m in _CLICK_EXCEPTION_MODULES)
_CLICK_USAGE_ERROR_TYPES = tuple(m.UsageError for m in _CLICK_EXCEPTION_MODULES)


class TextOpsError(Exception):
    pass


class UsageError(TextOpsError):
    pass


class OpError(TextOpsError):
    pass


class UnknownOperation(UsageError):
    def __init__(self, provided: str) -> None:
        self.provided = provided
        super().__init__(f"unknown operation: {provided!r}")


TEXTOPS_OPERATION = "TEXTOPS_OPERATION"
TEXTOPS_QUIET = "TEXTOPS_QUIET"


@dataclass(frozen=True)
class GlobalOpts:
    quiet: bool
    plain_json: bool = False
    default_operation: str = ""


_ERROR_CONSOLE = Console(stderr=True)


def _eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[bold red]error:[/bold red] {escape(msg)}")


def _render_usage_error_with_help(
    *,
    message: str,
    ctx: Any = None,
    fallback_help: str = "",
) -> None:
    _rich_error(message)
    help_text = ""
    if ctx is not None and hasattr(ctx, "get_help"):
        try:
            help_text = str(ctx.get_help() or "").strip()
        except Exception:
            help_text = ""
    if not help_text:
        help_text = str(fallback_help or "").strip()
    if help_text:
        _eprint("")
        _eprint(help_text)


def _truthy(raw: str | None) -> bool:
    return str(raw or "").strip().lower() in {"1", "true", "yes", "on"}


def _env_or_none(*names: str) -> str | None:
    for n in names:
        v = (os.environ.get(n) or "").strip()
        if v:
            return v
    return None


def _bootstrap_env() -> None:
    # Discover and load .env without overriding already-exported values.
    load_dotenv()


def _global_opts(*, quiet: bool = False, plain_json: bool = False) -> GlobalOpts:
    return GlobalOpts(
        quiet=bool(quiet or _truthy(os.environ.get(TEXTOPS_QUIET))),
        plain_json=bool(plain_json),
        default_operation=_env_or_none(TEXTOPS_OPERATION) or "",
    )


def _status(g: GlobalOpts, msg: str) -> None:
    if not g.quiet:
        _eprint(msg)


def _print_json(obj: Any) -> None:
    sys.stdout.write(json.dumps(obj, separators=(",", ":"), sort_keys=True) + "\n")


def _run_cli(
    *,
    root_app: typer.Typer,
    prog_name: str,
    argv: list[str] | None = None,
    usage_help: str = "",
) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        _bootstrap_env()
        result = root_app(args=argv, prog_name=prog_name, standalone_mode=False)
        if result is None:
            return 0
        return int(result)
    except _EXIT_TYPES as e:
        return int(e.exit_code)
    except _ABORT_TYPES:
        _rich_error("aborted")
        return 1
    except _CLICK_ERROR_TYPES as e:
        if isinstance(e, _CLICK_USAGE_ERROR_TYPES):
            _render_usage_error_with_help(message=e.format_message(), ctx=getattr(e, "ctx", None))
            return int(e.exit_code)
        _rich_error(e.format_message())
        return int(e.exit_code)
    except UsageError as e:
        _render_usage_error_with_help(message=str(e), fallback_help=usage_help)
        return 2
    except OpError as e:
        _rich_error(str(e))
        return 1
