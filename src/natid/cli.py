from __future__ import annotations

import logging
import pathlib
import sys
from enum import Enum
from typing import Optional

import structlog
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .api import explain, supported_locales
from .config import NatidConfig, load_config
from .errors import UnsupportedLocale

console = Console()
log = structlog.get_logger()
app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="natid: validate tax IDs, VAT numbers and identity card numbers",
)

# Exit codes for `check`
EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_UNSUPPORTED = 2


class Kind(str, Enum):
    tax_id = "tax_id"
    vat = "vat"
    identity_card = "identity_card"


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"natid {__version__}")
        raise typer.Exit()


def configure_logging(cfg: NatidConfig, verbose: bool = False) -> None:
    level = "debug" if verbose else cfg.logging.level
    renderer = (
        structlog.processors.JSONRenderer()
        if cfg.logging.json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    # stdout carries the verdict; logs go to stderr
    structlog.configure(
        processors=[structlog.processors.add_log_level, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper())),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to natid.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    cfg = load_config(config) if config else NatidConfig()
    configure_logging(cfg, verbose)
    ctx.obj = {"config": cfg}
    if verbose:
        log.info("verbose_enabled")


@app.command()
def check(
    ctx: typer.Context,
    kind: Kind = typer.Argument(..., help="What CANDIDATE is", case_sensitive=False),
    candidate: str = typer.Argument(..., help="The identifier to validate"),
    locale: Optional[str] = typer.Option(
        None, "--locale", "-l", help="Locale key, country code for VAT, or 'any' for identity cards"
    ),
    show: bool = typer.Option(False, "--explain", help="Show which stage decided the verdict"),
):
    """Validate CANDIDATE; exit 0 if valid, 1 if invalid, 2 if the locale is unknown."""
    cfg: NatidConfig = ctx.obj["config"]
    locale = locale or getattr(cfg.defaults, kind.value)
    if locale is None:
        raise typer.BadParameter(f"no default locale for {kind.value}", param_hint="--locale")

    try:
        verdict = explain(kind.value, candidate, locale)
    except UnsupportedLocale as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=EXIT_UNSUPPORTED)

    if show:
        table = Table(show_header=False, box=None)
        table.add_row("kind", verdict.kind)
        table.add_row("locale", escape(verdict.locale))
        if verdict.name:
            table.add_row("name", escape(verdict.name))
        table.add_row("candidate", escape(verdict.candidate))
        table.add_row("sanitized", escape(verdict.sanitized))
        table.add_row("stage", verdict.stage)
        table.add_row("valid", str(verdict.valid).lower())
        console.print(table)
    elif verdict.valid:
        console.print("[green]valid[/green]")
    else:
        console.print("[red]invalid[/red]")
    raise typer.Exit(code=EXIT_VALID if verdict.valid else EXIT_INVALID)


@app.command()
def locales(kind: Kind = typer.Argument(..., help="Which rule pack to list", case_sensitive=False)):
    """List the locale keys a rule pack supports, in registration order."""
    for key in supported_locales(kind.value):
        console.print(escape(key))
