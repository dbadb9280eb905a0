"""CLI entry point (`pagseguro`)."""

from __future__ import annotations

import typer
from rich.console import Console

from pagseguro.adapters.logging import configure_logging
from pagseguro.cli import doctor, subscription
from pagseguro.cli.ui_components import print_banner
from pagseguro.core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="PagSeguro web-services client.")
app.add_typer(doctor.app, name="doctor")
app.add_typer(subscription.app, name="subscription")

_console = Console()


@app.callback()
def main(
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print the banner."),
) -> None:
    configure_logging(AppSettings())
    if not quiet:
        print_banner(_console)


def run() -> None:
    app()
