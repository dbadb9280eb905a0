"""Subscription (pre-approval) commands."""

from __future__ import annotations

import typer
from rich.console import Console

from pagseguro.cli.ui_components import build_cancellation_panel, build_service_error_table
from pagseguro.core.config import AppSettings
from pagseguro.core.errors import PagSeguroError, ServiceError
from pagseguro.core.services.client import PagSeguro

app = typer.Typer(no_args_is_help=True, help="Manage pre-approval subscriptions.")

_console = Console()


def build_pagseguro() -> PagSeguro:
    return PagSeguro(AppSettings())


@app.command()
def cancel(code: str = typer.Argument(..., help="Subscription (pre-approval) code.")) -> None:
    """Cancel a subscription by code."""

    with build_pagseguro() as pagseguro:
        try:
            result = pagseguro.pre_approvals().cancel_by_code(code)
        except ServiceError as exc:
            _console.print(build_service_error_table(exc))
            raise typer.Exit(code=1) from exc
        except PagSeguroError as exc:
            _console.print(f"[red]{type(exc).__name__}:[/red] {exc}")
            raise typer.Exit(code=1) from exc

    _console.print(build_cancellation_panel(code, result))
