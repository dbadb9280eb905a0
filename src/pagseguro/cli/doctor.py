"""Doctor command: configuration and connectivity diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from pagseguro.adapters.http_client import build_client
from pagseguro.core.config import AppSettings, Environment, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get(settings.host)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _credential_status(*values: str | None) -> str:
    return "OK" if all(values) else "MISSING"


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip the connectivity check."),
) -> None:
    """Show the configuration status and check connectivity to the host."""

    settings = AppSettings()

    table = Table(title="PagSeguro Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Environment", "OK", f"{settings.environment.value} -> {settings.host}")
    table.add_row(
        "Seller credentials",
        _credential_status(settings.email, settings.token),
        "email/token (pre-approvals)",
    )
    table.add_row(
        "Application credentials",
        _credential_status(settings.app_id, settings.app_key),
        "appId/appKey (authorizations)",
    )
    table.add_row("Charset", "OK", settings.charset)

    ok_http = True
    if not offline:
        ok_http, detail_http = _check_http(settings)
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)
    if not ok_http:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive credentials setup (stored in the user config .env)."""

    environment = typer.prompt(
        "Environment (production/sandbox)",
        default=Environment.SANDBOX.value,
        show_default=True,
    ).strip().lower()
    if environment not in {e.value for e in Environment}:
        raise typer.BadParameter("environment must be 'production' or 'sandbox'")

    email = typer.prompt("Seller email", default="", show_default=False).strip()
    token = typer.prompt("Seller token", default="", hide_input=True, show_default=False).strip()
    app_id = typer.prompt("Application id", default="", show_default=False).strip()
    app_key = typer.prompt("Application key", default="", hide_input=True, show_default=False).strip()

    if not (email and token) and not (app_id and app_key):
        raise typer.BadParameter("provide seller email/token or application id/key")

    env_path = write_user_env_vars(
        {
            "PAGSEGURO_ENVIRONMENT": environment,
            "PAGSEGURO_EMAIL": email or None,
            "PAGSEGURO_TOKEN": token or None,
            "PAGSEGURO_APP_ID": app_id or None,
            "PAGSEGURO_APP_KEY": app_key or None,
        }
    )

    _console.print(f"[green]Saved PagSeguro config to:[/green] {env_path}")
