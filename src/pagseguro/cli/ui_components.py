"""Rich components for the CLI.

Keeps command logic apart from presentation details.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pagseguro.core.domain.results import CancelledPreApprovalSubscription
from pagseguro.core.errors import ServiceError


def print_banner(console: Console) -> None:
    title = Text("PagSeguro", style="bold green")
    subtitle = Text("Web-services client • diagnostics", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="green", padding=(1, 4)))


def build_service_error_table(error: ServiceError) -> Table:
    """One row per `(code, message)` pair returned by the service."""

    title = "Service errors"
    if error.status_code is not None:
        title = f"{title} (HTTP {error.status_code})"
    table = Table(title=title)
    table.add_column("Code", style="red", no_wrap=True)
    table.add_column("Message", style="white")
    for entry in error.errors:
        table.add_row(entry.code, entry.message)
    return table


def build_cancellation_panel(code: str, result: CancelledPreApprovalSubscription) -> Panel:
    body = Text()
    body.append("Code: ", style="bold")
    body.append(f"{code}\n")
    body.append("Status: ", style="bold")
    body.append(result.status, style="green" if result.ok else "yellow")
    body.append("\nDate: ", style="bold")
    body.append(result.date.isoformat())
    return Panel(body, title=Text("Subscription cancelled", style="bold green"), border_style="green")
