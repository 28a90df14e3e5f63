"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..adapters.api_client import SchedulingApiClient
from ..adapters.mock_api_client import MockSchedulingApiClient
from ..config import AppConfig, load_config
from ..domain.exceptions import SchedulingError
from ..domain.models import Slot
from ..services.booking_service import BookingService

app = typer.Typer(
    name="nexus-slots",
    help="List and book 1:1 sessions with staff scheduling managers",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")
]
MockOption = Annotated[
    bool,
    typer.Option("--mock", help="Use bundled sample data instead of the API.")
]
PathwayOption = Annotated[
    Optional[int],
    typer.Option("--pathway", "-p", help="Pathway id. Defaults to default_pathway_id from config.")
]


def _configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True
    )


def _build_service(config: AppConfig, mock: bool) -> BookingService:
    if mock:
        client = MockSchedulingApiClient(data_file=config.mock_data_file)
    else:
        client = SchedulingApiClient(
            base_url=config.api_base_url,
            access_token=config.access_token,
            timeout=config.request_timeout
        )
    return BookingService(client=client)


def _load(config_file: Optional[Path], mock: bool) -> tuple[AppConfig, BookingService]:
    config = load_config(config_file)
    _configure_logging(config)
    if mock:
        console.print("[yellow]⚠  MOCK MODE: using sample data[/yellow]\n")
    return config, _build_service(config, mock)


def _render_slots(slots: List[Slot], timezone: str) -> Table:
    table = Table(
        title=f"Available Time Slots ({timezone})",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Staff", style="bold yellow")
    table.add_column("Date")
    table.add_column("Time")

    for index, slot in enumerate(slots, 1):
        start = slot.start.in_timezone(timezone)
        end = slot.end.in_timezone(timezone)
        table.add_row(
            str(index),
            slot.owner_name,
            start.format("ddd, DD.MM.YYYY"),
            f"{start.format('HH:mm')} - {end.format('HH:mm')}"
        )

    return table


@app.command()
def slots(
    pathway: PathwayOption = None,
    config_file: ConfigOption = None,
    mock: MockOption = False,
    limit: Annotated[Optional[int], typer.Option("--limit", "-n", help="Show at most N slots.")] = None,
):
    """
    List bookable slots for the next two weeks.

    Examples:

        nexus-slots slots --pathway 1
        nexus-slots slots --mock --limit 5
    """
    try:
        config, service = _load(config_file, mock)
        pathway_id = pathway or config.default_pathway_id

        found = service.available_slots(pathway_id)

        if not found:
            console.print("[yellow]⚠ No available slots found.[/yellow]")
            return

        shown = found[:limit] if limit else found
        console.print(_render_slots(shown, config.timezone))
        console.print(f"\n[bold green]✓ {len(found)} slot(s) available[/bold green]\n")

    except (SchedulingError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def book(
    disco_user_id: Annotated[str, typer.Argument(help="Student's host-platform user id")],
    slot_number: Annotated[int, typer.Option("--slot", "-s", help="Slot number as listed by 'slots'")],
    pathway: PathwayOption = None,
    config_file: ConfigOption = None,
    mock: MockOption = False,
):
    """
    Book a listed slot for a student.

    Example:

        nexus-slots book disco-alice --pathway 1 --slot 3
    """
    try:
        config, service = _load(config_file, mock)
        pathway_id = pathway or config.default_pathway_id

        found = service.available_slots(pathway_id)
        if not 1 <= slot_number <= len(found):
            console.print(
                f"[bold red]Error:[/bold red] Slot {slot_number} does not exist "
                f"({len(found)} slot(s) available)"
            )
            raise typer.Exit(1)

        slot = found[slot_number - 1]
        confirmation = service.book(disco_user_id=disco_user_id, pathway_id=pathway_id, slot=slot)

        console.print(
            f"[bold green]✓ Booking confirmed![/bold green] "
            f"Your session is scheduled with {slot.owner_name}"
        )
        console.print(f"  {confirmation.format_display(config.timezone)}\n")

    except (SchedulingError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def list_ssms(
    config_file: ConfigOption = None,
    mock: MockOption = False,
):
    """
    List staff scheduling managers in the directory.
    """
    try:
        _, service = _load(config_file, mock)
        owners = service.list_owners()

        if not owners:
            console.print("[yellow]No staff scheduling managers found.[/yellow]")
            return

        table = Table(
            title="Staff Scheduling Managers",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("ID", justify="right")
        table.add_column("Name", style="bold yellow")
        table.add_column("E-Mail", style="dim")

        for owner in owners:
            table.add_row(str(owner.id), owner.name, owner.email or "")

        console.print()
        console.print(table)
        console.print()

    except (SchedulingError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]nexus-slots[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
