"""Wellington class schedule CLI.

Usage:
    showclasses fetch
    showclasses fetch --person-id 8778 --customer-id 15
    showclasses fetch --output out/classes.csv
    showclasses version
"""

import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv

# Load .env file for API settings, etc.
load_dotenv()
from rich.console import Console
from rich.markup import escape

from showclasses import __version__
from showclasses.api import ShowClient
from showclasses.config import Settings, get_settings
from showclasses.errors import CsvWriteError, HttpStatusError, ShowClassesError
from showclasses.logging import bind_context, clear_context, configure_logging, get_logger
from showclasses.models import CombinedRecord
from showclasses.output import print_table, write_csv
from showclasses.services import ScheduleService

console = Console()
logger = get_logger(__name__)
app = typer.Typer(
    name="showclasses",
    help="Wellington rider class schedule export",
    no_args_is_help=True,
)


def _create_client(settings: Settings) -> ShowClient:
    """Build the API client for this run."""
    return ShowClient(settings)


async def _collect(settings: Settings, person_id: int, customer_id: int) -> list[CombinedRecord]:
    async with _create_client(settings) as client:
        service = ScheduleService(client, customer_id)
        return await service.collect(person_id)


@app.command("fetch")
def fetch(
    person_id: int = typer.Option(None, "--person-id", "-p", help="Person id (default from settings)"),
    customer_id: int = typer.Option(None, "--customer-id", "-c", help="Customer id (default from settings)"),
    output: Path = typer.Option(None, "--output", "-o", help="CSV path (default from settings)"),
):
    """Fetch a rider's classes, print them and save them as CSV."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format, settings.environment)

    person_id = settings.person_id if person_id is None else person_id
    customer_id = settings.customer_id if customer_id is None else customer_id
    output = output or settings.output_csv

    bind_context(person_id=person_id)
    try:
        records = asyncio.run(_collect(settings, person_id, customer_id))
    except HttpStatusError as e:
        logger.warning("request_rejected", status=e.status_code, url=e.url)
        console.print(f"Sorry, request failed with status: {escape(str(e))}")
        raise typer.Exit(1) from None
    except ShowClassesError as e:
        logger.error("fetch_failed", error=str(e), type=type(e).__name__)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None
    finally:
        clear_context()

    print_table(records, console)

    try:
        write_csv(records, output)
    except CsvWriteError as e:
        console.print(f"[red]Failed to create CSV:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    console.print(f"[green]Saved {len(records)} rows to:[/green] {output}")


@app.command("version")
def version():
    """Show the installed version."""
    console.print(f"showclasses {__version__}")


if __name__ == "__main__":
    app()
