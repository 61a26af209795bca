"""Console table of combined class records."""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from showclasses.models import CombinedRecord

COLUMNS = [
    "Entry",
    "Horse",
    "Rider",
    "Class Number",
    "Class Name",
    "Sponsor",
    "Trips",
    "Placing",
    "Ring",
    "Date",
    "Start Time",
]

# Upper bound used to measure the table's unconstrained width
_MEASURE_WIDTH = 10_000


def _row(record: CombinedRecord) -> list[Text]:
    # Text cells: API strings are shown literally, never parsed as markup
    values = [
        str(record.entry_number),
        record.horse,
        record.rider_name,
        str(record.class_number),
        record.class_name,
        record.sponsor,
        str(record.trips_count),
        str(record.placing),
        str(record.ring),
        record.scheduled_date_mdy,
        record.scheduled_start_time,
    ]
    return [Text(value) for value in values]


def build_table(records: Sequence[CombinedRecord]) -> Table:
    """Build the class table, one row per record."""
    table = Table(title="Class Schedule")
    for column in COLUMNS:
        table.add_column(column, style="cyan" if column == "Horse" else None, no_wrap=True)

    for record in records:
        table.add_row(*_row(record))

    return table


def print_table(records: Sequence[CombinedRecord], console: Console | None = None) -> None:
    """Render the class table to the console (stdout by default).

    The table is never squeezed below its natural width; when the console is
    narrower (e.g. 80 columns on a pipe) it is rendered wider instead.
    """
    console = console or Console()
    table = build_table(records)

    needed = console.measure(table, options=console.options.update_width(_MEASURE_WIDTH)).maximum
    if needed > console.width:
        console = Console(
            file=console.file,
            width=needed,
            color_system=console.color_system,
            force_terminal=console.is_terminal,
        )

    console.print(table, crop=False)
