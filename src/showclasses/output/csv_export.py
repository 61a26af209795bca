"""CSV export of combined class records."""

import csv
from collections.abc import Sequence
from pathlib import Path

from showclasses.errors import CsvWriteError
from showclasses.logging import get_logger
from showclasses.models import CombinedRecord

logger = get_logger(__name__)


def write_csv(records: Sequence[CombinedRecord], path: Path) -> Path:
    """Write records to a CSV file, replacing any existing file.

    The header row is always written, even with no records.

    Args:
        records: Records in output order
        path: Destination file

    Returns:
        The path written

    Raises:
        CsvWriteError: If the file cannot be created or written
    """
    try:
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=CombinedRecord.field_names())
            writer.writeheader()
            for record in records:
                writer.writerow(record.as_row())
    except OSError as e:
        raise CsvWriteError(str(path), e.strerror or str(e)) from e

    logger.info("csv_written", path=str(path), rows=len(records))
    return path


def read_csv(path: Path) -> list[dict[str, str]]:
    """Read an exported CSV back as one dict per data row."""
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))
