"""Console and CSV views of combined records."""

from showclasses.output.csv_export import read_csv, write_csv
from showclasses.output.table import COLUMNS, build_table, print_table

__all__ = [
    "COLUMNS",
    "build_table",
    "print_table",
    "read_csv",
    "write_csv",
]
