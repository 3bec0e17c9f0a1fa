"""Reader for the header-prefixed delimited text files the calculator consumes."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import List, Optional, Union

from flightprofit import console
from flightprofit.config import CSV_DELIMITER

Row = List[str]
PathLike = Union[str, Path]


def read_delimited(path: PathLike, delimiter: str = CSV_DELIMITER) -> Optional[List[Row]]:
    """
    Read a delimited file into a list of trimmed field lists.

    The first row is treated as a header and dropped, and rows that are
    blank after trimming are skipped. Quoted fields may contain the
    delimiter. Any I/O, decoding or CSV format failure is reported on the
    console and ``None`` is returned instead of raising, so callers can
    treat an unreadable file as "no data".
    """
    rows: List[Row] = []
    try:
        with Path(path).open(newline="", encoding="utf-8") as handle:
            reader = csv.reader(handle, delimiter=delimiter, skipinitialspace=True)
            next(reader, None)
            for row in reader:
                fields = [column.strip() for column in row]
                if not any(fields):
                    continue
                rows.append(fields)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        console.error(f"Error reading file: {exc}")
        return None

    console.info(f"Successfully read {len(rows)} rows from {path}.")
    return rows
