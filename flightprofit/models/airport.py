"""Airport model and CSV loading utility."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from flightprofit import console
from flightprofit.config import CSV_DELIMITER
from flightprofit.readers import PathLike, read_delimited

from .parsing import parse_optional_float

COLUMNS = ("name", "code", "primary_distance", "secondary_distance")


@dataclass(frozen=True)
class Airport:
    """
    Destination airport with its distance from the two origin airports.

    A distance of ``None`` means the column was empty or unparsable, which is
    different from a recorded distance of zero.
    """

    code: str
    name: str
    primary_distance: Optional[float] = None
    secondary_distance: Optional[float] = None

    @property
    def distance(self) -> Optional[float]:
        """Primary distance when known, otherwise the secondary one."""
        if self.primary_distance is not None:
            return self.primary_distance
        return self.secondary_distance


def load_airports(path: PathLike, delimiter: str = CSV_DELIMITER) -> Dict[str, Airport]:
    """Parse the airports file into Airport objects keyed by airport code."""
    airports: Dict[str, Airport] = {}
    rows = read_delimited(path, delimiter)
    if rows is None:
        return airports

    for line_no, row in enumerate(rows, start=1):
        if len(row) < len(COLUMNS):
            console.warn(f"Skipping airport row {line_no} in {path}: expected {len(COLUMNS)} fields, got {len(row)}")
            continue
        name, code, primary, secondary = row[:4]
        # Duplicate codes: the last row read wins.
        airports[code] = Airport(
            code=code,
            name=name,
            primary_distance=parse_optional_float(primary, "primary_distance", str(path), line_no),
            secondary_distance=parse_optional_float(secondary, "secondary_distance", str(path), line_no),
        )

    console.info(f"Loaded {len(airports)} airports.")
    return airports
