"""Aircraft model and CSV loading utility."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from flightprofit import console
from flightprofit.config import CSV_DELIMITER, RUNNING_COST_DISTANCE_UNIT
from flightprofit.readers import PathLike, read_delimited

from .parsing import FieldParseError, parse_float, parse_int, warn_parse

COLUMNS = ("code", "running_cost", "max_range", "total_seats")


@dataclass(frozen=True)
class Aircraft:
    code: str
    running_cost: float
    max_range: float
    total_seats: int

    def cost_per_seat(self, distance: float) -> float:
        """Running cost of one booked seat over ``distance`` units."""
        return self.running_cost / RUNNING_COST_DISTANCE_UNIT * distance


def load_aircraft(path: PathLike, delimiter: str = CSV_DELIMITER) -> Dict[str, Aircraft]:
    """Read the aeroplanes file into Aircraft objects keyed by aircraft code."""
    aircraft: Dict[str, Aircraft] = {}
    rows = read_delimited(path, delimiter)
    if rows is None:
        return aircraft

    for line_no, row in enumerate(rows, start=1):
        if len(row) < len(COLUMNS):
            console.warn(f"Skipping aircraft row {line_no} in {path}: expected {len(COLUMNS)} fields, got {len(row)}")
            continue
        code, running_cost, max_range, total_seats = row[:4]
        try:
            entry = Aircraft(
                code=code,
                running_cost=parse_float(running_cost, "running_cost"),
                max_range=parse_float(max_range, "max_range"),
                total_seats=parse_int(total_seats, "total_seats"),
            )
        except FieldParseError as exc:
            warn_parse(str(path), line_no, exc)
            continue
        aircraft[code] = entry

    console.info(f"Loaded {len(aircraft)} aircraft.")
    return aircraft
