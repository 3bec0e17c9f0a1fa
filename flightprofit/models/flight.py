"""Flight booking record model and CSV loading utility."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from flightprofit import console
from flightprofit.config import CSV_DELIMITER
from flightprofit.readers import PathLike, read_delimited

from .parsing import FieldParseError, parse_float, parse_int, warn_parse


class SeatClass(Enum):
    """Seat classes with the FlightRecord attributes holding their bookings."""

    ECONOMY = ("Economy", "economy_seats", "economy_price")
    BUSINESS = ("Business", "business_seats", "business_price")
    FIRST = ("First Class", "first_class_seats", "first_class_price")

    def __init__(self, label: str, seats_field: str, price_field: str) -> None:
        self.label = label
        self.seats_field = seats_field
        self.price_field = price_field


@dataclass(frozen=True)
class FlightRecord:
    """One booked flight as listed in the flight data file."""

    origin: str
    destination: str
    aircraft_code: str
    economy_seats: int
    business_seats: int
    first_class_seats: int
    economy_price: float
    business_price: float
    first_class_price: float

    def seats(self, seat_class: SeatClass) -> int:
        return getattr(self, seat_class.seats_field)

    def price(self, seat_class: SeatClass) -> float:
        return getattr(self, seat_class.price_field)

    @property
    def seats_booked(self) -> int:
        return sum(self.seats(seat_class) for seat_class in SeatClass)

    @property
    def revenue(self) -> float:
        return sum(self.seats(seat_class) * self.price(seat_class) for seat_class in SeatClass)

    def describe(self) -> str:
        return f"{self.origin}->{self.destination} ({self.aircraft_code})"


FIELD_COUNT = 9


def _record_from_row(row: List[str]) -> FlightRecord:
    origin, destination, aircraft_code = row[0], row[1], row[2]
    return FlightRecord(
        origin=origin,
        destination=destination,
        aircraft_code=aircraft_code,
        economy_seats=parse_int(row[3], "economy_seats"),
        business_seats=parse_int(row[4], "business_seats"),
        first_class_seats=parse_int(row[5], "first_class_seats"),
        economy_price=parse_float(row[6], "economy_price"),
        business_price=parse_float(row[7], "business_price"),
        first_class_price=parse_float(row[8], "first_class_price"),
    )


def load_flights(path: PathLike, delimiter: str = CSV_DELIMITER) -> Optional[List[FlightRecord]]:
    """
    Parse the flight data file into FlightRecord objects in file order.

    Returns ``None`` when the file cannot be read at all. Rows with a wrong
    field count or unparsable numbers are reported and left out.
    """
    rows = read_delimited(path, delimiter)
    if rows is None:
        return None

    flights: List[FlightRecord] = []
    for line_no, row in enumerate(rows, start=1):
        if len(row) != FIELD_COUNT:
            console.warn(f"Skipping flight row {line_no} in {path}: expected {FIELD_COUNT} fields, got {len(row)}")
            continue
        try:
            flights.append(_record_from_row(row))
        except FieldParseError as exc:
            warn_parse(str(path), line_no, exc)
    return flights
