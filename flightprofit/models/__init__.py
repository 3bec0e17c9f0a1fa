"""Domain models and their file loaders."""

from .aircraft import Aircraft, load_aircraft
from .airport import Airport, load_airports
from .flight import FlightRecord, SeatClass, load_flights
from .parsing import FieldParseError

__all__ = [
    "Aircraft",
    "Airport",
    "FieldParseError",
    "FlightRecord",
    "SeatClass",
    "load_aircraft",
    "load_airports",
    "load_flights",
]
