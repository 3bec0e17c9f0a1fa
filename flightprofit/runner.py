"""Run wiring the file loaders to the profit report."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from flightprofit import config, console
from flightprofit.models.aircraft import load_aircraft
from flightprofit.models.airport import load_airports
from flightprofit.models.flight import load_flights
from flightprofit.report import output_flight_details


def run(data_dir: Optional[Path] = None, delimiter: Optional[str] = None) -> None:
    """Load airports, aircraft and flights, then report each flight's expected profit."""
    data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR
    delimiter = delimiter or config.CSV_DELIMITER

    airports = load_airports(data_dir / config.AIRPORTS_FILE, delimiter)
    aircraft = load_aircraft(data_dir / config.AIRCRAFT_FILE, delimiter)
    flights = load_flights(data_dir / config.FLIGHTS_FILE, delimiter)

    if flights is None:
        console.error("No valid flight data loaded.")
        return

    console.info(f"Loaded {len(flights)} valid flights.")
    output_flight_details(flights, airports, aircraft)
