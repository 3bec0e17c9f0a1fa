"""Expected profit of a booked flight: seat revenue minus running cost."""
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

import pandas as pd

from flightprofit import console
from flightprofit.models.aircraft import Aircraft
from flightprofit.models.airport import Airport
from flightprofit.models.flight import FlightRecord

INVALID_PROFIT = 0.0

FRAME_COLUMNS = ["origin", "destination", "aircraft", "seats_booked", "revenue", "profit"]


def calculate_profit(
    flight: FlightRecord,
    airports: Dict[str, Airport],
    aircraft: Dict[str, Aircraft],
) -> float:
    """
    Return the expected profit of ``flight`` rounded to 2 decimal places.

    Unknown aircraft or destination, overbooking and a destination without
    any known distance are reported and score ``INVALID_PROFIT``.
    """
    plane = aircraft.get(flight.aircraft_code)
    destination = airports.get(flight.destination)
    if plane is None or destination is None:
        missing = []
        if plane is None:
            missing.append(f"aircraft '{flight.aircraft_code}'")
        if destination is None:
            missing.append(f"airport '{flight.destination}'")
        console.error(f"Invalid flight {flight.describe()}: unknown {' and '.join(missing)}")
        return INVALID_PROFIT

    revenue = flight.revenue
    seats_booked = flight.seats_booked
    if seats_booked > plane.total_seats:
        console.error(
            f"Overbooked flight {flight.describe()}: {seats_booked} seats booked, "
            f"capacity {plane.total_seats}"
        )
        return INVALID_PROFIT

    distance = destination.distance
    if distance is None:
        console.error(f"Invalid flight {flight.describe()}: no distance recorded for '{destination.code}'")
        return INVALID_PROFIT

    total_cost = plane.cost_per_seat(distance) * seats_booked
    return round(revenue - total_cost, 2)


def results_frame(flights: Sequence[FlightRecord], profits: Sequence[float]) -> pd.DataFrame:
    """Pair flights with already computed profits, one row per flight."""
    records = [
        {
            "origin": flight.origin,
            "destination": flight.destination,
            "aircraft": flight.aircraft_code,
            "seats_booked": flight.seats_booked,
            "revenue": flight.revenue,
            "profit": profit,
        }
        for flight, profit in zip(flights, profits)
    ]
    return pd.DataFrame.from_records(records, columns=FRAME_COLUMNS)


def profit_frame(
    flights: Iterable[FlightRecord],
    airports: Dict[str, Airport],
    aircraft: Dict[str, Aircraft],
) -> pd.DataFrame:
    """Tabulate every flight with its revenue and expected profit, in load order."""
    flights = list(flights)
    profits: List[float] = [calculate_profit(flight, airports, aircraft) for flight in flights]
    return results_frame(flights, profits)
