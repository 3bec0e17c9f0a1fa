"""Console report of per-flight bookings and expected profit."""
from __future__ import annotations

from typing import Dict, List

import pandas as pd

from flightprofit import console
from flightprofit.config import CURRENCY_SYMBOL
from flightprofit.models.aircraft import Aircraft
from flightprofit.models.airport import Airport
from flightprofit.models.flight import FlightRecord, SeatClass
from flightprofit.profit import calculate_profit, results_frame


def format_money(amount: float, symbol: str = CURRENCY_SYMBOL) -> str:
    return f"{symbol}{amount:.2f}"


def format_flight(flight: FlightRecord, profit: float) -> str:
    lines = [f"Flight from {flight.origin} to {flight.destination} ({flight.aircraft_code}):"]
    for seat_class in SeatClass:
        lines.append(f"    {seat_class.label} Seats Booked: {flight.seats(seat_class)},")
    lines.append(f"    Expected Profit: {format_money(profit)}")
    return "\n".join(lines)


def format_summary(frame: pd.DataFrame) -> str:
    total = round(float(frame["profit"].sum()), 2) if not frame.empty else 0.0
    zeroed = int((frame["profit"] == 0).sum()) if not frame.empty else 0
    return (
        f"Flights reported: {len(frame)} | "
        f"zero-profit flights: {zeroed} | "
        f"total expected profit: {format_money(total)}"
    )


def output_flight_details(
    flights: List[FlightRecord],
    airports: Dict[str, Airport],
    aircraft: Dict[str, Aircraft],
) -> None:
    """Print every flight with its bookings and expected profit, then a run total."""
    profits: List[float] = []
    for flight in flights:
        profit = calculate_profit(flight, airports, aircraft)
        profits.append(profit)
        print(f"\n{format_flight(flight, profit)}")

    console.success(f"\n{format_summary(results_frame(flights, profits))}")
