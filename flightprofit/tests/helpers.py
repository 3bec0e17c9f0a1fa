"""Shared fixtures for the calculator tests."""
from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Iterable

from flightprofit.models.aircraft import Aircraft
from flightprofit.models.airport import Airport
from flightprofit.models.flight import FlightRecord


class TempDirMixin:
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def write_file(self, name: str, lines: Iterable[str]) -> Path:
        path = self.tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path


def make_flight(**overrides) -> FlightRecord:
    values = dict(
        origin="MAN",
        destination="JFK",
        aircraft_code="A320",
        economy_seats=100,
        business_seats=20,
        first_class_seats=5,
        economy_price=100.0,
        business_price=300.0,
        first_class_price=600.0,
    )
    values.update(overrides)
    return FlightRecord(**values)


def a320(total_seats: int = 180, running_cost: float = 50.0) -> Aircraft:
    return Aircraft(code="A320", running_cost=running_cost, max_range=6000.0, total_seats=total_seats)


def jfk(primary=5000.0, secondary=None) -> Airport:
    return Airport(code="JFK", name="John F Kennedy", primary_distance=primary, secondary_distance=secondary)
