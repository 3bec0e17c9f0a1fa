"""Profit calculation checks."""
from __future__ import annotations

import io
import unittest
from contextlib import redirect_stderr

from flightprofit.profit import INVALID_PROFIT, calculate_profit, profit_frame

from .helpers import a320, jfk, make_flight


class CalculateProfitTest(unittest.TestCase):
    def setUp(self) -> None:
        self.aircraft = {"A320": a320()}
        self.airports = {"JFK": jfk()}

    def _calculate(self, flight, airports=None, aircraft=None):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            profit = calculate_profit(
                flight,
                self.airports if airports is None else airports,
                self.aircraft if aircraft is None else aircraft,
            )
        return profit, stderr.getvalue()

    def test_worked_example_is_a_large_loss(self) -> None:
        # revenue 19000, cost 0.5 * 5000 * 125 = 312500
        profit, diagnostics = self._calculate(make_flight())
        self.assertEqual(profit, -293500.0)
        self.assertEqual(diagnostics, "")

    def test_profitable_short_haul(self) -> None:
        aircraft = {"MNB": a320(total_seats=180, running_cost=8.0)}
        airports = {"MAD": jfk(primary=1406.0)}
        flight = make_flight(
            destination="MAD",
            aircraft_code="MNB",
            economy_seats=150,
            business_seats=20,
            first_class_seats=10,
            economy_price=180.0,
            business_price=450.0,
            first_class_price=900.0,
        )
        profit, _ = self._calculate(flight, airports, aircraft)
        # 45000 - 0.08 * 1406 * 180
        self.assertAlmostEqual(profit, 24753.6, places=2)

    def test_result_is_rounded_to_pennies(self) -> None:
        flight = make_flight(economy_seats=3, business_seats=0, first_class_seats=0, economy_price=10.333)
        profit, _ = self._calculate(flight, aircraft={"A320": a320(running_cost=0.0)})
        self.assertEqual(profit, 31.0)

    def test_unknown_aircraft_scores_zero(self) -> None:
        profit, diagnostics = self._calculate(make_flight(aircraft_code="B737"))
        self.assertEqual(profit, INVALID_PROFIT)
        self.assertIn("unknown aircraft 'B737'", diagnostics)

    def test_unknown_destination_scores_zero(self) -> None:
        profit, diagnostics = self._calculate(make_flight(destination="XXX"))
        self.assertEqual(profit, 0)
        self.assertIn("airport 'XXX'", diagnostics)

    def test_both_references_missing_are_named(self) -> None:
        profit, diagnostics = self._calculate(make_flight(destination="XXX", aircraft_code="B737"))
        self.assertEqual(profit, 0)
        self.assertIn("aircraft 'B737' and airport 'XXX'", diagnostics)

    def test_overbooking_scores_zero_even_when_profitable(self) -> None:
        aircraft = {"A320": a320(total_seats=100, running_cost=0.0)}
        profit, diagnostics = self._calculate(make_flight(), aircraft=aircraft)
        self.assertEqual(profit, 0)
        self.assertIn("Overbooked", diagnostics)

    def test_full_aircraft_is_not_overbooked(self) -> None:
        aircraft = {"A320": a320(total_seats=125, running_cost=0.0)}
        profit, diagnostics = self._calculate(make_flight(), aircraft=aircraft)
        self.assertEqual(profit, 19000.0)
        self.assertEqual(diagnostics, "")

    def test_missing_primary_distance_falls_back_to_secondary(self) -> None:
        airports = {"JFK": jfk(primary=None, secondary=1000.0)}
        profit, _ = self._calculate(make_flight(), airports=airports)
        # 19000 - 0.5 * 1000 * 125
        self.assertEqual(profit, -43500.0)

    def test_zero_primary_distance_is_used_as_is(self) -> None:
        airports = {"JFK": jfk(primary=0.0, secondary=1000.0)}
        profit, _ = self._calculate(make_flight(), airports=airports)
        self.assertEqual(profit, 19000.0)

    def test_no_known_distance_scores_zero(self) -> None:
        airports = {"JFK": jfk(primary=None, secondary=None)}
        profit, diagnostics = self._calculate(make_flight(), airports=airports)
        self.assertEqual(profit, 0)
        self.assertIn("no distance", diagnostics)


class ProfitFrameTest(unittest.TestCase):
    def test_one_row_per_flight_in_order(self) -> None:
        flights = [make_flight(), make_flight(aircraft_code="B737"), make_flight(economy_seats=10)]
        with redirect_stderr(io.StringIO()):
            frame = profit_frame(flights, {"JFK": jfk()}, {"A320": a320()})

        self.assertEqual(list(frame.columns), ["origin", "destination", "aircraft", "seats_booked", "revenue", "profit"])
        self.assertEqual(list(frame["aircraft"]), ["A320", "B737", "A320"])
        self.assertEqual(list(frame["seats_booked"]), [125, 125, 35])
        self.assertEqual(frame["profit"].iloc[0], -293500.0)
        self.assertEqual(frame["profit"].iloc[1], 0)

    def test_empty_flight_list(self) -> None:
        frame = profit_frame([], {}, {})
        self.assertTrue(frame.empty)
        self.assertIn("profit", frame.columns)


if __name__ == "__main__":
    unittest.main()
