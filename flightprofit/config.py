"""Configuration values for the flight profit calculator."""
import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent

# Data locations
DATA_DIR = Path(os.getenv("FLIGHTPROFIT_DATA_DIR", str(REPO_ROOT / "data")))
AIRPORTS_FILE = os.getenv("FLIGHTPROFIT_AIRPORTS_FILE", "airports.csv")
AIRCRAFT_FILE = os.getenv("FLIGHTPROFIT_AIRCRAFT_FILE", "aeroplanes.csv")
FLIGHTS_FILE = os.getenv("FLIGHTPROFIT_FLIGHTS_FILE", "valid_flight_data.csv")

# CSV parsing
CSV_DELIMITER = os.getenv("FLIGHTPROFIT_DELIMITER", ",")

# Reporting
CURRENCY_SYMBOL = os.getenv("FLIGHTPROFIT_CURRENCY", "£")
QUIET = os.getenv("FLIGHTPROFIT_QUIET", "") not in ("", "0", "false", "False")

# Running cost is quoted per this many distance units
RUNNING_COST_DISTANCE_UNIT = 100
