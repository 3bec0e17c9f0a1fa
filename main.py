"""Command-line entry point: report the expected profit of every booked flight."""
from flightprofit.runner import run


if __name__ == "__main__":
    run()
