"""Expected-profit calculator for booked flights."""

from .profit import calculate_profit, profit_frame
from .runner import run

__all__ = ["calculate_profit", "profit_frame", "run"]
