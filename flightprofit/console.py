"""Coloured console output shared by the loaders, calculator and reporter."""
from __future__ import annotations

import sys

from colorama import Fore, Style, init as colorama_init

from flightprofit import config

colorama_init()

RED = Fore.RED
GREEN = Fore.GREEN
YELLOW = Fore.YELLOW
RESET = Style.RESET_ALL


def _log(message: str, color: str = RESET, stream=None) -> None:
    stream = stream or sys.stdout
    if color == RESET:
        print(message, file=stream)
    else:
        print(f"{color}{message}{RESET}", file=stream)


def info(message: str) -> None:
    if config.QUIET:
        return
    _log(message)


def success(message: str) -> None:
    if config.QUIET:
        return
    _log(message, GREEN)


def warn(message: str) -> None:
    _log(message, YELLOW, sys.stderr)


def error(message: str) -> None:
    _log(message, RED, sys.stderr)
