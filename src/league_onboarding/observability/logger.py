import logging
import json
import os
import sys
import time

LOGGER_NAME = "league_onboarding"

_RESET = "\033[0m"

# Event suffix -> ANSI color; events without a match are printed plain
_EVENT_COLORS = {
    "_FAILED": "\033[31m",
    "_REJECTED": "\033[33m",
    "_COMPLETED": "\033[32m",
}


def _colorize(event_type: str, text: str) -> str:
    if os.getenv("LOG_COLOR", "0") != "1" or not sys.stdout.isatty():
        return text
    for suffix, color in _EVENT_COLORS.items():
        if event_type.endswith(suffix):
            return f"{color}{text}{_RESET}"
    return text


def get_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


logger = get_logger()


def log_event(event_type: str, payload: dict):
    """
    Emit one onboarding event as a single JSON line.
    """
    text = json.dumps({"event_type": event_type, **payload}, default=str)
    logger.info(_colorize(event_type, text))


class Stopwatch:
    """
    Seconds elapsed since creation, for event durations.
    """
    def __init__(self):
        self.started = time.perf_counter()

    def elapsed(self) -> float:
        return round(time.perf_counter() - self.started, 4)
