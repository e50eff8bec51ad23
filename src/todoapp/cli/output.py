"""Console output helpers for the todoapp CLI."""

import sys

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
DIM = "\033[2m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗


def _colorize(text: str, color: str) -> str:
    """Wrap text in color codes when stdout is a terminal."""
    if getattr(sys.stdout, "isatty", None) and sys.stdout.isatty():
        return f"{color}{text}{RESET}"
    return text


def _marked(symbol: str, color: str, message: str) -> None:
    print(f"{_colorize(symbol, color)} {message}")


def success(message: str) -> None:
    _marked(CHECK, GREEN, message)


def info(message: str) -> None:
    _marked(BULLET, YELLOW, message)


def error(message: str) -> None:
    _marked(CROSS, RED, message)


def header(message: str) -> None:
    print(_colorize(message, BLUE))


def task_line(title: str, task_id: str, completed: bool) -> None:
    """Print one task as a checklist row: box, title, then the dimmed id."""
    box = _colorize("[x]", GREEN) if completed else "[ ]"
    print(f"{box} {title} {_colorize(task_id, DIM)}")
