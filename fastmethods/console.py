"""Command-line argument lookup and coloured console messages."""

from __future__ import annotations

import re
import sys
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

_INFO_COLOUR = "\33[1;34m"
_WARNING_COLOUR = "\33[1;33m"
_ERROR_COLOUR = "\33[1;31m"
_RESET = "\33[0m"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def find_arguments(argv: Sequence[str], argument_name: str) -> int:
    """Return the position of ``argument_name`` in ``argv`` (skipping the
    program name), or -1 if it is not present."""
    for position, arg in enumerate(argv[1:], start=1):
        if arg == argument_name:
            return position
    return -1


def parse_argument(
    argv: Sequence[str],
    name: str,
    convert: Callable[[str], T],
    default: T,
) -> T:
    """Return the converted value following ``name``, or ``default`` if the
    option is absent or has no value after it."""
    index = find_arguments(argv, name) + 1
    if 0 < index < len(argv):
        return convert(argv[index])
    return default


def parse_argument_list(
    argv: Sequence[str],
    name: str,
    convert: Callable[[str], T],
) -> list[T]:
    """Return the converted values following ``name`` up to the next option."""
    index = find_arguments(argv, name)
    if index < 0:
        return []
    values: list[T] = []
    for arg in argv[index + 1:]:
        if arg.startswith("-"):
            break
        values.append(convert(arg))
    return values


def to_int(text: str) -> int:
    """Parse the leading integer of ``text``; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def to_float(text: str) -> float:
    """Parse the leading floating point number of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def to_bool(text: str) -> bool:
    """True only when the leading integer of ``text`` is 1."""
    return to_int(text) == 1


def to_char(text: str) -> str:
    """First character of ``text``, or the NUL character if it is empty."""
    return text[0] if text else "\0"


def str_info(val: str) -> str:
    """Information message formatted for the terminal."""
    return f"{_INFO_COLOUR}[INFO] {val}{_RESET}\n"


def str_warning(val: str) -> str:
    """Warning message formatted for the terminal."""
    return f"{_WARNING_COLOUR}[WARNING] {val}{_RESET}\n"


def str_error(val: str) -> str:
    """Error message formatted for the terminal."""
    return f"{_ERROR_COLOUR}[ERROR] {val}{_RESET}\n"


def info(val: str) -> None:
    """Print an information message to standard output."""
    sys.stdout.write(str_info(val))
    sys.stdout.flush()


def warning(val: str) -> None:
    """Print a warning message to standard output."""
    sys.stdout.write(str_warning(val))
    sys.stdout.flush()


def error(val: str) -> None:
    """Print an error message to standard output."""
    sys.stdout.write(str_error(val))
    sys.stdout.flush()