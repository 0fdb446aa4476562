"""Identifiers, number formatting and validated console prompts."""

from __future__ import annotations

import sys
import uuid
from typing import Callable, TextIO, TypeVar

T = TypeVar("T")

INVALID_INPUT = "Invalid input. Please try again.\n"


def generate_uuid_v4() -> str:
    """Return a random version 4 UUID as a lower-case string."""
    return str(uuid.uuid4())


def format_with_commas(value: float | int) -> str:
    """Format a number with thousands separators.

    Integers keep no decimals; other numbers are shown with two.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value:,}"
    return f"{value:,.2f}"


def _read_line(prompt: str, stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EOFError("input ended while waiting for a reply")
    return line.rstrip("\r\n")


def prompt_with_validation(
    prompt: str,
    parse: Callable[[str], T],
    checker: Callable[[T], bool] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> T:
    """Ask until the reply parses with ``parse`` and passes ``checker``."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    while True:
        line = _read_line(prompt, stdin, stdout)
        try:
            value = parse(line.strip())
        except ValueError:
            stdout.write(INVALID_INPUT)
            continue
        if checker is None or checker(value):
            return value
        stdout.write(INVALID_INPUT)


def prompt_line(
    prompt: str,
    checker: Callable[[str], bool] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> str:
    """Ask for a whole line until it passes ``checker``."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    while True:
        line = _read_line(prompt, stdin, stdout)
        if checker is None or checker(line):
            return line
        stdout.write(INVALID_INPUT)