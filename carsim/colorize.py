"""ANSI colour and formatting helpers for terminal output."""

from __future__ import annotations

CONTROL = "\033"

FOREGROUND: dict[str, str] = {
    "Default": "39",
    "Black": "30",
    "Red": "31",
    "Green": "32",
    "Yellow": "33",
    "Blue": "34",
    "Magenta": "35",
    "Cyan": "36",
    "Light Gray": "37",
    "Dark Gray": "90",
    "Light Red": "91",
    "Light Green": "92",
    "Light Yellow": "93",
    "Light Blue": "94",
    "Light Magenta": "95",
    "Light Cyan": "96",
    "White": "97",
}

BACKGROUND: dict[str, str] = {
    "Default": "49",
    "Black": "40",
    "Red": "41",
    "Green": "42",
    "Yellow": "43",
    "Blue": "44",
    "Megenta": "45",
    "Cyan": "46",
    "Light Gray": "47",
    "Dark Gray": "100",
    "Light Red": "101",
    "Light Green": "102",
    "Light Yellow": "103",
    "Light Blue": "104",
    "Light Magenta": "105",
    "Light Cyan": "106",
    "White": "107",
}

FORMATTING_SET: dict[str, str] = {
    "Default": "0",
    "Bold": "1",
    "Dim": "2",
    "Underlined": "4",
    "Blink": "5",
    "Reverse": "7",
    "Hidden": "8",
}

FORMATTING_RESET: dict[str, str] = {
    "All": "0",
    "Bold": "21",
    "Dim": "22",
    "Underlined": "24",
    "Blink": "25",
    "Reverse": "27",
    "Hidden": "28",
}


def rize(
    source: str,
    foreground: str = "Default",
    background: str = "Default",
    set_formatting: str = "Default",
    reset_formatting: str = "All",
) -> str:
    """Wrap ``source`` in ANSI escape codes.

    Unknown colour or formatting names fall back to the defaults.
    """
    fg = FOREGROUND.get(foreground, FOREGROUND["Default"])
    bg = BACKGROUND.get(background, BACKGROUND["Default"])
    fmt = FORMATTING_SET.get(set_formatting, FORMATTING_SET["Default"])
    reset = FORMATTING_RESET.get(reset_formatting, FORMATTING_RESET["All"])
    return f"{CONTROL}[{fmt};{bg};{fg}m{source}{CONTROL}[{reset}m"