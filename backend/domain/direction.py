"""
Direction arbitration between raw input and the committed heading.
"""

from .constants import OPPOSITES, VALID_MOVES


def normalize_heading(raw: str) -> str:
    """Map user input such as "up" or "ArrowUp" to a heading constant."""
    name = str(raw).strip().upper()
    if name.startswith("ARROW"):
        name = name[len("ARROW"):]
    if name not in VALID_MOVES:
        raise ValueError(f"Unknown heading: {raw!r}")
    return name


def is_reversal(current: str, requested: str) -> bool:
    return OPPOSITES[current] == requested


def propose_heading(current: str, requested: str) -> str:
    """
    Return `requested` unless it is the exact opposite of `current`.

    `current` must be the heading the next step will use, never a queued one.
    """
    if requested not in VALID_MOVES:
        raise ValueError(f"Unknown heading: {requested!r}")
    if is_reversal(current, requested):
        return current
    return requested
