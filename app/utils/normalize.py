"""Normalization helpers for Smart-Add field keys and values."""
import math
import re
from typing import Optional


_WORD_SEPARATORS = re.compile(r"[\s_]+")
_INT_PREFIX = re.compile(r"^[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

# BSON integers are signed 64-bit
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def normalize_token(text: str) -> str:
    """
    Convert free text to an enum-like storage token.

    Args:
        text: Input text to normalize

    Returns:
        Lowercase token with whitespace runs joined by single underscores

    Examples:
        >>> normalize_token("In Progress")
        'in_progress'
        >>> normalize_token("computer_vision")
        'computer_vision'
    """
    token = text.strip().lower()

    # Collapse whitespace and underscores to a single underscore
    token = _WORD_SEPARATORS.sub("_", token)

    return token


def normalize_key(key: str) -> str:
    """
    Normalize a field key so "Tech Stack", "tech_stack" and "TECH  STACK" match.

    Examples:
        >>> normalize_key("  Github URL ")
        'github_url'
    """
    return normalize_token(key)


def split_field(line: str) -> Optional[tuple[str, str]]:
    """
    Split a "key: value" line on its first colon.

    Args:
        line: A single line of a block

    Returns:
        (normalized key, trimmed value) or None when the line has no colon

    Examples:
        >>> split_field("GitHub URL: https://github.com/me/repo")
        ('github_url', 'https://github.com/me/repo')
        >>> split_field("just a note") is None
        True
    """
    if ":" not in line:
        return None

    key, value = line.split(":", 1)
    return normalize_key(key), value.strip()


def parse_int(value: str) -> Optional[int]:
    """
    Parse the leading integer of a value.

    Trailing text is ignored ("2 (summer)" -> 2). Returns None when the
    value does not start with a number or does not fit in 64 bits.
    """
    match = _INT_PREFIX.match(value.strip())
    if not match:
        return None
    digits = match.group(0)
    if len(digits.lstrip("+-").lstrip("0")) > 19:
        return None
    number = int(digits)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


def parse_float(value: str, default: Optional[float] = None) -> Optional[float]:
    """
    Parse the leading decimal number of a value, falling back to default.

    Values that overflow to infinity count as unparsable.

    Examples:
        >>> parse_float("5 chapters", 1)
        5.0
        >>> parse_float("lots", 1.0)
        1.0
    """
    match = _FLOAT_PREFIX.match(value.strip())
    if not match:
        return default
    number = float(match.group(0))
    if not math.isfinite(number):
        return default
    return number
