"""Strict parsing of numbers typed into form fields"""

import math
import re
from typing import Optional

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def parse_float(raw: str) -> Optional[float]:
    """
    Parse a finite float from user text.

    Returns None for empty, partial ("12abc") or non-finite ("nan", "inf") input.
    """
    text = raw.strip()
    if not text:
        return None

    try:
        value = float(text)
    except ValueError:
        return None

    return value if math.isfinite(value) else None


def parse_int(raw: str) -> Optional[int]:
    """Parse an integer literal. "2.5" and "12.0" are not integers."""
    text = raw.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        return None

    try:
        return int(text)
    except ValueError:
        # Exceeds the interpreter's integer string conversion limit
        return None
