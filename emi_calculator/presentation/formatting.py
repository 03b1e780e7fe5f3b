"""Display formatting for monetary amounts"""

import math
from typing import Optional


def format_currency(amount: Optional[float], symbol: str = "$") -> str:
    """
    Format an amount with symbol, thousands separators and two decimals.

    Examples:
        106618.5464 → "$106,618.55"
        -1234.5     → "-$1,234.50"
        -0.001      → "$0.00"
        None, nan   → "N/A"
    """
    if amount is None or not math.isfinite(amount):
        return "N/A"

    rounded = round(amount, 2)
    # Avoid "-$0.00" for tiny negative float noise
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"
