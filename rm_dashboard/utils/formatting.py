# rm_dashboard/utils/formatting.py
"""
Display helpers shared by the dashboard widgets: Indian short-scale currency
labels (crore / lakh / thousand), half-up rounding and client initials.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float]

RUPEE = "₹"
CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000


def round_half_up(value: Number, places: int = 0) -> Decimal:
    """Round ``value`` half-up (away from zero) to ``places`` decimal places.

    The exact binary value of ``value`` is used, so ``0.15`` (stored as
    0.1499999...) rounds to ``0.1`` at one place.
    """
    quantum = Decimal(1).scaleb(-places)
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


def round_to_int(value: Number) -> int:
    """Half-up rounding to the nearest integer currency unit."""
    return int(round_half_up(value))


def _one_place(value: Number) -> str:
    return str(round_half_up(value, 1))


def _plain(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_currency(value: Number) -> str:
    """
    Format an amount the way the dashboard cards show it.

    Examples:
        >>> format_currency(37_500_000)
        '₹3.8 Cr'
        >>> format_currency(250_000)
        '₹2.5 L'
        >>> format_currency(25_000)
        '₹25.0 K'
        >>> format_currency(500)
        '₹500'
    """
    if value >= CRORE:
        return f"{RUPEE}{_one_place(value / CRORE)} Cr"
    elif value >= LAKH:
        return f"{RUPEE}{_one_place(value / LAKH)} L"
    elif value >= THOUSAND:
        return f"{RUPEE}{_one_place(value / THOUSAND)} K"
    return f"{RUPEE}{_plain(value)}"


def format_crore(value: Number) -> str:
    """Compact crore label used on chart axes and tooltips, e.g. ``₹0.4Cr``."""
    return f"{RUPEE}{_one_place(value / CRORE)}Cr"


def get_initials(name: str) -> str:
    """First letter of each word, upper-cased, at most two characters."""
    return "".join(part[:1] for part in name.split(" ")).upper()[:2]
