from .formatting import (
    format_crore,
    format_currency,
    get_initials,
    round_half_up,
    round_to_int,
)

__all__ = [
    "format_crore",
    "format_currency",
    "get_initials",
    "round_half_up",
    "round_to_int",
]
