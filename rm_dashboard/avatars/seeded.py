# rm_dashboard/avatars/seeded.py
"""
Deterministic "random" selection driven by a string seed.

The same (seed, salt, n) always maps to the same index, in this process or any
other, so avatars stay stable without storing anything. The salt lets one seed
drive several independent choices (background color, hair style, ...).
"""

from typing import Sequence, TypeVar

T = TypeVar("T")

_UINT32 = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - 0x100000000 if value & 0x80000000 else value


def _code_units(seed: str):
    # UTF-16 code units, so characters outside the BMP count as two units
    data = seed.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def seeded_hash(seed: str, salt: int = 0) -> int:
    """
    Signed 32-bit string hash: ``hash = hash * 31 + code_unit + salt`` per unit.

    Args:
        seed: Any string, typically a client's full name. Empty gives 0.
        salt: Integer mixed into every step to decorrelate selections.

    Returns:
        An int in ``[-2**31, 2**31)``.
    """
    h = 0
    for unit in _code_units(seed):
        h = _to_int32((h << 5) - h + unit + salt)
    return h


def seeded_index(seed: str, n: int, salt: int = 0) -> int:
    """Index in ``[0, n)`` chosen deterministically from ``seed`` and ``salt``."""
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    return abs(seeded_hash(seed, salt)) % n


def seeded_item(items: Sequence[T], seed: str, salt: int = 0) -> T:
    """Pick one element of ``items`` deterministically."""
    return items[seeded_index(seed, len(items), salt)]
