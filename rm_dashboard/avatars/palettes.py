# rm_dashboard/avatars/palettes.py
"""
Tier-based color palettes for client avatars.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class PaletteTier(Enum):
    """Client segmentation tiers that drive avatar colors."""

    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"

    @classmethod
    def resolve(cls, tier: Optional[str]) -> "PaletteTier":
        """Case-insensitive lookup; anything unrecognised is SILVER."""
        if isinstance(tier, cls):
            return tier
        if not tier:
            return cls.SILVER
        try:
            return cls(str(tier).strip().lower())
        except ValueError:
            return cls.SILVER


@dataclass(frozen=True)
class Palette:
    background: Tuple[str, str, str, str]
    face: Tuple[str, str, str]
    hair: Tuple[str, str, str, str, str]
    accessories: Tuple[str, str, str]

    @property
    def colors(self) -> Tuple[str, ...]:
        return self.background + self.face + self.hair + self.accessories


PALETTES = {
    PaletteTier.SILVER: Palette(
        background=("#E5E7EB", "#D1D5DB", "#9CA3AF", "#6B7280"),
        face=("#F3F4F6", "#F9FAFB", "#E5E7EB"),
        hair=("#111827", "#1F2937", "#374151", "#4B5563", "#6B7280"),
        accessories=("#4B5563", "#6B7280", "#9CA3AF"),
    ),
    PaletteTier.GOLD: Palette(
        background=("#FEF3C7", "#FDE68A", "#FCD34D", "#FBBF24"),
        face=("#FFFBEB", "#FEF3C7", "#FDE68A"),
        hair=("#111827", "#1F2937", "#374151", "#4B5563", "#92400E"),
        accessories=("#B45309", "#D97706", "#F59E0B"),
    ),
    PaletteTier.PLATINUM: Palette(
        background=("#E0F2FE", "#BAE6FD", "#7DD3FC", "#38BDF8"),
        face=("#F0F9FF", "#E0F2FE", "#BAE6FD"),
        hair=("#111827", "#1F2937", "#374151", "#4B5563", "#0C4A6E"),
        accessories=("#075985", "#0369A1", "#0EA5E9"),
    ),
}


def get_palette(tier: Optional[str]) -> Palette:
    return PALETTES[PaletteTier.resolve(tier)]


__all__ = ["PaletteTier", "Palette", "PALETTES", "get_palette"]
