import pytest

from rm_dashboard.avatars.palettes import PALETTES, Palette, PaletteTier, get_palette


@pytest.mark.parametrize(
    "tier, expected",
    [
        ("silver", PaletteTier.SILVER),
        ("GOLD", PaletteTier.GOLD),
        ("Platinum", PaletteTier.PLATINUM),
        ("  gold ", PaletteTier.GOLD),
        (PaletteTier.PLATINUM, PaletteTier.PLATINUM),
    ],
)
def test_resolve_known_tiers(tier, expected):
    assert PaletteTier.resolve(tier) is expected


@pytest.mark.parametrize("tier", ["bronze", "", None, "diamond", "silverish"])
def test_unknown_tiers_fall_back_to_silver(tier):
    assert PaletteTier.resolve(tier) is PaletteTier.SILVER
    assert get_palette(tier) is PALETTES[PaletteTier.SILVER]


def test_every_tier_has_complete_palette():
    assert set(PALETTES) == set(PaletteTier)
    for palette in PALETTES.values():
        assert isinstance(palette, Palette)
        assert len(palette.background) == 4
        assert len(palette.face) == 3
        assert len(palette.hair) == 5
        assert len(palette.accessories) == 3
        assert all(color.startswith("#") and len(color) == 7 for color in palette.colors)
