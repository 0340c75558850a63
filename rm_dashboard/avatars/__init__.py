from .generator import (
    AvatarDescriptor,
    describe_avatar,
    generate_avatar,
    generate_client_avatars,
    render_avatar,
    svg_to_data_url,
)
from .palettes import PALETTES, Palette, PaletteTier, get_palette
from .seeded import seeded_hash, seeded_index, seeded_item

__all__ = [
    "AvatarDescriptor",
    "describe_avatar",
    "generate_avatar",
    "generate_client_avatars",
    "render_avatar",
    "svg_to_data_url",
    "PALETTES",
    "Palette",
    "PaletteTier",
    "get_palette",
    "seeded_hash",
    "seeded_index",
    "seeded_item",
]
