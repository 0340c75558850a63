# rm_dashboard/avatars/generator.py
"""
Client avatar generation.

An avatar is a pure function of the client's name and tier: the name seeds
every style and color choice, the tier picks the palette. Nothing is stored;
the same inputs always produce byte-identical SVG.

QuickStart:
    >>> svg = generate_avatar("Rahul Sharma", "platinum")
    >>> url = svg_to_data_url(svg)
"""

import base64 as _b64
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Union
from urllib.parse import quote

import pandas as pd

from .palettes import PaletteTier, get_palette
from .seeded import seeded_item
from .styles import (
    ACCESSORIES,
    EYES,
    FACE_SHAPES,
    HAIR_STYLES,
    MOUTHS,
    NOSES,
    find_style,
)

logger = logging.getLogger(__name__)

EYE_COLOR = "#111827"
NOSE_COLOR = "#6B7280"
MOUTH_COLOR = "#4B5563"

CANVAS_SIZE = 100

# Characters encodeURIComponent leaves untouched (besides alphanumerics)
_URI_SAFE = "-_.!~*'()"

NAME_COLUMNS = ("fullName", "full_name", "name")


@dataclass(frozen=True)
class AvatarDescriptor:
    """The seeded choices that make up one avatar."""

    tier: PaletteTier
    background_color: str
    face_color: str
    hair_color: str
    accessory_color: str
    hair_style: str
    face_shape: str
    accessory: str
    eyes: str
    nose: str
    mouth: str


def describe_avatar(name: str, tier: str = "silver", gender: str = "neutral") -> AvatarDescriptor:
    """
    Work out every style and color choice for ``name``.

    Args:
        name: Seed for all choices; empty names are allowed.
        tier: silver / gold / platinum, case-insensitive, anything else is silver.
        gender: Accepted for interface compatibility; it does not affect the result.
    """
    resolved = PaletteTier.resolve(tier)
    palette = get_palette(resolved)
    seed = name or ""

    return AvatarDescriptor(
        tier=resolved,
        background_color=seeded_item(palette.background, seed, 1),
        face_color=seeded_item(palette.face, seed, 2),
        hair_color=seeded_item(palette.hair, seed, 3),
        accessory_color=seeded_item(palette.accessories, seed, 4),
        hair_style=seeded_item(HAIR_STYLES, seed, 5).name,
        face_shape=seeded_item(FACE_SHAPES, seed, 6).name,
        accessory=seeded_item(ACCESSORIES, seed, 7).name,
        eyes=seeded_item(EYES, seed, 8).name,
        nose=seeded_item(NOSES, seed, 9).name,
        mouth=seeded_item(MOUTHS, seed, 10).name,
    )


def render_avatar(descriptor: AvatarDescriptor) -> str:
    """Compose the SVG document for an already computed descriptor."""
    layers = [
        ("Background", f'<circle cx="50" cy="50" r="50" fill="{descriptor.background_color}" />'),
        ("Face", find_style(FACE_SHAPES, descriptor.face_shape).render(descriptor.face_color)),
        ("Hair", find_style(HAIR_STYLES, descriptor.hair_style).render(descriptor.hair_color)),
        ("Eyes", find_style(EYES, descriptor.eyes).render(EYE_COLOR)),
        ("Nose", find_style(NOSES, descriptor.nose).render(NOSE_COLOR)),
        ("Mouth", find_style(MOUTHS, descriptor.mouth).render(MOUTH_COLOR)),
        ("Accessories", find_style(ACCESSORIES, descriptor.accessory).render(descriptor.accessory_color)),
    ]

    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {CANVAS_SIZE} {CANVAS_SIZE}" '
        f'width="{CANVAS_SIZE}" height="{CANVAS_SIZE}">'
    ]
    for label, fragment in layers:
        lines.append(f"  <!-- {label} -->")
        lines.extend(f"  {line}" for line in fragment.splitlines())
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def generate_avatar(name: str, tier: str = "silver", gender: str = "neutral") -> str:
    """Return SVG markup for the client's avatar."""
    descriptor = describe_avatar(name, tier, gender)
    logger.debug(f"Avatar for {name!r}: {descriptor}")
    return render_avatar(descriptor)


def svg_to_data_url(svg: str, base64: bool = False) -> str:
    """
    Wrap SVG markup in a data URL usable as an ``<img src>``.

    Percent-encoded by default (same escaping as JavaScript's
    ``encodeURIComponent``); base64 when ``base64=True``.
    """
    if base64:
        payload = _b64.b64encode(svg.encode("utf-8")).decode("ascii")
        return f"data:image/svg+xml;base64,{payload}"
    return f"data:image/svg+xml;charset=utf-8,{quote(svg, safe=_URI_SAFE)}"


def _client_records(clients: Union[pd.DataFrame, Iterable[Mapping[str, Any]]]) -> Iterable[Mapping[str, Any]]:
    if isinstance(clients, pd.DataFrame):
        return clients.to_dict(orient="records")
    return clients


def _client_name(record: Mapping[str, Any]) -> str:
    for column in NAME_COLUMNS:
        value = record.get(column)
        if value is not None and not pd.isna(value):
            return str(value)
    return ""


def _client_tier(record: Mapping[str, Any]) -> str:
    value = record.get("tier")
    if value is None or pd.isna(value):
        return PaletteTier.SILVER.value
    return str(value)


def generate_client_avatars(clients: Union[pd.DataFrame, Iterable[Mapping[str, Any]]]) -> Dict[Any, str]:
    """
    Build a ``{client id: data URL}`` map for a batch of clients.

    Args:
        clients: A DataFrame or an iterable of mappings, each with an ``id``,
                 a name (``fullName``, ``full_name`` or ``name``) and an optional
                 ``tier``.

    Returns:
        Mapping of client id to a percent-encoded SVG data URL. Later records
        with a repeated id overwrite earlier ones.

    Raises:
        ValueError: If a record has no ``id``.
    """
    avatar_map: Dict[Any, str] = {}
    for record in _client_records(clients):
        if "id" not in record:
            raise ValueError(f"Client record has no 'id': {dict(record)}")
        svg = generate_avatar(_client_name(record), _client_tier(record))
        avatar_map[record["id"]] = svg_to_data_url(svg)

    logger.info(f"Generated avatars for {len(avatar_map)} clients")
    return avatar_map
