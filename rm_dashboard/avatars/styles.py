# rm_dashboard/avatars/styles.py
"""
SVG fragment renderers for each avatar feature.

Every feature is an ordered tuple of named renderers; the seeded selector picks
one by index, so the order of each tuple is part of the avatar's identity and
must not change.
"""

from typing import Callable, NamedTuple, Tuple


class StyleRenderer(NamedTuple):
    name: str
    render: Callable[[str], str]


def _join(*elements: str) -> str:
    return "\n".join(elements)


# --- Hair ---


def short_hair(color: str) -> str:
    return f'<path d="M20,25 C20,20 25,10 50,10 C75,10 80,20 80,25" fill="{color}" />'


def medium_hair(color: str) -> str:
    return _join(
        f'<path d="M15,60 C15,40 20,10 50,10 C80,10 85,40 85,60" fill="{color}" />',
        f'<rect x="15" y="40" width="70" height="30" fill="{color}" />',
    )


def long_hair(color: str) -> str:
    return _join(
        f'<path d="M10,80 C10,40 20,10 50,10 C80,10 90,40 90,80" fill="{color}" />',
        f'<rect x="10" y="40" width="80" height="60" fill="{color}" />',
    )


def curly_hair(color: str) -> str:
    curls = [(20, 30), (30, 20), (40, 15), (60, 15), (70, 20), (80, 30)]
    return _join(
        f'<path d="M15,40 C15,20 25,10 50,10 C75,10 85,20 85,40" fill="{color}" />',
        *(f'<circle cx="{cx}" cy="{cy}" r="10" fill="{color}" />' for cx, cy in curls),
    )


def bald(color: str) -> str:
    return f'<path d="M30,25 C30,15 40,12 50,12 C60,12 70,15 70,25" fill="{color}" />'


def side_parted_hair(color: str) -> str:
    return _join(
        f'<path d="M20,25 C20,15 30,10 50,10 C70,10 80,15 80,25" fill="{color}" />',
        f'<path d="M35,10 C35,25 35,40 35,60" stroke="{color}" stroke-width="2" />',
    )


HAIR_STYLES: Tuple[StyleRenderer, ...] = (
    StyleRenderer("short", short_hair),
    StyleRenderer("medium", medium_hair),
    StyleRenderer("long", long_hair),
    StyleRenderer("curly", curly_hair),
    StyleRenderer("bald", bald),
    StyleRenderer("side_parted", side_parted_hair),
)


# --- Face ---


def oval_face(color: str) -> str:
    return f'<ellipse cx="50" cy="50" rx="30" ry="40" fill="{color}" />'


def round_face(color: str) -> str:
    return f'<circle cx="50" cy="50" r="35" fill="{color}" />'


def square_face(color: str) -> str:
    return f'<rect x="20" y="20" width="60" height="60" rx="10" fill="{color}" />'


def heart_face(color: str) -> str:
    return _join(
        f'<path d="M50,20 C70,20 85,35 85,50 C85,65 70,80 50,80 '
        f'C30,80 15,65 15,50 C15,35 30,20 50,20 Z" fill="{color}" />',
        f'<path d="M30,25 L70,25 L50,85 Z" fill="{color}" />',
    )


FACE_SHAPES: Tuple[StyleRenderer, ...] = (
    StyleRenderer("oval", oval_face),
    StyleRenderer("round", round_face),
    StyleRenderer("square", square_face),
    StyleRenderer("heart", heart_face),
)


# --- Accessories ---


def glasses(color: str) -> str:
    return _join(
        f'<circle cx="35" cy="45" r="10" fill="none" stroke="{color}" stroke-width="2" />',
        f'<circle cx="65" cy="45" r="10" fill="none" stroke="{color}" stroke-width="2" />',
        f'<path d="M45,45 L55,45" stroke="{color}" stroke-width="2" />',
    )


def sunglasses(color: str) -> str:
    return _join(
        f'<rect x="25" y="40" width="20" height="10" rx="3" fill="{color}" />',
        f'<rect x="55" y="40" width="20" height="10" rx="3" fill="{color}" />',
        f'<path d="M45,45 L55,45" stroke="{color}" stroke-width="2" />',
    )


def earrings(color: str) -> str:
    return _join(
        f'<circle cx="20" cy="55" r="3" fill="{color}" />',
        f'<circle cx="80" cy="55" r="3" fill="{color}" />',
    )


def necklace(color: str) -> str:
    return _join(
        f'<path d="M35,85 C45,95 55,95 65,85" stroke="{color}" stroke-width="2" fill="none" />',
        f'<circle cx="50" cy="90" r="3" fill="{color}" />',
    )


def no_accessory(color: str) -> str:
    return ""


ACCESSORIES: Tuple[StyleRenderer, ...] = (
    StyleRenderer("glasses", glasses),
    StyleRenderer("sunglasses", sunglasses),
    StyleRenderer("earrings", earrings),
    StyleRenderer("necklace", necklace),
    StyleRenderer("none", no_accessory),
)


# --- Eyes ---


def normal_eyes(color: str) -> str:
    return _join(
        f'<ellipse cx="35" cy="45" rx="5" ry="3" fill="{color}" />',
        f'<ellipse cx="65" cy="45" rx="5" ry="3" fill="{color}" />',
    )


def round_eyes(color: str) -> str:
    return _join(
        f'<circle cx="35" cy="45" r="4" fill="{color}" />',
        f'<circle cx="65" cy="45" r="4" fill="{color}" />',
    )


def almond_eyes(color: str) -> str:
    return _join(
        f'<ellipse cx="35" cy="45" rx="6" ry="3" transform="rotate(-10 35 45)" fill="{color}" />',
        f'<ellipse cx="65" cy="45" rx="6" ry="3" transform="rotate(10 65 45)" fill="{color}" />',
    )


def sleepy_eyes(color: str) -> str:
    return _join(
        f'<ellipse cx="35" cy="45" rx="5" ry="2" fill="{color}" />',
        f'<ellipse cx="65" cy="45" rx="5" ry="2" fill="{color}" />',
    )


EYES: Tuple[StyleRenderer, ...] = (
    StyleRenderer("normal", normal_eyes),
    StyleRenderer("round", round_eyes),
    StyleRenderer("almond", almond_eyes),
    StyleRenderer("sleepy", sleepy_eyes),
)


# --- Nose ---


def line_nose(color: str) -> str:
    return f'<path d="M50,50 L50,60" stroke="{color}" stroke-width="2" />'


def button_nose(color: str) -> str:
    return f'<circle cx="50" cy="55" r="3" fill="{color}" />'


def bridge_nose(color: str) -> str:
    return (
        f'<path d="M45,45 C45,55 50,60 50,60 C50,60 55,55 55,45" '
        f'stroke="{color}" stroke-width="1.5" fill="none" />'
    )


def sharp_nose(color: str) -> str:
    return f'<path d="M50,45 L53,60 L50,58 L47,60 Z" fill="{color}" />'


NOSES: Tuple[StyleRenderer, ...] = (
    StyleRenderer("line", line_nose),
    StyleRenderer("button", button_nose),
    StyleRenderer("bridge", bridge_nose),
    StyleRenderer("sharp", sharp_nose),
)


# --- Mouth ---


def smile(color: str) -> str:
    return f'<path d="M40,65 C45,70 55,70 60,65" stroke="{color}" stroke-width="2" fill="none" />'


def neutral_mouth(color: str) -> str:
    return f'<path d="M40,65 L60,65" stroke="{color}" stroke-width="2" />'


def slight_smile(color: str) -> str:
    return f'<path d="M40,65 C45,68 55,68 60,65" stroke="{color}" stroke-width="2" fill="none" />'


def open_smile(color: str) -> str:
    return _join(
        f'<path d="M40,65 C45,72 55,72 60,65" stroke="{color}" stroke-width="2" fill="none" />',
        f'<path d="M43,65 C48,70 52,70 57,65" fill="{color}" />',
    )


MOUTHS: Tuple[StyleRenderer, ...] = (
    StyleRenderer("smile", smile),
    StyleRenderer("neutral", neutral_mouth),
    StyleRenderer("slight_smile", slight_smile),
    StyleRenderer("open_smile", open_smile),
)


def find_style(styles: Tuple[StyleRenderer, ...], name: str) -> StyleRenderer:
    for style in styles:
        if style.name == name:
            return style
    raise KeyError(f"Unknown style {name!r}; expected one of {[s.name for s in styles]}")
