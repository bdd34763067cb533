"""Word colours: a light extended palette and a spread-out word→colour map."""

from __future__ import annotations

import math
import re

EXTENDED_PALETTE: list[str] = [
    # Yellows / oranges
    "#FFF59D", "#FFE082", "#FFCC80", "#FFB74D", "#FFA726", "#FF9800",
    # Reds / pinks
    "#FFCDD2", "#EF9A9A", "#E57373", "#F06292", "#EC407A", "#E91E63",
    # Purples
    "#E1BEE7", "#CE93D8", "#BA68C8", "#AB47BC", "#9C27B0",
    # Blues
    "#BBDEFB", "#90CAF9", "#64B5F6", "#42A5F5", "#2196F3",
    # Cyans / teals
    "#B2EBF2", "#80DEEA", "#4DD0E1", "#26C6DA", "#00BCD4", "#26A69A",
    # Greens
    "#C8E6C9", "#A5D6A7", "#81C784", "#66BB6A", "#4CAF50",
    # Limes
    "#E6EE9C", "#DCE775", "#D4E157", "#CDDC39",
    # Browns / neutrals
    "#D7CCC8", "#BCAAA4", "#A1887F", "#BDBDBD", "#9E9E9E",
]

_PREFERRED_STEPS = (7, 5, 11, 13, 17, 3, 19, 23)
_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def color_map_for_words(
    words: list[str], palette: list[str] | None = None
) -> dict[str, str]:
    """Assign each word a palette colour, jumping through the palette.

    The jump is co-prime with the palette length, so neighbouring words get
    distant hues and the whole palette is used before any colour repeats.
    """
    if palette is None:
        palette = EXTENDED_PALETTE
    colors: dict[str, str] = {}
    if not words or not palette:
        return colors

    stride = _palette_stride(len(palette))
    idx = 0
    for word in words:
        colors[word] = palette[idx]
        idx = (idx + stride) % len(palette)
    return colors


def _palette_stride(n: int) -> int:
    for s in _PREFERRED_STEPS:
        if s < n and math.gcd(s, n) == 1:
            return s
    return 2 if n > 2 else 1


def lighten_color(hex_color: str, factor: float = 0.5) -> str:
    """Mix *hex_color* towards white by *factor* (0 = unchanged, 1 = white)."""
    channels = _parse_hex(hex_color)
    mixed = [round(255 * factor + c * (1 - factor)) for c in channels]
    return "#" + "".join(f"{c:02x}" for c in mixed)


def hex_to_rgb(hex_color: str) -> tuple[float, float, float]:
    """(r, g, b) in 0..1, for ReportLab's ``setFillColorRGB``."""
    r, g, b = _parse_hex(hex_color)
    return r / 255, g / 255, b / 255


def _parse_hex(hex_color: str) -> list[int]:
    match = _HEX_RE.match(hex_color.strip())
    if not match:
        raise ValueError(f"Not a hex colour: {hex_color!r}")
    h = match.group(1)
    if len(h) == 3:
        h = "".join(ch * 2 for ch in h)
    return [int(h[i:i + 2], 16) for i in (0, 2, 4)]
