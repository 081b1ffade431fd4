"""Colour and shape hints shipped with the dashboard payload"""

from typing import Dict, List, Tuple

# d3 schemeSet2
SET2_COLORS: List[str] = [
    "#66c2a5", "#fc8d62", "#8da0cb", "#e78ac3",
    "#a6d854", "#ffd92f", "#e5c494", "#b3b3b3",
]

HEAT_RANGE_LIGHT: Tuple[str, str] = ("#e0f2fe", "#083361")
HEAT_RANGE_DARK: Tuple[str, str] = ("#1e3a8a", "#f97316")

NODE_COLORS: Dict[str, str] = {
    "experiment": "#f97316",
    "organism": "#3b82f6",
    "result": "#10b981",
    "condition": "#a855f7",
}
NODE_COLOR_DEFAULT_LIGHT = "#9ca3af"
NODE_COLOR_DEFAULT_DARK = "#8892b0"

NODE_SYMBOLS: Dict[str, str] = {
    "experiment": "square",
    "organism": "circle",
    "result": "diamond",
    "condition": "wye",
}

DARK_TEXT = "#0a192f"
LIGHT_TEXT = "#ffffff"


def series_color(index: int) -> str:
    return SET2_COLORS[index % len(SET2_COLORS)]


def node_color(node_type: str, dark: bool = False) -> str:
    default = NODE_COLOR_DEFAULT_DARK if dark else NODE_COLOR_DEFAULT_LIGHT
    return NODE_COLORS.get((node_type or "").lower(), default)


def node_symbol(node_type: str) -> str:
    return NODE_SYMBOLS.get((node_type or "").lower(), "circle")


def _hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    return int(hex_color[1:3], 16), int(hex_color[3:5], 16), int(hex_color[5:7], 16)


def heat_color(count: int, max_count: int, dark: bool = False) -> str:
    """Linear interpolation of ``count`` over [0, max_count] between the heat endpoints"""
    low, high = HEAT_RANGE_DARK if dark else HEAT_RANGE_LIGHT
    ratio = 0.0 if max_count <= 0 else min(max(count / max_count, 0.0), 1.0)
    start, end = _hex_to_rgb(low), _hex_to_rgb(high)
    mixed = [round(a + (b - a) * ratio) for a, b in zip(start, end)]
    return "#{:02x}{:02x}{:02x}".format(*mixed)


def contrasting_text_color(hex_color: str) -> str:
    """Dark text for light backgrounds and vice versa (YIQ brightness)"""
    if not hex_color or len(hex_color) < 7:
        return LIGHT_TEXT
    r, g, b = _hex_to_rgb(hex_color)
    yiq = (r * 299 + g * 587 + b * 114) / 1000
    return DARK_TEXT if yiq >= 128 else LIGHT_TEXT
