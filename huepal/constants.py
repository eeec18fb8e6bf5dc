"""Shared defaults for palette styling and hue allocation."""

from typing import Dict

# Styling of single-hue gradients (HCL space).
DEFAULT_MIN_CHROMA: float = 40
DEFAULT_MAX_CHROMA: float = 150
DEFAULT_MIN_LUM: float = 10
DEFAULT_MAX_LUM: float = 98
DEFAULT_POWER: float = 0.8

# Cap on distinct shades per group before the last colour is repeated.
DEFAULT_MAX_SHADES: int = 5

# Built-in hue set: evenly spaced around the wheel, starting at DEFAULT_HUE_START.
DEFAULT_HUE_COUNT: int = 12
DEFAULT_HUE_START: float = 15

NEUTRAL_GREY = "lightgrey"
OTHER_LABEL = "Other"

# Manual additions/replacements applied after every group palette; extend as needed.
DEFAULT_MANUAL: Dict[str, str] = {
    OTHER_LABEL: NEUTRAL_GREY,
}

__all__ = [
    "DEFAULT_MIN_CHROMA",
    "DEFAULT_MAX_CHROMA",
    "DEFAULT_MIN_LUM",
    "DEFAULT_MAX_LUM",
    "DEFAULT_POWER",
    "DEFAULT_MAX_SHADES",
    "DEFAULT_HUE_COUNT",
    "DEFAULT_HUE_START",
    "NEUTRAL_GREY",
    "OTHER_LABEL",
    "DEFAULT_MANUAL",
]
