from .constants import DEFAULT_MANUAL, DEFAULT_MAX_SHADES, NEUTRAL_GREY, OTHER_LABEL
from .errors import HuePalError, InvalidArgument, MissingColumn, InsufficientHues, NameCollisionWarning
from .hue_palette import HuePalette, hue_pal
from .group_palette import GroupPalette, hue_group_pal
from .utils import (
    unique_in_order,
    rep_last,
    merge_after_n,
    hue_set,
    show_palette,
)

__all__ = [
    "DEFAULT_MANUAL",
    "DEFAULT_MAX_SHADES",
    "NEUTRAL_GREY",
    "OTHER_LABEL",
    "HuePalError",
    "InvalidArgument",
    "MissingColumn",
    "InsufficientHues",
    "NameCollisionWarning",
    "HuePalette",
    "hue_pal",
    "GroupPalette",
    "hue_group_pal",
    "unique_in_order",
    "rep_last",
    "merge_after_n",
    "hue_set",
    "show_palette",
]
