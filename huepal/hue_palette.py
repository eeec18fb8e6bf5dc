"""Single-hue sequential palettes with trimmed luminance extremes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from colorspace import sequential_hcl

from .constants import (
    DEFAULT_MAX_CHROMA,
    DEFAULT_MAX_LUM,
    DEFAULT_MIN_CHROMA,
    DEFAULT_MIN_LUM,
    DEFAULT_POWER,
)
from .errors import InvalidArgument
from .utils import rep_last, unique_in_order

logger = logging.getLogger(__name__)

Palette = Union[List[str], Dict[str, str]]


@dataclass(frozen=True)
class HuePalette:
    """
    Configured single-hue palette generator.

    Styling is bound once; the instance is then called with a hue and names
    and/or a count. Luminance increases monotonically along the palette while
    chroma follows the power curve between `min_chroma` and `max_chroma`.
    The darkest and lightest colours of the underlying gradient are always cut
    off, as they are too dark/light to be told apart across different hues.
    """

    min_chroma: float = DEFAULT_MIN_CHROMA
    max_chroma: float = DEFAULT_MAX_CHROMA
    min_lum: float = DEFAULT_MIN_LUM
    max_lum: float = DEFAULT_MAX_LUM
    power: float = DEFAULT_POWER

    def full_range(self, hue: float, n: int) -> List[str]:
        """Untrimmed gradient of `n` hex colours at `hue`."""
        pal = sequential_hcl(
            h=hue,
            c=[self.min_chroma, self.max_chroma],
            l=[self.min_lum, self.max_lum],
            power=self.power,
        )
        return list(pal.colors(n))

    def __call__(
        self,
        hue: float,
        names: Optional[Iterable] = None,
        n: Optional[int] = None,
    ) -> Palette:
        """
        Build the palette for one hue.

        Parameters
        ----------
        hue : float
            Hue angle in degrees.
        names : iterable, optional
            Labels for the palette. Converted to str and deduplicated in order of
            first occurrence.
        n : int, optional
            Number of distinct shades. Capped at the number of unique names; if
            there are more names than shades the last shade is repeated.

        Returns
        -------
        list[str] or dict[str, str]
            Hex colours, or a name -> colour mapping when `names` is given.
        """
        if names is None and n is None:
            raise InvalidArgument("`names` and/or `n` must be provided to build a hue palette")
        if names is not None:
            names = unique_in_order(str(name) for name in names)
            if n is None or len(names) < n:
                n = len(names)
        if n < 1:
            raise InvalidArgument(f"Cannot build a hue palette with n={n} shades")

        logger.debug("hue palette: hue=%s n=%d names=%s", hue, n, None if names is None else len(names))
        # two extra colours, then trim the very dark and almost white ends
        trimmed = self.full_range(hue, n + 2)[1 : n + 1]

        if names is None:
            return trimmed
        if len(names) > n:
            trimmed = rep_last(trimmed, len(names))
        return dict(zip(names, trimmed))


def hue_pal(
    hue: Optional[float] = None,
    names: Optional[Iterable] = None,
    n: Optional[int] = None,
    min_chroma: float = DEFAULT_MIN_CHROMA,
    max_chroma: float = DEFAULT_MAX_CHROMA,
    min_lum: float = DEFAULT_MIN_LUM,
    max_lum: float = DEFAULT_MAX_LUM,
    power: float = DEFAULT_POWER,
) -> Union[HuePalette, Palette]:
    """
    Create a (named) single-hue gradient palette.

    If `hue` is None the configured generator is returned instead, to be called
    later as ``pal(hue, names=..., n=...)``.

    Examples
    --------
    >>> hue_pal(hue=120, n=9)                      # 9 hex colours
    >>> hue_pal(hue=120, names=list("abcdefghi"))  # same colours, named
    >>> make = hue_pal(max_lum=90)
    >>> make(240, names=["x", "y"])
    """
    generator = HuePalette(
        min_chroma=min_chroma,
        max_chroma=max_chroma,
        min_lum=min_lum,
        max_lum=max_lum,
        power=power,
    )
    if hue is None:
        return generator
    return generator(hue, names=names, n=n)
