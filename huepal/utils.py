from __future__ import annotations

from typing import Any, Hashable, Iterable, List, Mapping, Optional, Sequence, Union

import matplotlib.colors as mcolors
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.patches import Rectangle

from .constants import DEFAULT_HUE_COUNT, DEFAULT_HUE_START
from .errors import InvalidArgument


def unique_in_order(values: Iterable[Hashable]) -> List[Hashable]:
    """Distinct values of `values`, in order of first occurrence."""
    return list(dict.fromkeys(values))


def rep_last(x: Sequence[Any], length_out: int) -> List[Any]:
    """
    Extend a sequence to `length_out` items by repeating its last value.

    Sequences already at least `length_out` long are returned unchanged (as a list).
    """
    x = list(x)
    if not x:
        raise InvalidArgument("Cannot repeat the last value of an empty sequence")
    return x + [x[-1]] * max(length_out - len(x), 0)


def merge_after_n(x: Union[pd.Series, Iterable[Any]], n: int, other: Any = "other"):
    """
    Merge every value of `x` after its first `n` unique values into `other`.

    Parameters
    ----------
    x : pandas.Series or iterable
        Values to collapse. Categorical Series gain `other` as a category.
    n : int
        Number of unique values (in order of first appearance) to keep.
    other : scalar
        Replacement for all remaining values.

    Returns
    -------
    pandas.Series or list
        Same container kind as the input: a Series keeps its index, anything
        else comes back as a list.
    """
    if n < 0:
        raise InvalidArgument(f"n must be >= 0, got {n}")
    is_series = isinstance(x, pd.Series)
    values = x if is_series else pd.Series(list(x), dtype=object)
    if isinstance(values.dtype, pd.CategoricalDtype) and other not in values.cat.categories:
        values = values.cat.add_categories([other])

    keepers = list(pd.unique(values))[:n]
    merged = values.where(values.isin(keepers), other)
    return merged if is_series else merged.tolist()


def hue_set(
    n: int = DEFAULT_HUE_COUNT,
    start: float = DEFAULT_HUE_START,
    spread: float = 360,
    interleave: bool = True,
) -> List[float]:
    """
    Ordered set of `n` evenly spaced hue angles.

    Hues start at `start` and step by `spread / n` degrees (wrapped to [0, 360)).
    With `interleave`, even positions come first and odd positions after, so that
    consecutive groups receive contrasting hues rather than wheel neighbours.
    """
    if n < 1:
        raise InvalidArgument(f"n must be >= 1, got {n}")
    hues = (start + np.arange(n) * spread / n) % 360
    if interleave:
        hues = np.concatenate([hues[0::2], hues[1::2]])
    return [float(h) for h in hues]


def show_palette(
    palette: Union[Mapping[Any, str], Sequence[str]],
    ax: Optional[plt.Axes] = None,
    ncol: Optional[int] = None,
    labels: bool = True,
    title: Optional[str] = None,
    show: bool = True,
):
    """Draw a palette as a grid of labelled swatches and return the Axes."""

    if isinstance(palette, Mapping):
        names = [str(k) for k in palette.keys()]
        colors = list(palette.values())
    else:
        colors = list(palette)
        names = [str(c) for c in colors]
    if not colors:
        raise InvalidArgument("Cannot show an empty palette")

    n = len(colors)
    ncol = ncol or int(np.ceil(np.sqrt(n)))
    nrow = int(np.ceil(n / ncol))
    if ax is None:
        _, ax = plt.subplots(figsize=(1.2 * ncol, 1.2 * nrow))

    for i, (name, color) in enumerate(zip(names, colors)):
        row, col = divmod(i, ncol)
        y = nrow - row - 1
        ax.add_patch(Rectangle((col, y), 1, 1, facecolor=color, edgecolor="white", linewidth=1.5))
        if labels:
            r, g, b = mcolors.to_rgb(color)
            # dark text on light swatches
            text_color = "black" if 0.299 * r + 0.587 * g + 0.114 * b > 0.5 else "white"
            ax.text(col + 0.5, y + 0.5, name, ha="center", va="center", fontsize=8, color=text_color)

    ax.set_xlim(0, ncol)
    ax.set_ylim(0, nrow)
    ax.set_aspect("equal")
    ax.axis("off")
    if title:
        ax.set_title(title)
    if show:
        plt.tight_layout()
        plt.show()
    return ax
