"""Two-level palettes: one hue per group, one shade per sub-category."""

from __future__ import annotations

import logging
import warnings
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence, Union

import pandas as pd

from .constants import DEFAULT_MANUAL, DEFAULT_MAX_SHADES
from .errors import InsufficientHues, InvalidArgument, MissingColumn, NameCollisionWarning
from .hue_palette import HuePalette
from .utils import hue_set, merge_after_n

logger = logging.getLogger(__name__)

GroupSpec = Union[str, Mapping]


@dataclass
class GroupPalette(Mapping):
    """
    Flat shade-name -> colour palette plus the diagnostics raised building it.

    Behaves as a read-only mapping over `palette`, so it can be handed straight
    to a plotting layer as a manual categorical colour scale.
    """

    palette: Dict[str, str]
    hues: Dict[Hashable, float] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    @property
    def has_collisions(self) -> bool:
        return bool(self.warnings)

    def __getitem__(self, name: str) -> str:
        return self.palette[name]

    def __iter__(self):
        return iter(self.palette)

    def __len__(self) -> int:
        return len(self.palette)


def _resolve_group(group: GroupSpec):
    """Split the group specifier into (column name, explicit hue overrides)."""
    if isinstance(group, Mapping):
        if len(group) != 1:
            raise InvalidArgument(
                "`group` must be either a column name or a mapping of length 1, "
                f"keyed by a column name; got {len(group)} entries"
            )
        column, overrides = next(iter(group.items()))
        return column, dict(overrides or {})
    if isinstance(group, (list, tuple, set)):
        raise InvalidArgument(f"`group` must name a single column, got {list(group)!r}")
    return group, {}


def hue_group_pal(
    df: pd.DataFrame,
    group: GroupSpec,
    shade: str,
    max_shades: int = DEFAULT_MAX_SHADES,
    hues: Optional[Sequence[float]] = None,
    hue_pal_fun: Optional[Callable[..., Dict[str, str]]] = None,
    manual: Optional[Mapping[str, str]] = DEFAULT_MANUAL,
    other_shade_namer: Optional[Callable[[Any], str]] = None,
) -> GroupPalette:
    """
    Make a palette where sub-categories within a group share a hue.

    Groups receive hues in order of first appearance in `df`; within a group,
    shades are assigned in order of first appearance of the `shade` values, so
    sort the frame (e.g. by a priority metric) before calling.

    Parameters
    ----------
    df : pandas.DataFrame
        Data with at least the group and shade columns.
    group : str or mapping
        Column used to assign hues, or ``{column: {group_value: hue, ...}}`` to
        pin the hue of specific group values.
    shade : str
        Column whose values become the palette names.
    max_shades : int
        Maximum number of distinct shades per hue; further names repeat the last.
    hues : sequence of float, optional
        Candidate hues, consumed in order. Defaults to `hue_set()`.
    hue_pal_fun : callable, optional
        ``f(hue, names=..., n=...) -> dict``. Defaults to `HuePalette()`.
    manual : mapping, optional
        Additions or replacements applied last. Pass None or {} to disable.
    other_shade_namer : callable, optional
        If given, shades beyond `max_shades` in a group are merged into a single
        entry named ``other_shade_namer(group_value)``, which gets its own shade.

    Returns
    -------
    GroupPalette
    """
    if not isinstance(df, pd.DataFrame):
        df = pd.DataFrame(df)
    group_col, hue_overrides = _resolve_group(group)

    if group_col not in df.columns:
        raise MissingColumn(group_col)
    if shade not in df.columns:
        raise MissingColumn(shade)

    hues = list(hue_set() if hues is None else hues)
    hue_pal_fun = hue_pal_fun or HuePalette()

    # codes follow first appearance; missing values form their own level
    codes, levels = pd.factorize(df[group_col], sort=False, use_na_sentinel=False)
    levels = list(levels)
    if len(levels) > len(hues):
        raise InsufficientHues(group_col, len(levels), len(hues))

    assigned: Dict[Hashable, float] = dict(zip(levels, hues[: len(levels)]))
    for level, hue in hue_overrides.items():
        if level in assigned:
            assigned[level] = hue
        else:
            logger.debug("hue override for %r ignored: not a value of '%s'", level, group_col)
    logger.debug("hues for '%s': %s", group_col, assigned)

    shades = df[shade].reset_index(drop=True)
    n_shades = max_shades
    if other_shade_namer is not None:
        # room for the merged entry as a shade of its own
        n_shades = max_shades + 1
    palettes = []
    for code, level in enumerate(levels):
        names = shades[codes == code]
        if other_shade_namer is not None:
            names = merge_after_n(names, max_shades, other=other_shade_namer(level))
        palettes.append(hue_pal_fun(assigned[level], names=names.tolist(), n=n_shades))

    palette: Dict[str, str] = {}
    name_counts: Counter = Counter()
    for pal in palettes:
        palette.update(pal)
        name_counts.update(pal.keys())

    messages = []
    duplicated = [name for name, count in name_counts.items() if count > 1]
    if duplicated:
        message = (
            "Invalid named palette created, with duplicated names: "
            f"values of shade variable '{shade}' were duplicated across levels of "
            f"hue group variable '{group_col}': {', '.join(map(str, duplicated))}"
        )
        messages.append(message)
        logger.warning(message)
        warnings.warn(message, NameCollisionWarning, stacklevel=2)

    if manual:
        palette.update(manual)

    return GroupPalette(palette=palette, hues=assigned, warnings=messages)
