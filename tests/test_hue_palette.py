"""Tests for single-hue gradient palettes."""

import string

import numpy as np
import pytest
from colorspace.colorlib import hexcols
from matplotlib.colors import is_color_like

from huepal import HuePalette, InvalidArgument, hue_pal


def _luminance(colors):
    cols = hexcols(list(colors))
    cols.to("HCL")
    return np.asarray(cols.get("L"))


@pytest.mark.parametrize("hue", [10, 120, 260])
@pytest.mark.parametrize("n", [1, 3, 9])
def test_returns_n_distinct_valid_colours(hue, n):
    pal = hue_pal(hue=hue, n=n)
    assert isinstance(pal, list)
    assert len(pal) == n
    assert all(is_color_like(c) for c in pal)
    assert len(set(pal)) == n


def test_trims_first_and_last_of_full_range():
    gen = HuePalette()
    full = gen.full_range(200, 9)
    assert gen(200, n=7) == full[1:-1]


def test_luminance_increases_along_palette():
    gen = HuePalette(max_chroma=60)
    lum = _luminance(gen.full_range(30, 9))
    assert np.all(np.diff(lum) > 0)
    assert np.all(np.diff(_luminance(gen(30, n=7))) > 0)


def test_repeated_calls_are_identical():
    assert hue_pal(hue=75, n=6) == hue_pal(hue=75, n=6)


def test_named_matches_unnamed():
    names = list(string.ascii_lowercase[:9])
    named = hue_pal(hue=120, names=names)
    assert list(named) == names
    assert list(named.values()) == hue_pal(hue=120, n=9)


def test_names_deduplicated_in_order():
    named = hue_pal(hue=120, names=["b", "a", "b", "c"])
    assert list(named) == ["b", "a", "c"]
    assert list(named.values()) == hue_pal(hue=120, n=3)


def test_names_converted_to_str():
    named = hue_pal(hue=10, names=[3, 1, 2])
    assert list(named) == ["3", "1", "2"]


def test_more_names_than_shades_repeats_last():
    names = list(string.ascii_lowercase[:16])
    pal = hue_pal(hue=120, names=names, n=9)
    values = list(pal.values())
    assert len(pal) == 16
    assert values[:9] == hue_pal(hue=120, n=9)
    assert all(v == values[8] for v in values[9:])


def test_n_capped_by_names():
    pal = hue_pal(hue=120, names=["x", "y"], n=9)
    assert list(pal.values()) == hue_pal(hue=120, n=2)


def test_requires_names_or_n():
    with pytest.raises(InvalidArgument):
        hue_pal(hue=120)
    with pytest.raises(InvalidArgument):
        HuePalette()(120)


def test_zero_shades_rejected():
    with pytest.raises(InvalidArgument):
        hue_pal(hue=120, n=0)


def test_factory_without_hue_returns_configured_generator():
    make = hue_pal(min_lum=20, max_lum=90)
    assert isinstance(make, HuePalette)
    assert make.min_lum == 20 and make.max_lum == 90
    assert make(240, n=4) == hue_pal(hue=240, n=4, min_lum=20, max_lum=90)


def test_styling_changes_output():
    assert hue_pal(hue=240, n=4) != hue_pal(hue=240, n=4, max_lum=80)
