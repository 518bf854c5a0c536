from __future__ import annotations

import plotly.express as px
import pytest

from cluster_views.core.palette import CustomPalette, NamedScheme, resolve_palette


def test_default_palette_is_category10():
    mapper = resolve_palette()

    assert mapper.colors == tuple(px.colors.qualitative.D3)
    assert len(mapper.colors) == 10
    assert mapper(0) == px.colors.qualitative.D3[0]


def test_same_index_same_color_and_wraps_around():
    mapper = resolve_palette(NamedScheme("Set1"))
    n = len(mapper.colors)

    assert mapper(3) == mapper(3)
    assert mapper(n) == mapper(0)
    assert mapper(n + 2) == mapper(2)


def test_scheme_name_string_and_custom_list():
    assert resolve_palette("Dark2").colors == tuple(px.colors.qualitative.Dark2)

    mapper = resolve_palette(["red", "blue"])
    assert mapper(0) == "red"
    assert mapper(1) == "blue"
    assert mapper(2) == "red"


def test_for_record_reads_cluster_field():
    mapper = resolve_palette(CustomPalette(["#111111", "#222222", "#333333"]))

    assert mapper.for_record({"cluster": "2", "a": 1.0}) == "#333333"


def test_unknown_scheme_raises():
    with pytest.raises(ValueError, match="Unknown color scheme"):
        resolve_palette(NamedScheme("NotAScheme"))


def test_empty_custom_palette_raises():
    with pytest.raises(ValueError):
        resolve_palette(CustomPalette([]))
