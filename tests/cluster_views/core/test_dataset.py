from __future__ import annotations

import pandas as pd

from cluster_views.core.context import ClusterContext
from cluster_views.core.dataset import Dataset
from cluster_views.core.view_registry import ViewRegistry
from cluster_views.views import ScatterView


def test_fields_are_first_seen_order():
    ds = Dataset([{"b": 1, "a": 2}, {"a": 3, "c": 4, "b": 5}])

    assert ds.fields == ["b", "a", "c"]
    assert ds.has_field("c")
    assert not ds.has_field("d")


def test_frame_roundtrip_keeps_rows_in_order():
    df = pd.DataFrame({"x": [1.0, 2.0, 3.0], "label": ["u", "v", "w"]})
    ds = Dataset.from_frame(df, name="frame")

    assert len(ds) == 3
    assert ds[1] == {"x": 2.0, "label": "v"}
    assert ds.to_frame().equals(df)


def test_copy_does_not_share_rows():
    ds = Dataset([{"x": 1}])
    clone = ds.copy()
    clone[0]["x"] = 99

    assert ds[0]["x"] == 1


def test_context_gives_every_view_a_partition_entry():
    registry = ViewRegistry()
    registry.register(ScatterView("s1"))
    registry.register(ScatterView("s2"))

    ctx = ClusterContext(dataset=Dataset([]), partition={"s1": ["x"]}, views=registry)
    assert ctx.partition == {"s1": ["x"], "s2": []}

    ctx.hide_field("cluster")
    ctx.hide_field("cluster")
    assert ctx.partition == {"s1": ["x", "cluster"], "s2": ["cluster"]}
