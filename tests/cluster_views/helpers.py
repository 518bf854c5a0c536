from __future__ import annotations

from typing import List, Optional

import plotly.graph_objs as go

from cluster_views.core.base_view import BaseChartView
from cluster_views.core.context import ClusterContext
from cluster_views.core.dataset import Dataset
from cluster_views.core.view_registry import ViewRegistry


class RecordingView(BaseChartView):
    """Chart view that records every capability call it receives."""

    kind = "recording"

    def __init__(self, view_id: str, fail_on: Optional[str] = None):
        super().__init__(view_id)
        self.calls: List[str] = []
        self.fail_on = fail_on

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if name == self.fail_on:
            raise RuntimeError(f"{name} exploded")

    def set_data(self, records):
        self._record("set_data")
        return super().set_data(records)

    def render(self, axis_duration=None):
        self._record("render")
        return super().render(axis_duration)

    def create_axes(self):
        self._record("create_axes")
        return super().create_axes()

    def update_axes(self, duration=500):
        # also reached through render(axis_duration=...), so not recorded
        return super().update_axes(duration)

    def hide_axis(self, fields):
        self._record("hide_axis")
        return super().hide_axis(fields)

    def set_color(self, color_fn):
        self._record("set_color")
        return super().set_color(color_fn)

    def render_figure(self) -> go.Figure:
        return go.Figure()


def make_records() -> List[dict]:
    """
    6 rows, 2 numeric fields, two well separated groups:
    rows 0-2 near the origin, rows 3-5 near (10, 10).
    """
    return [
        {"a": 0.0, "b": 0.0, "name": "p0"},
        {"a": 0.0, "b": 1.0, "name": "p1"},
        {"a": 1.0, "b": 0.0, "name": "p2"},
        {"a": 10.0, "b": 10.0, "name": "p3"},
        {"a": 10.0, "b": 11.0, "name": "p4"},
        {"a": 11.0, "b": 10.0, "name": "p5"},
    ]


def make_context(*views: BaseChartView, records: Optional[List[dict]] = None) -> ClusterContext:
    registry = ViewRegistry()
    for view in views:
        registry.register(view)
    return ClusterContext(
        dataset=Dataset(records if records is not None else make_records(), name="test"),
        variables=["a", "b"],
        views=registry,
    )
