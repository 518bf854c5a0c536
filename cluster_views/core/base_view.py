from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Optional, Sequence

import plotly.graph_objs as go

from .dataset import Record

ColorFunction = Callable[[Record], str]


class BaseChartView(ABC):
    """
    Abstract base class for all linked chart views.

    Defines the capability contract the view synchronizer drives:
    - 'set_data'    - push the (shared) records into the view
    - 'render'      - rebuild the view's figure from its current state
    - 'create_axes' - rebuild the axis list from the current field list
    - 'update_axes' - set the axis-position animation duration
    - 'hide_axis'   - hide a set of fields from the axes
    - 'set_color'   - install a per-point color function

    Every capability returns ``self`` so calls can be chained.
    """

    kind: str = None
    default_label: str = None

    def __init__(self, view_id: str, label: Optional[str] = None):
        self.id = view_id
        self.label = label or self.default_label or view_id
        self.records: List[Record] = []
        self.axes: List[str] = []
        self.hidden: List[str] = []
        self.color_fn: Optional[ColorFunction] = None
        self.axis_duration: int = 500
        self.figure: go.Figure = self.empty_figure(f"{self.label} (no data)")

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------
    def set_data(self, records: Sequence[Record]) -> BaseChartView:
        self.records = list(records)
        return self

    def create_axes(self) -> BaseChartView:
        fields: dict[str, None] = {}
        for row in self.records:
            for key in row:
                fields.setdefault(key, None)
        self.axes = list(fields)
        return self

    def update_axes(self, duration: int = 500) -> BaseChartView:
        self.axis_duration = int(duration)
        return self

    def hide_axis(self, fields: Iterable[str]) -> BaseChartView:
        """Hiding a field with no axis is a no-op; it stays recorded for later axis rebuilds."""
        self.hidden = list(dict.fromkeys(fields))
        return self

    def set_color(self, color_fn: Optional[ColorFunction]) -> BaseChartView:
        self.color_fn = color_fn
        return self

    def render(self, axis_duration: Optional[int] = None) -> BaseChartView:
        if axis_duration is not None:
            self.update_axes(axis_duration)
        if not self.records:
            self.figure = self.empty_figure(f"{self.label} (no data)")
        else:
            self.figure = self.render_figure()
            self.figure.update_layout(transition={"duration": self.axis_duration})
        return self

    # ------------------------------------------------------------------
    # Per-view figure building
    # ------------------------------------------------------------------
    @abstractmethod
    def render_figure(self) -> go.Figure:
        """
        Build the Plotly figure for the current records/axes/colors.
        Only called when the view holds at least one record.
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    @property
    def visible_axes(self) -> List[str]:
        hidden = set(self.hidden)
        return [axis for axis in self.axes if axis not in hidden]

    def numeric_axes(self) -> List[str]:
        return [
            axis
            for axis in self.visible_axes
            if all(isinstance(row.get(axis), numbers.Number) for row in self.records)
        ]

    def point_colors(self) -> Optional[List[str]]:
        if self.color_fn is None:
            return None
        return [self.color_fn(row) for row in self.records]

    def column(self, field: str) -> List[Any]:
        return [row.get(field) for row in self.records]

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
