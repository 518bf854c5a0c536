from __future__ import annotations

from typing import Optional

import plotly.graph_objs as go

from cluster_views.core.base_view import BaseChartView


class ScatterView(BaseChartView):
    """
    2D scatter of two numeric axes

    - X/Y default to the first two visible numeric axes
    - Marker color from the installed color function, if any
    """

    kind = "scatter"
    default_label = "Scatter Plot"

    def __init__(
        self,
        view_id: str,
        label: Optional[str] = None,
        x: Optional[str] = None,
        y: Optional[str] = None,
    ):
        super().__init__(view_id, label)
        self.x = x
        self.y = y

    def _pick_axes(self) -> tuple[Optional[str], Optional[str]]:
        numeric = self.numeric_axes()
        x = self.x if self.x in numeric else None
        y = self.y if self.y in numeric else None
        rest = [a for a in numeric if a not in (x, y)]
        if x is None and rest:
            x = rest.pop(0)
        if y is None and rest:
            y = rest.pop(0)
        return x, y

    def render_figure(self) -> go.Figure:
        x, y = self._pick_axes()
        if x is None or y is None:
            return self.empty_figure(f"{self.label} (needs two numeric axes)")

        marker = dict(size=6)
        colors = self.point_colors()
        if colors is not None:
            marker["color"] = colors

        fig = go.Figure(
            go.Scattergl(
                x=self.column(x),
                y=self.column(y),
                mode="markers",
                marker=marker,
                text=[row.get("cluster") for row in self.records],
            )
        )
        fig.update_layout(
            title=self.label,
            xaxis_title=x,
            yaxis_title=y,
            margin=dict(l=40, r=40, t=40, b=40),
        )
        return fig
