from __future__ import annotations

import numbers
from typing import Any, Dict, List

import plotly.graph_objs as go

from cluster_views.core.base_view import BaseChartView


class ParcoordsView(BaseChartView):
    """
    Parallel coordinates plot.

    - One dimension per visible axis (hidden axes are dropped)
    - Numeric axes use their values directly
    - Categorical axes (e.g. 'cluster') are encoded as integer codes with tick labels
    - Line color comes from the installed color function via a discrete colorscale
    """

    kind = "parcoords"
    default_label = "Parallel Coordinates"

    def _dimension(self, axis: str) -> Dict[str, Any]:
        values = self.column(axis)
        if all(isinstance(v, numbers.Number) for v in values):
            return dict(label=axis, values=values)

        categories = sorted({str(v) for v in values}, key=_natural_key)
        codes = {c: i for i, c in enumerate(categories)}
        return dict(
            label=axis,
            values=[codes[str(v)] for v in values],
            tickvals=list(range(len(categories))),
            ticktext=categories,
        )

    def _line(self) -> Dict[str, Any]:
        colors = self.point_colors()
        if colors is None:
            return dict(color="#1f77b4")

        # Parcoords only takes numeric colors, so map each distinct color to a
        # code and build a stepped colorscale over those codes
        distinct: List[str] = list(dict.fromkeys(colors))
        codes = [distinct.index(c) for c in colors]
        if len(distinct) == 1:
            return dict(color=distinct[0])

        step = 1.0 / len(distinct)
        scale = []
        for i, color in enumerate(distinct):
            scale.append([i * step, color])
            scale.append([(i + 1) * step if i < len(distinct) - 1 else 1.0, color])
        return dict(
            color=codes,
            colorscale=scale,
            cmin=-0.5,
            cmax=len(distinct) - 0.5,
            showscale=False,
        )

    def render_figure(self) -> go.Figure:
        axes = self.visible_axes
        if not axes:
            return self.empty_figure(f"{self.label} (all axes hidden)")

        fig = go.Figure(
            go.Parcoords(
                line=self._line(),
                dimensions=[self._dimension(axis) for axis in axes],
            )
        )
        fig.update_layout(title=self.label, margin=dict(l=60, r=60, t=60, b=40))
        return fig


def _natural_key(value: str):
    try:
        return (0, float(value), value)
    except ValueError:
        return (1, 0.0, value)
