from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from cluster_views.core.view_registry import ViewRegistry
from cluster_views.ui.ids import graph_id


def build_views_panel(views: ViewRegistry) -> html.Div:
    cards = []
    for view in views:
        # initial render so the graphs show the raw data before any clustering
        if view.records:
            view.create_axes().render()
        cards.append(
            dbc.Card(
                [
                    dbc.CardHeader(html.Strong(view.label), className="p-2"),
                    dbc.CardBody(
                        dcc.Loading(
                            type="default",
                            children=dcc.Graph(
                                id=graph_id(view.id),
                                figure=view.figure,
                                style={"height": "450px"},
                                config={"responsive": True},
                            ),
                        )
                    ),
                ],
                className="cv-view-card mb-3",
            )
        )
    return html.Div(cards)
