from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from cluster_views.ui.config import AppConfig
from cluster_views.ui.layout.build_controls_panel import build_controls_panel
from cluster_views.ui.layout.build_views_panel import build_views_panel


def build_layout(ctx: AppConfig) -> dbc.Container:
    ctx.validate()

    navbar = dbc.NavbarSimple(
        brand=ctx.global_config.ui_title,
        color="primary",
        dark=True,
        className="mb-3",
    )

    return dbc.Container(
        fluid=True,
        className="cv-root",
        children=[
            navbar,
            dbc.Row(
                [
                    dbc.Col(build_controls_panel(ctx), width=3),
                    dbc.Col(build_views_panel(ctx.context.views), width=9),
                ]
            ),
            html.Footer(
                f"Dataset: {ctx.context.dataset.name} ({len(ctx.context.dataset)} rows)",
                className="small text-muted mt-2",
            ),
        ],
    )
