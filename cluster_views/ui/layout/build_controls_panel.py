from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from cluster_views.analysis.engine import INIT_METHODS
from cluster_views.core.palette import DEFAULT_SCHEME, available_schemes
from cluster_views.ui.config import AppConfig
from cluster_views.ui.ids import IDs


def build_controls_panel(ctx: AppConfig) -> dbc.Card:
    defaults = ctx.global_config.clustering
    cluster_ctx = ctx.context
    initialization = defaults.options.initialization

    options_value = []
    if defaults.standardize:
        options_value.append("standardize")
    if defaults.hide_cluster_axis:
        options_value.append("hide_cluster_axis")

    return dbc.Card(
        [
            dbc.CardHeader(html.Strong("Clustering"), className="p-2"),
            dbc.CardBody(
                [
                    dbc.Label("Number of clusters (k)"),
                    dbc.Input(id=IDs.Control.K_INPUT, type="number", min=1, step=1, value=defaults.k),

                    dbc.Label("Variables", className="mt-3"),
                    dcc.Dropdown(
                        id=IDs.Control.VARIABLES_SELECT,
                        options=[{"label": f, "value": f} for f in cluster_ctx.dataset.fields],
                        value=list(cluster_ctx.variables),
                        multi=True,
                    ),

                    dbc.Label("Initialization", className="mt-3"),
                    dcc.Dropdown(
                        id=IDs.Control.INIT_SELECT,
                        options=[{"label": m, "value": m} for m in INIT_METHODS],
                        value=initialization if isinstance(initialization, str) else INIT_METHODS[0],
                        clearable=False,
                    ),

                    dbc.Label("Seed", className="mt-3"),
                    dbc.Input(id=IDs.Control.SEED_INPUT, type="number", step=1, value=defaults.options.seed),

                    dbc.Label("Palette", className="mt-3"),
                    dcc.Dropdown(
                        id=IDs.Control.PALETTE_SELECT,
                        options=[{"label": s, "value": s} for s in available_schemes()],
                        value=defaults.palette or DEFAULT_SCHEME,
                        clearable=False,
                    ),

                    dbc.Label("Color views", className="mt-3"),
                    dbc.Checklist(
                        id=IDs.Control.COLOR_TARGETS,
                        options=[{"label": v.label, "value": v.id} for v in cluster_ctx.views],
                        value=list(defaults.color_targets),
                    ),

                    dbc.Checklist(
                        id=IDs.Control.OPTIONS_CHECKLIST,
                        className="mt-3",
                        options=[
                            {"label": "Standardize variables", "value": "standardize"},
                            {"label": "Hide cluster axis", "value": "hide_cluster_axis"},
                        ],
                        value=options_value,
                        switch=True,
                    ),

                    dbc.Button("Run clustering", id=IDs.Control.RUN_BTN, color="primary", className="mt-3 w-100"),
                    html.Div(id=IDs.Status.RUN_STATUS, className="mt-2 small text-muted"),
                ]
            ),
        ],
        className="cv-sidebar",
    )
