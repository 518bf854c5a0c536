from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from cluster_views.config.loader import load_workspace
from cluster_views.config.validation import validate_context
from cluster_views.ui.callbacks.callbacks_cluster import register_cluster_callbacks
from cluster_views.ui.config import AppConfig
from cluster_views.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config_path: Path | str = Path("config/workspace.json")) -> Dash:
    config_path = Path(config_path)

    # 1) Load Config + clustering context
    global_config, cluster_ctx = load_workspace(config_path)
    validate_context(cluster_ctx, global_config.clustering.color_targets)

    # 2) Push the raw data into every view so the first paint shows something
    for view in cluster_ctx.views:
        view.set_data(cluster_ctx.dataset.records)
        view.hide_axis(cluster_ctx.partition.get(view.id, []))

    # 3) App Context
    ctx = AppConfig(
        config_path=config_path,
        global_config=global_config,
        context=cluster_ctx,
    )

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    register_cluster_callbacks(app, ctx)

    logger.info(
        "app_created",
        extra={"config": str(config_path), "views": cluster_ctx.views.ids()},
    )
    return app
