from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output, State

from cluster_views.analysis.engine import ClusterOptions
from cluster_views.core.exceptions import ClusterViewsError
from cluster_views.services.cluster_service import cluster
from cluster_views.ui.ids import IDs, graph_id

if TYPE_CHECKING:
    from cluster_views.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}\n\n{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while clustering.", details)


def run_clustering(
    ctx: AppConfig,
    k: Any,
    variables: Optional[List[str]],
    initialization: Optional[str],
    seed: Any,
    palette: Optional[str],
    color_targets: Optional[List[str]],
    options: Optional[List[str]],
) -> tuple[list[go.Figure], str]:
    """
    Run one clustering pass against the app's context and collect each view's figure.

    Runs are serialised on the context lock; a second click while a run is
    in flight waits for it instead of racing on the shared dataset.
    """
    cluster_ctx = ctx.context
    defaults = ctx.global_config.clustering
    options = options or []

    try:
        k = int(k)
    except (TypeError, ValueError):
        figures = [view.figure for view in cluster_ctx.views]
        return figures, "k must be a positive integer."

    cluster_options = ClusterOptions(
        max_iterations=defaults.options.max_iterations,
        tolerance=defaults.options.tolerance,
        initialization=initialization or defaults.options.initialization,
        seed=int(seed) if seed is not None else None,
    )

    with cluster_ctx.lock:
        try:
            result = cluster(
                cluster_ctx,
                k,
                color_targets=color_targets or [],
                variables=variables or None,
                palette=palette,
                options=cluster_options,
                standardize="standardize" in options,
                hide_cluster_axis="hide_cluster_axis" in options,
            )
        except (ClusterViewsError, ValueError, KeyError) as exc:
            logger.warning("cluster_failed", extra={"k": k, "error": str(exc)})
            figures = [view.figure for view in cluster_ctx.views]
            return figures, f"Clustering failed: {exc}"
        except Exception:
            logger.exception("Error in run_clustering", extra={"k": k})
            figures = [
                _error_figure("If this keeps happening, grab the logs and open an issue.")
                for _ in cluster_ctx.views
            ]
            return figures, "Clustering failed with an unexpected error."

        figures = [view.figure for view in cluster_ctx.views]

    sizes = ", ".join(f"{i}: {n}" for i, n in enumerate(result.sizes()))
    status = (
        f"k={result.k}, {result.iterations} iterations, "
        f"inertia {result.inertia:.3f} (sizes {sizes})"
    )
    return figures, status


def register_cluster_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    view_ids = ctx.context.views.ids()

    @app.callback(
        [Output(graph_id(view_id), "figure") for view_id in view_ids]
        + [Output(IDs.Status.RUN_STATUS, "children")],
        Input(IDs.Control.RUN_BTN, "n_clicks"),
        State(IDs.Control.K_INPUT, "value"),
        State(IDs.Control.VARIABLES_SELECT, "value"),
        State(IDs.Control.INIT_SELECT, "value"),
        State(IDs.Control.SEED_INPUT, "value"),
        State(IDs.Control.PALETTE_SELECT, "value"),
        State(IDs.Control.COLOR_TARGETS, "value"),
        State(IDs.Control.OPTIONS_CHECKLIST, "value"),
        prevent_initial_call=True,
    )
    def on_run_clicked(_n_clicks, k, variables, initialization, seed, palette, color_targets, options):
        figures, status = run_clustering(
            ctx, k, variables, initialization, seed, palette, color_targets, options
        )
        return [*figures, status]
