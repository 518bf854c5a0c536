from __future__ import annotations

import logging
from typing import Collection, Optional, Sequence

from cluster_views.analysis.engine import ClusterOptions, ClusterResult, KMeansEngine
from cluster_views.analysis.formatting import format_records
from cluster_views.analysis.labels import CLUSTER_FIELD, write_labels
from cluster_views.analysis.selection import select_matrix, validate_fields
from cluster_views.analysis.standardize import standardize as standardize_dataset
from cluster_views.core.context import ClusterContext
from cluster_views.core.exceptions import InsufficientData
from cluster_views.core.palette import Palette, resolve_palette
from cluster_views.services.view_sync import ViewSynchronizer

logger = logging.getLogger(__name__)


def cluster(
    ctx: ClusterContext,
    k: int,
    color_targets: Collection[str] = (),
    variables: Optional[Sequence[str]] = None,
    palette: Palette | str | Sequence[str] | None = None,
    options: Optional[ClusterOptions] = None,
    standardize: bool = True,
    hide_cluster_axis: bool = True,
) -> ClusterResult:
    """
    Partition the context's dataset into ``k`` clusters and push the labels
    into every linked view.

    :param ctx: the shared context; the run needs exclusive access to it
    :param k: number of clusters
    :param color_targets: ids of the views that get cluster colors
    :param variables: numeric fields to cluster on (defaults to ``ctx.variables``)
    :param palette: NamedScheme / CustomPalette (or a scheme name / color list); defaults to D3 category10
    :param options: k-means options (iterations, tolerance, initialization, seed, distance)
    :param standardize: z-score the fields before clustering
    :param hide_cluster_axis: hide the 'cluster' axis on every view
    :return: labels, centroids and per-centroid errors of the run

    Raises:
        InvalidFieldValue: a selected field is missing or non-numeric (nothing mutated)
        InsufficientData: fewer rows than clusters (nothing mutated)
        LabelLengthMismatch: selection/standardization lost track of rows
        ViewUpdateFailure: a view failed mid-sync (earlier views stay updated)
    """
    if variables is None:
        variables = ctx.variables
    variables = list(variables)
    if not variables:
        raise ValueError("No variables selected for clustering")

    unknown = [view_id for view_id in color_targets if view_id not in ctx.views]
    if unknown:
        raise KeyError(f"Unknown color target view(s): {unknown}")

    # everything that can fail on input happens before the dataset is touched
    validate_fields(ctx.dataset, variables)
    if len(ctx.dataset) < k:
        raise InsufficientData(len(ctx.dataset), k)
    color_mapper = resolve_palette(palette)

    source = standardize_dataset(ctx.dataset, variables) if standardize else ctx.dataset
    matrix = select_matrix(source, variables)

    logger.info(
        "cluster_start",
        extra={
            "dataset": ctx.dataset.name,
            "k": k,
            "n_rows": matrix.shape[0],
            "variables": variables,
            "standardize": standardize,
        },
    )

    result = KMeansEngine(options).fit(matrix, k)
    write_labels(ctx.dataset, result.labels)

    logger.info(
        "cluster_done",
        extra={
            "iterations": result.iterations,
            "errors": result.errors,
            "inertia": result.inertia,
            "sizes": result.sizes(),
        },
    )
    logger.debug("centroids: %s", result.centroids.tolist())

    if hide_cluster_axis:
        ctx.hide_field(CLUSTER_FIELD)
    else:
        ctx.ensure_partition()

    format_records(ctx.dataset)
    ViewSynchronizer(ctx.views).sync(
        ctx.dataset.records,
        ctx.partition,
        color_fn=color_mapper.for_record,
        color_targets=set(color_targets),
    )
    return result
