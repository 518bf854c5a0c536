from __future__ import annotations

import logging
from enum import Enum
from typing import Collection, Dict, List, Mapping, Optional, Sequence

from cluster_views.core.base_view import BaseChartView, ColorFunction
from cluster_views.core.dataset import Record
from cluster_views.core.exceptions import ViewUpdateFailure
from cluster_views.core.view_registry import ViewRegistry

logger = logging.getLogger(__name__)


class SyncState(str, Enum):
    IDLE = "idle"
    DATA_LOADED = "data_loaded"
    AXES_BUILT = "axes_built"
    COLORED = "colored"
    RENDERED = "rendered"


class ViewSynchronizer:
    """
    Drives every registered view through the same update sequence after a
    clustering run, one view at a time in registry order:

        set_data -> render -> create_axes -> [set_color] -> hide_axis -> render(axis_duration=0)

    - set_color only runs for views in ``color_targets``; the others keep their previous coloring
    - colors are installed before the final render so it picks up the new palette
    - axes are hidden after they are rebuilt

    A failing view aborts the sync with :class:`ViewUpdateFailure`. Views that
    were already updated stay updated; nothing is rolled back.
    """

    def __init__(self, views: ViewRegistry):
        self.views = views
        self.states: Dict[str, SyncState] = {view_id: SyncState.IDLE for view_id in views.ids()}

    def sync(
        self,
        records: Sequence[Record],
        partition: Mapping[str, List[str]],
        color_fn: Optional[ColorFunction] = None,
        color_targets: Collection[str] = (),
    ) -> Dict[str, SyncState]:
        self.states = {view_id: SyncState.IDLE for view_id in self.views.ids()}

        for view in self.views:
            self._sync_view(
                view,
                records,
                hidden=partition.get(view.id, []),
                color_fn=color_fn if view.id in color_targets else None,
            )
        return dict(self.states)

    def _sync_view(
        self,
        view: BaseChartView,
        records: Sequence[Record],
        hidden: List[str],
        color_fn: Optional[ColorFunction],
    ) -> None:
        self._call(view, "set_data", records)
        self.states[view.id] = SyncState.DATA_LOADED

        self._call(view, "render")
        self._call(view, "create_axes")
        self.states[view.id] = SyncState.AXES_BUILT

        if color_fn is not None:
            self._call(view, "set_color", color_fn)
            self.states[view.id] = SyncState.COLORED

        self._call(view, "hide_axis", list(hidden))
        self._call(view, "render", axis_duration=0)
        self.states[view.id] = SyncState.RENDERED

        logger.debug(
            "view_synced",
            extra={"view_id": view.id, "colored": color_fn is not None, "hidden": list(hidden)},
        )

    @staticmethod
    def _call(view: BaseChartView, step: str, *args, **kwargs) -> None:
        try:
            getattr(view, step)(*args, **kwargs)
        except Exception as exc:
            raise ViewUpdateFailure(view.id, step) from exc
