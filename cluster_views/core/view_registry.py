from __future__ import annotations

from typing import Dict, Iterator, List

from .base_view import BaseChartView


class ViewRegistry:
    """
    Ordered registry of chart view instances.

    Purpose:
    - Holds the linked views that a clustering run updates, in the order they were registered
    - Lets the UI layer build one graph per view without a hardcoded list

    Design Notes:
    - Stores instances, not classes: each view keeps its own axes/hidden fields/colors between runs
    - Enforces invariants:
        * only {@link BaseChartView} instances can be registered
        * each view 'id' is unique across the registry
    """

    def __init__(self):
        self._views: Dict[str, BaseChartView] = {}

    def register(self, view: BaseChartView) -> None:
        """
        Register a {@link BaseChartView} with the registry

        :param view: the chart view instance

        Raises:
            TypeError: if view is not a {@link BaseChartView}
            ValueError: if a view with same 'id' already exists
        """
        if not isinstance(view, BaseChartView):
            raise TypeError(f"View {view!r} must be an instance of BaseChartView")

        if view.id in self._views:
            raise ValueError(f"View '{view.id}' already registered")

        self._views[view.id] = view

    def get(self, view_id: str) -> BaseChartView:
        """
        Raises:
            KeyError: if no view with the given id exists in the registry
        """
        try:
            return self._views[view_id]
        except KeyError:
            raise KeyError(f"View '{view_id}' not found")

    def ids(self) -> List[str]:
        return list(self._views)

    def __contains__(self, view_id: object) -> bool:
        return view_id in self._views

    def __iter__(self) -> Iterator[BaseChartView]:
        return iter(list(self._views.values()))

    def __len__(self) -> int:
        return len(self._views)
