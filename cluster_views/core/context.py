from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, List

from .dataset import Dataset
from .view_registry import ViewRegistry


@dataclass
class ClusterContext:
    """
    Shared state a clustering run operates on: the dataset, the default
    clustering variables, the per-view hidden-field map and the view registry.

    Passed by reference into ``cluster()`` instead of living in module-level
    globals. A run mutates the dataset, partition and views in place, so
    callers must hold ``lock`` (or otherwise serialise runs) for its duration.
    """
    dataset: Dataset
    variables: List[str] = field(default_factory=list)
    partition: Dict[str, List[str]] = field(default_factory=dict)
    views: ViewRegistry = field(default_factory=ViewRegistry)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.ensure_partition()

    def ensure_partition(self) -> Dict[str, List[str]]:
        """Make sure every registered view has a (possibly empty) hidden-field entry."""
        for view_id in self.views.ids():
            self.partition.setdefault(view_id, [])
        return self.partition

    def hide_field(self, field_name: str) -> None:
        """Add ``field_name`` to every view's hidden set, without duplicates."""
        for hidden in self.ensure_partition().values():
            if field_name not in hidden:
                hidden.append(field_name)
