from __future__ import annotations

from typing import Any, Optional


class ClusterViewsError(Exception):
    """Base exception for all cluster_views errors"""
    pass


class ConfigError(ClusterViewsError):
    """Invalid or inconsistent workspace config"""
    pass


class InvalidFieldValue(ClusterViewsError):
    """
    A field selected for clustering is missing from a row or cannot be
    converted to a number
    """

    def __init__(self, field: str, row: Optional[int] = None, value: Any = None):
        self.field = field
        self.row = row
        self.value = value
        if row is None:
            message = f"Field '{field}' is not present in the dataset"
        else:
            message = f"Field '{field}' in row {row} is not numeric: {value!r}"
        super().__init__(message)


class InsufficientData(ClusterViewsError):
    """Fewer rows than requested clusters"""

    def __init__(self, n_rows: int, k: int):
        self.n_rows = n_rows
        self.k = k
        super().__init__(f"Cannot form {k} clusters from {n_rows} rows")


class LabelLengthMismatch(ClusterViewsError):
    """
    Cluster assignment and dataset disagree on length.
    Always a bug upstream (standardization or selection dropped/reordered rows)
    """

    def __init__(self, n_labels: int, n_rows: int):
        self.n_labels = n_labels
        self.n_rows = n_rows
        super().__init__(
            f"Got {n_labels} cluster labels for a dataset of {n_rows} rows"
        )


class ViewUpdateFailure(ClusterViewsError):
    """A chart view capability call failed during synchronization"""

    def __init__(self, view_id: str, step: str):
        self.view_id = view_id
        self.step = step
        super().__init__(f"View '{view_id}' failed during '{step}'")
