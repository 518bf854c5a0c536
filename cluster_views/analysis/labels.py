from __future__ import annotations

from typing import Sequence

from cluster_views.core.dataset import Dataset
from cluster_views.core.exceptions import LabelLengthMismatch

CLUSTER_FIELD = "cluster"


def write_labels(dataset: Dataset, labels: Sequence[int], field: str = CLUSTER_FIELD) -> Dataset:
    """
    Write cluster indices onto the rows of ``dataset`` in place, as display
    strings ("0", "1", ...).

    The lengths are checked before any row is touched: a mismatch means rows
    were dropped or reordered upstream and must not be zipped silently.
    """
    if len(labels) != len(dataset):
        raise LabelLengthMismatch(len(labels), len(dataset))

    for row, label in zip(dataset, labels):
        row[field] = str(int(label))
    return dataset
