from __future__ import annotations

from typing import Any, Iterable

import pandas as pd

from cluster_views.core.dataset import Dataset

from .labels import CLUSTER_FIELD


def _coerce(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    number = pd.to_numeric(value.strip(), errors="coerce")
    if pd.isna(number) or value.strip() == "":
        return value
    return number.item() if hasattr(number, "item") else number


def format_records(dataset: Dataset, categorical: Iterable[str] = (CLUSTER_FIELD,)) -> Dataset:
    """
    Normalise row values in place before they are handed to chart views:
    numeric-looking strings become numbers so they get a numeric axis.
    Fields in ``categorical`` keep their string labels.
    """
    keep = set(categorical)
    for row in dataset:
        for key, value in row.items():
            if key not in keep:
                row[key] = _coerce(value)
    return dataset
