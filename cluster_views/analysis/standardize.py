from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd
from sklearn.preprocessing import StandardScaler

from cluster_views.core.dataset import Dataset


def standardize(dataset: Dataset, fields: Optional[Sequence[str]] = None) -> Dataset:
    """
    Z-score numeric fields into a new Dataset.

    - Mean and (population) variance are computed per field across all rows
    - Only numeric columns are touched; ``fields`` narrows that set further
    - Columns of numeric strings are converted and scaled like any other numeric column
    - Zero-variance columns come out as all zeros
    - Row count, row order and field names are preserved; the input is not mutated
    """
    df = dataset.to_frame()
    if df.empty:
        return dataset.copy()

    candidates = list(fields) if fields is not None else list(df.columns)
    numeric = []
    for col in candidates:
        if col not in df.columns or pd.api.types.is_bool_dtype(df[col]):
            continue
        if not pd.api.types.is_numeric_dtype(df[col]):
            # numeric strings ("2.5") and str/float mixes count as numeric
            converted = pd.to_numeric(df[col], errors="coerce")
            n_valid = converted.notna().sum()
            if n_valid == 0 or n_valid != df[col].notna().sum():
                continue
            df[col] = converted
        numeric.append(col)
    if not numeric:
        return dataset.copy()

    scaler = StandardScaler()
    df[numeric] = scaler.fit_transform(df[numeric].astype(float))

    # keep each row's own key set; absent fields were NaN-padded by the frame
    out = []
    for original, row in zip(dataset, df.to_dict(orient="records")):
        out.append({key: row[key] for key in original})
    return Dataset(out, name=dataset.name)
