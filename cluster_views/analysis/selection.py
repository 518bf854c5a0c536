from __future__ import annotations

from typing import List, Sequence

import numpy as np

from cluster_views.core.dataset import Dataset
from cluster_views.core.exceptions import InvalidFieldValue


def _to_number(value, field: str, row: int) -> float:
    if isinstance(value, bool) or value is None:
        raise InvalidFieldValue(field, row=row, value=value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidFieldValue(field, row=row, value=value) from None
    if np.isnan(number):
        raise InvalidFieldValue(field, row=row, value=value)
    return number


def ordered_fields(dataset: Dataset, variables: Sequence[str]) -> List[str]:
    """
    Requested fields in dataset column order, so the matrix layout doesn't
    depend on how the caller ordered ``variables``.
    """
    wanted = set(variables)
    return [f for f in dataset.fields if f in wanted]


def validate_fields(dataset: Dataset, variables: Sequence[str]) -> List[str]:
    """
    Fail fast unless every requested field exists in every row and is numeric.

    :return: the fields in matrix column order
    Raises:
        InvalidFieldValue: first missing or non-numeric value found
    """
    for field in variables:
        if not dataset.has_field(field):
            raise InvalidFieldValue(field)

    fields = ordered_fields(dataset, variables)
    for i, row in enumerate(dataset):
        for field in fields:
            if field not in row:
                raise InvalidFieldValue(field, row=i, value=None)
            _to_number(row[field], field, i)
    return fields


def select_matrix(dataset: Dataset, variables: Sequence[str]) -> np.ndarray:
    """
    Extract an ``n x d`` float matrix of ``variables`` from the dataset rows.

    Row ``i`` of the result corresponds to ``dataset[i]``; columns follow
    :func:`ordered_fields`.
    """
    fields = validate_fields(dataset, variables)
    matrix = np.empty((len(dataset), len(fields)), dtype=float)
    for i, row in enumerate(dataset):
        for j, field in enumerate(fields):
            matrix[i, j] = _to_number(row[field], field, i)
    return matrix
