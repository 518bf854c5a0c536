from __future__ import annotations

import numpy as np
import pytest

from cluster_views.analysis.formatting import format_records
from cluster_views.analysis.labels import write_labels
from cluster_views.core.dataset import Dataset
from cluster_views.core.exceptions import LabelLengthMismatch


def _make_dataset():
    return Dataset([{"x": 1.0}, {"x": 2.0}, {"x": 3.0}])


def test_write_labels_sets_display_strings_in_place():
    ds = _make_dataset()
    rows = list(ds)

    write_labels(ds, np.array([0, 2, 10]))

    assert [row["cluster"] for row in ds] == ["0", "2", "10"]
    # same dict objects were updated
    assert rows[1] is ds[1]


def test_write_labels_is_idempotent():
    once = _make_dataset()
    twice = _make_dataset()

    write_labels(once, [1, 0, 1])
    write_labels(twice, [1, 0, 1])
    write_labels(twice, [1, 0, 1])

    assert list(once) == list(twice)


def test_write_labels_overwrites_previous_cluster():
    ds = _make_dataset()
    write_labels(ds, [0, 0, 0])
    write_labels(ds, [1, 1, 0])

    assert [row["cluster"] for row in ds] == ["1", "1", "0"]


def test_length_mismatch_raises_without_touching_rows():
    ds = _make_dataset()

    with pytest.raises(LabelLengthMismatch):
        write_labels(ds, [0, 1])

    assert all("cluster" not in row for row in ds)


def test_format_records_coerces_numeric_strings_but_not_cluster():
    ds = Dataset(
        [
            {"x": "1.5", "n": "7", "name": "abc", "cluster": "1", "empty": ""},
        ]
    )

    format_records(ds)

    row = ds[0]
    assert row["x"] == 1.5
    assert row["n"] == 7
    assert row["name"] == "abc"
    assert row["cluster"] == "1"
    assert row["empty"] == ""
