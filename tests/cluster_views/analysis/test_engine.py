from __future__ import annotations

import numpy as np
import pytest

from cluster_views.analysis.engine import ClusterOptions, KMeansEngine
from cluster_views.core.exceptions import InsufficientData


def _blobs():
    return np.array(
        [
            [0.0, 0.0],
            [0.0, 1.0],
            [1.0, 0.0],
            [10.0, 10.0],
            [10.0, 11.0],
            [11.0, 10.0],
        ]
    )


def _assert_two_groups(labels):
    assert labels[0] == labels[1] == labels[2]
    assert labels[3] == labels[4] == labels[5]
    assert labels[0] != labels[3]


@pytest.mark.parametrize("k", [1, 2, 3, 6])
def test_labels_have_one_entry_per_row_and_lie_in_range(k):
    X = _blobs()
    result = KMeansEngine(ClusterOptions(seed=0)).fit(X, k)

    assert result.labels.shape == (X.shape[0],)
    assert result.labels.min() >= 0
    assert result.labels.max() < k
    assert result.centroids.shape == (k, X.shape[1])
    assert len(result.errors) == k
    assert result.iterations >= 1


def test_kmeans_pp_separates_blobs_and_reports_errors():
    result = KMeansEngine(ClusterOptions(seed=0)).fit(_blobs(), 2)

    _assert_two_groups(result.labels)
    assert sorted(result.sizes()) == [3, 3]
    # each blob: squared distances to centroid (1/3, 1/3) sum to 4/3
    assert result.errors == pytest.approx([4 / 3, 4 / 3])
    assert result.inertia == pytest.approx(8 / 3)


def test_explicit_centroids_with_seed_are_deterministic():
    options = ClusterOptions(initialization=[[0.0, 0.0], [10.0, 10.0]], seed=7)

    first = KMeansEngine(options).fit(_blobs(), 2)
    second = KMeansEngine(options).fit(_blobs(), 2)

    np.testing.assert_array_equal(first.labels, second.labels)
    np.testing.assert_array_equal(first.centroids, second.centroids)
    assert list(first.labels) == [0, 0, 0, 1, 1, 1]


def test_most_distant_initialization():
    result = KMeansEngine(ClusterOptions(initialization="most-distant", seed=3)).fit(_blobs(), 2)

    _assert_two_groups(result.labels)


def test_random_initialization_is_seeded():
    options = ClusterOptions(initialization="random", seed=11)

    first = KMeansEngine(options).fit(_blobs(), 2)
    second = KMeansEngine(options).fit(_blobs(), 2)

    np.testing.assert_array_equal(first.labels, second.labels)


def test_custom_distance_function():
    def manhattan(a, b):
        return float(np.abs(a - b).sum())

    options = ClusterOptions(
        initialization="most-distant", distance_function=manhattan, seed=1
    )
    first = KMeansEngine(options).fit(_blobs(), 2)
    second = KMeansEngine(options).fit(_blobs(), 2)

    _assert_two_groups(first.labels)
    np.testing.assert_array_equal(first.labels, second.labels)
    np.testing.assert_allclose(first.centroids, second.centroids)


def test_custom_distance_tolerance_is_relative_to_feature_variance():
    def manhattan(a, b):
        return float(np.abs(a - b).sum())

    # the first update moves centroids by ~110 squared units; per-feature variance is ~25
    seeds = [[0.0, 0.0], [1.0, 0.0]]
    loose = ClusterOptions(initialization=seeds, distance_function=manhattan, tolerance=10.0)
    strict = ClusterOptions(initialization=seeds, distance_function=manhattan)

    stopped = KMeansEngine(loose).fit(_blobs(), 2)
    converged = KMeansEngine(strict).fit(_blobs(), 2)

    assert stopped.iterations == 1
    assert list(stopped.labels) == [0, 0, 1, 1, 1, 1]
    assert converged.iterations == 3
    _assert_two_groups(converged.labels)


def test_fewer_rows_than_clusters_raises():
    with pytest.raises(InsufficientData):
        KMeansEngine().fit(_blobs()[:3], 5)


def test_bad_initialization_raises():
    with pytest.raises(ValueError):
        KMeansEngine(ClusterOptions(initialization="sideways")).fit(_blobs(), 2)

    with pytest.raises(ValueError):
        KMeansEngine(ClusterOptions(initialization=[[0.0, 0.0]])).fit(_blobs(), 2)


def test_non_positive_k_raises():
    with pytest.raises(ValueError):
        KMeansEngine().fit(_blobs(), 0)
