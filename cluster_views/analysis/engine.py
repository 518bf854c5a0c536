from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import numpy as np
from sklearn.cluster import KMeans

from cluster_views.core.exceptions import InsufficientData

DistanceFunction = Callable[[np.ndarray, np.ndarray], float]
Initialization = Union[str, Sequence[Sequence[float]], np.ndarray]

INIT_METHODS = ("k-means++", "random", "most-distant")
_INIT_ALIASES = {
    "kmeans++": "k-means++",
    "k-means++": "k-means++",
    "random": "random",
    "most-distant": "most-distant",
    "mostdistant": "most-distant",
    "farthest": "most-distant",
}


@dataclass
class ClusterOptions:
    """
    Options bag for a k-means run.

    - max_iterations: cap on Lloyd iterations
    - tolerance: relative convergence tolerance; a run stops once the squared centroid shift
      falls to ``tolerance * mean per-feature variance`` (scikit-learn's rule, used on both paths)
    - initialization: "k-means++", "random", "most-distant", or explicit k x d seed centroids
    - seed: random seed; identical inputs + seed give identical output
    - distance_function: optional ``f(a, b) -> float``; defaults to squared Euclidean
    """
    max_iterations: int = 100
    tolerance: float = 1e-6
    initialization: Initialization = "k-means++"
    seed: Optional[int] = None
    distance_function: Optional[DistanceFunction] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ClusterOptions:
        return cls(
            max_iterations=int(data.get("max_iterations", 100)),
            tolerance=float(data.get("tolerance", 1e-6)),
            initialization=data.get("initialization", "k-means++"),
            seed=data.get("seed"),
        )


@dataclass
class ClusterResult:
    """
    Output of one k-means run.

    ``labels[i]`` is the cluster of matrix row ``i``; ``errors[c]`` is the
    sum of squared distances of the points assigned to centroid ``c``.
    """
    labels: np.ndarray
    centroids: np.ndarray
    errors: List[float]
    iterations: int
    inertia: float = field(init=False)

    def __post_init__(self) -> None:
        self.inertia = float(sum(self.errors))

    @property
    def k(self) -> int:
        return int(self.centroids.shape[0])

    def sizes(self) -> List[int]:
        return np.bincount(self.labels, minlength=self.k).tolist()


def squared_euclidean(a: np.ndarray, b: np.ndarray) -> float:
    diff = np.asarray(a, dtype=float) - np.asarray(b, dtype=float)
    return float(np.dot(diff, diff))


def scaled_tolerance(X: np.ndarray, tolerance: float) -> float:
    """Absolute bound on the squared centroid shift, as scikit-learn's KMeans derives it from ``tol``."""
    if tolerance == 0:
        return 0.0
    return float(np.mean(np.var(X, axis=0)) * tolerance)


def _normalise_init(initialization: Initialization) -> Union[str, np.ndarray]:
    if isinstance(initialization, str):
        key = initialization.strip().lower()
        if key not in _INIT_ALIASES:
            raise ValueError(
                f"Unknown initialization '{initialization}'. "
                f"Expected one of {INIT_METHODS} or explicit centroids"
            )
        return _INIT_ALIASES[key]
    return np.asarray(initialization, dtype=float)


class KMeansEngine:
    """
    k-means partitioning of an ``n x d`` matrix.

    The default (squared Euclidean) path is scikit-learn's ``KMeans`` with a
    single initialisation so results are reproducible under a fixed seed.
    scikit-learn has no pluggable metric, so a custom ``distance_function``
    runs plain Lloyd iterations with that metric instead.
    """

    def __init__(self, options: Optional[ClusterOptions] = None):
        self.options = options or ClusterOptions()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def fit(self, X: np.ndarray, k: int) -> ClusterResult:
        X = self._validate_input(X)
        if k < 1:
            raise ValueError(f"k must be a positive integer, got {k}")
        n = X.shape[0]
        if n < k:
            raise InsufficientData(n, k)

        rng = np.random.default_rng(self.options.seed)
        init = self._initial_centroids(X, k, rng)

        if self.options.distance_function is None:
            labels, centroids, iterations = self._fit_sklearn(X, k, init)
        else:
            if isinstance(init, str):
                init = self._sample_init(X, k, init, rng)
            labels, centroids, iterations = self._fit_lloyd(X, init)

        errors = [
            float(((X[labels == c] - centroids[c]) ** 2).sum())
            for c in range(k)
        ]
        return ClusterResult(
            labels=labels.astype(int),
            centroids=centroids,
            errors=errors,
            iterations=int(iterations),
        )

    # ------------------------------------------------------------------
    # Initialisation
    # ------------------------------------------------------------------
    def _initial_centroids(self, X: np.ndarray, k: int, rng: np.random.Generator):
        init = _normalise_init(self.options.initialization)
        if isinstance(init, np.ndarray):
            if init.shape != (k, X.shape[1]):
                raise ValueError(
                    f"Initial centroids must have shape {(k, X.shape[1])}, got {init.shape}"
                )
            return init
        if init == "most-distant":
            return self._most_distant(X, k, rng)
        return init

    def _most_distant(self, X: np.ndarray, k: int, rng: np.random.Generator) -> np.ndarray:
        """First centroid at random, then repeatedly the point farthest from its nearest centroid."""
        distance = self.options.distance_function or squared_euclidean
        chosen = [int(rng.integers(X.shape[0]))]
        nearest = np.array([distance(x, X[chosen[0]]) for x in X])
        while len(chosen) < k:
            idx = int(np.argmax(nearest))
            chosen.append(idx)
            nearest = np.minimum(nearest, [distance(x, X[idx]) for x in X])
        return X[chosen].copy()

    def _sample_init(self, X: np.ndarray, k: int, method: str, rng: np.random.Generator) -> np.ndarray:
        distance = self.options.distance_function or squared_euclidean
        n = X.shape[0]
        if method == "random":
            return X[rng.choice(n, size=k, replace=False)].copy()

        # k-means++ under the configured metric
        chosen = [int(rng.integers(n))]
        nearest = np.array([distance(x, X[chosen[0]]) for x in X])
        while len(chosen) < k:
            total = nearest.sum()
            if total <= 0:
                remaining = [i for i in range(n) if i not in chosen]
                idx = int(rng.choice(remaining))
            else:
                idx = int(rng.choice(n, p=nearest / total))
            chosen.append(idx)
            nearest = np.minimum(nearest, [distance(x, X[idx]) for x in X])
        return X[chosen].copy()

    # ------------------------------------------------------------------
    # Fitting
    # ------------------------------------------------------------------
    def _fit_sklearn(self, X: np.ndarray, k: int, init):
        model = KMeans(
            n_clusters=k,
            init=init,
            n_init=1,
            max_iter=self.options.max_iterations,
            tol=self.options.tolerance,
            random_state=self.options.seed,
        )
        model.fit(X)
        return model.labels_, model.cluster_centers_, model.n_iter_

    def _fit_lloyd(self, X: np.ndarray, centroids: np.ndarray):
        distance = self.options.distance_function
        centroids = np.array(centroids, dtype=float)
        labels = np.zeros(X.shape[0], dtype=int)
        iterations = 0
        tol = scaled_tolerance(X, self.options.tolerance)

        for iterations in range(1, self.options.max_iterations + 1):
            dists = np.array([[distance(x, c) for c in centroids] for x in X])
            labels = dists.argmin(axis=1)

            updated = centroids.copy()
            for c in range(centroids.shape[0]):
                members = X[labels == c]
                # empty cluster keeps its previous centroid
                if len(members):
                    updated[c] = members.mean(axis=0)

            shift = float(((updated - centroids) ** 2).sum())
            centroids = updated
            if shift <= tol:
                break

        return labels, centroids, iterations

    @staticmethod
    def _validate_input(X) -> np.ndarray:
        arr = np.asarray(X, dtype=float)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2D matrix, got shape {arr.shape}")
        return arr
