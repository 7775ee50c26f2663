import itertools

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from phcore.data import Simplex, SimplicialComplex


def flag_complex(weights: np.ndarray, max_dimension: int) -> SimplicialComplex:
    """Every vertex subset up to max_dimension, valued by its longest edge."""
    n = weights.shape[0]
    simplices = []
    for k in range(1, max_dimension + 2):
        for vertices in itertools.combinations(range(n), k):
            value = max(
                (weights[u, v] for u, v in itertools.combinations(vertices, 2)),
                default=0.0,
            )
            simplices.append(Simplex(vertices, value))
    return SimplicialComplex(simplices).sort()


@pytest.fixture
def filled_triangle():
    return SimplicialComplex(
        [[0], [1], [2], [0, 1], [0, 2], [1, 2], [0, 1, 2]]
    ).sort()


@pytest.fixture
def hollow_triangle():
    return SimplicialComplex([[0], [1], [2], [0, 1], [0, 2], [1, 2]]).sort()


@pytest.fixture
def two_vertices():
    return SimplicialComplex([([0], 0.0), ([1], 0.0), ([0, 1], 1.0)]).sort()


@pytest.fixture
def random_weights():
    rng = np.random.default_rng(7)
    w = rng.uniform(size=(7, 7))
    return np.triu(w, 1) + np.triu(w, 1).T


@pytest.fixture
def random_flag_complex(random_weights):
    return flag_complex(random_weights, max_dimension=2)


@pytest.fixture
def random_graph(random_weights):
    return flag_complex(random_weights, max_dimension=1)
