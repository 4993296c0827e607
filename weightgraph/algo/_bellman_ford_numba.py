from __future__ import annotations

import numpy as np
from numba import njit


@njit(cache=True)
def _relax_passes_impl(
    tails: np.ndarray,
    heads: np.ndarray,
    weights: np.ndarray,
    distances: np.ndarray,
    edge_to: np.ndarray,
    passes: int,
) -> int:
    relaxations = 0
    num_edges = tails.shape[0]
    for _ in range(passes):
        for e in range(num_edges):
            v = tails[e]
            w = heads[e]
            candidate = distances[v] + weights[e]
            if distances[w] > candidate:
                distances[w] = candidate
                edge_to[w] = e
            relaxations += 1
    return relaxations


@njit(cache=True)
def _first_violation_impl(
    tails: np.ndarray,
    heads: np.ndarray,
    weights: np.ndarray,
    distances: np.ndarray,
) -> int:
    for e in range(tails.shape[0]):
        if distances[heads[e]] > distances[tails[e]] + weights[e]:
            return e
    return -1


def relax_passes(
    tails: np.ndarray,
    heads: np.ndarray,
    weights: np.ndarray,
    distances: np.ndarray,
    edge_to: np.ndarray,
    passes: int,
) -> int:
    """Relax every edge ``passes`` times in array order, updating in place.

    ``edge_to[w]`` receives the position of the last edge that lowered
    ``distances[w]``. Returns the number of relaxation attempts.
    """

    return int(_relax_passes_impl(tails, heads, weights, distances, edge_to, int(passes)))


def first_violation(
    tails: np.ndarray,
    heads: np.ndarray,
    weights: np.ndarray,
    distances: np.ndarray,
) -> int:
    """Position of the first edge that still admits a relaxation, or -1."""

    return int(_first_violation_impl(tails, heads, weights, distances))


__all__ = ["relax_passes", "first_violation"]
