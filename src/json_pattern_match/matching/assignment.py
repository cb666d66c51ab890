"""One-to-one witness assignment for any-order array matching.

A witness table records which actual elements match which pattern elements.
Turned into a 0/1 cost matrix (``0.0`` for a matching pair), a minimum-cost
assignment from scipy's ``linear_sum_assignment`` is a maximum-cardinality
matching: every zero-cost pair it keeps is one pattern element satisfied by
a distinct actual element.
"""

from __future__ import annotations

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

__all__ = ["hungarian_match", "witness_cost_matrix"]


def witness_cost_matrix(witnesses: list[list[bool]], n_cols: int) -> np.ndarray:
    """Turn a boolean witness table into a 0/1 cost matrix.

    Args:
        witnesses: ``witnesses[i][j]`` is True when actual element ``j``
            matches pattern element ``i``.
        n_cols: Number of actual elements (needed when ``witnesses`` is empty).

    Returns:
        Shape ``(len(witnesses), n_cols)`` float array with ``0.0`` for
        matching pairs and ``1.0`` elsewhere.
    """
    cost = np.ones((len(witnesses), n_cols))
    for i, row in enumerate(witnesses):
        for j, ok in enumerate(row):
            if ok:
                cost[i, j] = 0.0
    return cost


def hungarian_match(
    cost_matrix: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Assign pattern rows to distinct actual columns.

    Args:
        cost_matrix: 0/1 matrix of shape ``(m, n)`` as built by
            ``witness_cost_matrix``.

    Returns:
        Tuple ``(row_ind, col_ind)`` of 1-D integer arrays holding only the
        zero-cost pairs of the optimal assignment.  Empty arrays when no
        pair matches.
    """
    if cost_matrix.size == 0:
        return np.array([], dtype=int), np.array([], dtype=int)

    row_ind, col_ind = linear_sum_assignment(cost_matrix)
    keep = cost_matrix[row_ind, col_ind] == 0.0
    return row_ind[keep], col_ind[keep]
