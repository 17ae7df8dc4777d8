from __future__ import annotations

from typing import List, Sequence, Tuple


def hungarian_min_cost(cost: Sequence[Sequence[int]]) -> Tuple[int, List[int]]:
    """
    Solve the rectangular assignment problem (minimize total cost).

    `cost` has R rows and C columns with R <= C. Every row is matched to a
    distinct column; the returned `assignment[row] = col` minimizes the sum
    of the selected cells over all such matchings. Returns
    `(total_cost, assignment)`. Runs in O(R^2 * C).
    """
    if not cost:
        return 0, []
    n_rows = len(cost)
    n_cols = len(cost[0])
    if any(len(row) != n_cols for row in cost):
        raise ValueError("cost matrix rows must all have the same length")
    if n_rows > n_cols:
        raise ValueError(
            f"cost matrix needs rows <= columns, got {n_rows}x{n_cols}"
        )

    # 1-based potentials; index 0 is the virtual root column.
    u = [0] * (n_rows + 1)
    v = [0] * (n_cols + 1)
    p = [0] * (n_cols + 1)
    way = [0] * (n_cols + 1)

    for i in range(1, n_rows + 1):
        p[0] = i
        j0 = 0
        minv = [float("inf")] * (n_cols + 1)
        used = [False] * (n_cols + 1)
        while True:
            used[j0] = True
            i0 = p[j0]
            src = cost[i0 - 1]
            delta = float("inf")
            j1 = 0
            for j in range(1, n_cols + 1):
                if used[j]:
                    continue
                cur = src[j - 1] - u[i0] - v[j]
                if cur < minv[j]:
                    minv[j] = cur
                    way[j] = j0
                if minv[j] < delta:
                    delta = minv[j]
                    j1 = j
            for j in range(0, n_cols + 1):
                if used[j]:
                    u[p[j]] += delta
                    v[j] -= delta
                else:
                    minv[j] -= delta
            j0 = j1
            if p[j0] == 0:
                break
        while True:
            j1 = way[j0]
            p[j0] = p[j1]
            j0 = j1
            if j0 == 0:
                break

    assignment = [0] * n_rows
    for j in range(1, n_cols + 1):
        i = p[j]
        if i:
            assignment[i - 1] = j - 1
    total = sum(cost[row][col] for row, col in enumerate(assignment))
    return total, assignment
