"""Proofs by exhaustion on small register banks.

`reachable_states` walks the whole state graph breadth first instead of sampling
it. `coverage_counterexamples` checks `valid_end_state` against a brute force
search for C distinct single-bit registers, one per column, over every R x C
matrix.
"""
from collections import deque
from itertools import combinations

from .layout import check_dimensions, valid_end_state
from .neighbors import neighbors
from .xmatrix import XMatrix


def reachable_states(start, pairing="ordered", depth_limit=None, is_end_state=valid_end_state):
    """Returns (states, end_states, depth) reachable from `start`.

    `depth` is the number of breadth-first layers expanded.
    """
    start_key = start.to_int()
    visited = {start_key: start}
    q = deque([start])
    depth = 0
    while q and (depth_limit is None or depth < depth_limit):
        for _ in range(len(q)):
            cur = q.popleft()
            for nb in neighbors(cur, pairing):
                key = nb.to_int()
                if key not in visited:
                    visited[key] = nb
                    q.append(nb)
        depth += 1
    states = set(visited.values())
    return states, {x for x in states if is_end_state(x)}, depth


def has_distinct_cover(x):
    """Brute force: is there a set of C distinct rows, each a single 1, one per column?"""
    cells = x.to_array()
    for rows in combinations(range(x.rows), x.cols):
        picked = cells[list(rows)]
        if (picked.sum(axis=1) == 1).all() and (picked.sum(axis=0) == 1).all():
            return True
    return False


def all_matrices(rows, cols):
    for value in range(1 << (rows * cols)):
        yield XMatrix.from_int(value, rows, cols)


def coverage_counterexamples(rows, cols):
    """Every R x C matrix on which `valid_end_state` and `has_distinct_cover` disagree."""
    check_dimensions(rows, cols)
    return [x for x in all_matrices(rows, cols) if valid_end_state(x) != has_distinct_cover(x)]


if __name__ == "__main__":
    for r, c in [(2, 2), (3, 2), (4, 2), (4, 4)]:
        bad = coverage_counterexamples(r, c)
        print(f"R={r}, C={c}: {len(bad)} counterexamples")
    states, end_states, depth = reachable_states(XMatrix.identity(4))
    print("Reachable from 4x4 identity:", len(states), "end states:", len(end_states), "depth:", depth)
