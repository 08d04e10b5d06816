import logging

import numpy as np
import pytest

from xorpl.layout import LayoutError, default_layout, has_plaintext, unpermuted_end_state, valid_end_state
from xorpl.walk import WalkResult, merge_results, random_walk
from xorpl.xmatrix import XMatrix


def test_walk_reports_valid_end_states():
    start = default_layout(8, 6)
    result = random_walk(start, 300, rng=np.random.default_rng(0), expect_end_state=True)
    assert not result.stuck
    assert result.steps == 300
    assert start in result.end_states
    assert result.end_states <= result.seen
    for x in result.end_states:
        assert valid_end_state(x)
    for x in result.seen:
        assert x.rank() == 6
        assert not has_plaintext(x)


def test_walk_is_reproducible():
    start = default_layout(6, 4)
    a = random_walk(start, 200, rng=np.random.default_rng(42))
    b = random_walk(start, 200, rng=np.random.default_rng(42))
    assert a.seen == b.seen
    assert a.end_states == b.end_states


def test_walk_does_not_mutate_start():
    start = default_layout(6, 4)
    random_walk(start, 50, rng=np.random.default_rng(5))
    assert start == default_layout(6, 4)


def test_walk_stuck(caplog):
    with caplog.at_level(logging.INFO, logger="xorpl.walk"):
        result = random_walk(default_layout(2, 2), 10, rng=np.random.default_rng(0))
    assert result.stuck
    assert result.steps == 1
    assert len(result.seen) == 1
    assert len(result.end_states) == 1
    assert "Stuck!" in caplog.text
    assert "Num seen: 1; num end states: 1" in caplog.text


def test_walk_unpermuted_triangular():
    start = default_layout(8, 6)
    result = random_walk(start, 200, rng=np.random.default_rng(1),
                         pairing="triangular", end_state="unpermuted")
    assert start in result.end_states
    for x in result.end_states:
        assert unpermuted_end_state(x)


def test_walk_rejects_bad_start():
    with pytest.raises(LayoutError):
        random_walk(XMatrix(8, 6), 10)
    with pytest.raises(LayoutError):
        random_walk(XMatrix.identity(3), 10)
    with pytest.raises(LayoutError):
        random_walk(default_layout(8, 6), 10, expect_end_state=False)
    with pytest.raises(ValueError):
        random_walk(default_layout(8, 6), 10, end_state="nope")


def test_merge_results():
    start = default_layout(6, 4)
    results = [random_walk(start, 100, rng=np.random.default_rng(seed)) for seed in range(3)]
    merged = merge_results(results)
    assert merged.seen == set().union(*(r.seen for r in results))
    assert merged.end_states == set().union(*(r.end_states for r in results))
    assert merged.steps == 300
    assert merge_results([]).summary() == WalkResult().summary()
