"""Random walk over the graph of safe register layouts.

Each step moves to a uniformly random safe neighbor of the current state. The
walk stops when its step budget runs out or when the current state has no safe
neighbors ("stuck").
"""
import logging
from dataclasses import dataclass, field

import numpy as np
from tqdm import tqdm

from .layout import END_STATE_PREDICATES, LayoutError, check_dimensions
from .neighbors import get_pairing, neighbors

_LOGGER = logging.getLogger(__name__)


@dataclass
class WalkResult:
    seen: set = field(default_factory=set)
    end_states: set = field(default_factory=set)
    steps: int = 0
    stuck: bool = False

    def summary(self):
        return {
            "Num Steps": self.steps,
            "Num Seen": len(self.seen),
            "Num End States": len(self.end_states),
            "Stuck": self.stuck,
        }


def get_end_state_predicate(end_state):
    if callable(end_state):
        return end_state
    try:
        return END_STATE_PREDICATES[end_state]
    except KeyError:
        raise ValueError(
            f"Unknown end state check {end_state!r}, expected one of {sorted(END_STATE_PREDICATES)}"
        ) from None


def check_start(start, is_end_state, expect_end_state=None):
    check_dimensions(start.rows, start.cols)
    rank = start.rank()
    if rank != start.cols:
        raise LayoutError(f"Start state must have rank {start.cols}, got {rank}")
    if expect_end_state is not None and is_end_state(start) != expect_end_state:
        raise LayoutError(
            "Start state is already an end state" if is_end_state(start)
            else "Start state is not an end state"
        )


def random_walk(
        start,
        num_steps,
        rng=None,
        pairing="ordered",
        end_state="coverage",
        expect_end_state=None,
        progress=False,
):
    is_end_state = get_end_state_predicate(end_state)
    pairs = get_pairing(pairing)
    check_start(start, is_end_state, expect_end_state)
    rng = np.random.default_rng() if rng is None else rng

    result = WalkResult()
    x = start.copy()
    for _ in tqdm(range(num_steps), disable=not progress):
        if x not in result.seen and is_end_state(x):
            _LOGGER.info("Reached valid end-state:\n%s", x.serialize())
            result.end_states.add(x)
        result.seen.add(x)
        result.steps += 1
        candidates = neighbors(x, pairs)
        if not candidates:
            _LOGGER.info("Stuck!")
            result.stuck = True
            break
        x = candidates[rng.integers(len(candidates))]

    _LOGGER.info("Num seen: %d; num end states: %d", len(result.seen), len(result.end_states))
    return result


def merge_results(results):
    """Union of independent walks. `stuck` is set if any of them got stuck."""
    merged = WalkResult()
    for result in results:
        merged.seen |= result.seen
        merged.end_states |= result.end_states
        merged.steps += result.steps
        merged.stuck = merged.stuck or result.stuck
    return merged
