"""Register layouts and the safety / end-state predicates.

Columns come in masked pairs (2p, 2p + 1): a cipher value and the key it is
xor'd with. A register holding exactly both halves of one pair holds the
unmasked value.
"""

import numpy as np

from .xmatrix import XMatrix


class LayoutError(ValueError):
    pass


def check_dimensions(num_registers, num_values):
    if num_values <= 0:
        raise LayoutError(f"C (num cipher/key registers) must be positive, got {num_values}")
    if num_values % 2 != 0:
        raise LayoutError(f"C (num cipher/key registers) must be even, got {num_values}")
    if num_registers < num_values:
        raise LayoutError(
            f"R (num physical registers) must be at least C (num cipher/key registers), "
            f"got R={num_registers}, C={num_values}"
        )


def default_layout(num_registers, num_values):
    """Unpermuted layout for C/2 cipher-key pairs in R physical registers."""
    check_dimensions(num_registers, num_values)
    x = XMatrix(num_registers, num_values)
    for i in range(num_values):
        x.set(i, i, 1)
    return x


def has_plaintext(x):
    """Checks if any physical register holds a single cipher/key pair xor'd together."""
    if x.cols % 2 != 0:
        raise LayoutError(f"C (num cipher/key registers) must be even, got {x.cols}")
    cells = x.to_array()
    for row in cells:
        if row.sum() != 2:
            continue
        for p in range(x.cols // 2):
            if row[2 * p] and row[2 * p + 1]:
                return True
    return False


def valid_end_state(x):
    """True if the single-bit registers between them cover every column."""
    covered = np.zeros(x.cols, dtype=bool)
    for row in x.to_array():
        if row.sum() == 1:
            covered[np.flatnonzero(row)[0]] = True
    return bool(covered.all())


def min_max_row_sum(x):
    if x.cols >= 256:
        raise LayoutError(f"C must be less than 256, got {x.cols}")
    sums = x.to_array().sum(axis=1)
    return int(sums.min()), int(sums.max())


def unpermuted_end_state(x):
    """Narrower check: no register mixes more than one value."""
    return min_max_row_sum(x)[1] == 1


END_STATE_PREDICATES = {
    "coverage": valid_end_state,
    "unpermuted": unpermuted_end_state,
}
