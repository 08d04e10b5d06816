from .layout import has_plaintext


def ordered_pairs(num_rows):
    for i in range(num_rows):
        for j in range(num_rows):
            if i != j:
                yield i, j


def triangular_pairs(num_rows):
    # only ever xors a later register into an earlier one
    for i in range(num_rows - 1):
        for j in range(i + 1, num_rows):
            yield i, j


PAIRINGS = {
    "ordered": ordered_pairs,
    "triangular": triangular_pairs,
}


def get_pairing(pairing):
    if callable(pairing):
        return pairing
    try:
        return PAIRINGS[pairing]
    except KeyError:
        raise ValueError(f"Unknown pairing {pairing!r}, expected one of {sorted(PAIRINGS)}") from None


def neighbors(x, pairing="ordered"):
    """All states one `add_row` away from `x` that keep its rank and expose no plaintext."""
    pairs = get_pairing(pairing)
    rank = x.rank()
    candidates = []
    for i, j in pairs(x.rows):
        y = x.copy()
        y.add_row(i, j)
        if y.rank() != rank or has_plaintext(y):
            continue
        candidates.append(y)
    return candidates
